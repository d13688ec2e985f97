import time

from ....models.analysis import CategorizeRequest
from ..state.categorization_state import CategorizationState
from ..utils.timing import calculate_ms, log_node_summary


def validate_input(state: CategorizationState) -> CategorizationState:
    """Reject malformed input before any external call is made (raises ValidationError)."""
    t0 = time.perf_counter()
    req = CategorizeRequest(
        medicalReportText=state["medical_report_text"],
        ingredients=state["ingredients"],
        uid=state.get("uid"),
    )
    state["ingredients"] = [str(x) for x in req.ingredients]

    timing_ms = calculate_ms(t0)
    state["timings"]["validate_input_ms"] = timing_ms
    log_node_summary("validate_input", True, timing_ms, ingredients=len(state["ingredients"]))
    return state
