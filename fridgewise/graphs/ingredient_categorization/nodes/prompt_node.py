import time

from ..state.categorization_state import CategorizationState
from ..utils.timing import calculate_ms, log_node_summary


def compose_prompt(state: CategorizationState, service) -> CategorizationState:
    t0 = time.perf_counter()
    state["prompt"] = service.compose_categorization_prompt(
        state["medical_report_text"],
        state["ingredients"],
        state.get("health_data"),
    )

    timing_ms = calculate_ms(t0)
    state["timings"]["prompt_ms"] = timing_ms
    log_node_summary("prompt", True, timing_ms, chars=len(state["prompt"]))
    return state
