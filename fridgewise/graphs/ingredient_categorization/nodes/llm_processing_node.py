import time

from ....services.shared.gemini.gemini_client import text_part, user_content
from ..state.categorization_state import CategorizationState
from ..utils.timing import calculate_ms, log_node_summary


def categorize_with_gemini(state: CategorizationState, service) -> CategorizationState:
    """
    Node that asks Gemini to split the ingredients into include/exclude.

    Vendor errors and timeouts propagate out of the graph; an unparseable
    response leaves result as None.
    """
    t0 = time.perf_counter()
    contents = user_content([text_part(state["prompt"])])
    state["result"] = service.generate_content(
        state["model"], contents, service.configs["ingredientsAnalysis"]
    )

    timing_ms = calculate_ms(t0)
    state["timings"]["llm_ms"] = timing_ms
    log_node_summary("llm", state["result"] is not None, timing_ms)
    return state
