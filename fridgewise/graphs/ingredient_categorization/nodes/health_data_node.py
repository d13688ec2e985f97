import time

from ..state.categorization_state import CategorizationState
from ..utils.timing import calculate_ms, log_node_summary


def fetch_health_data(state: CategorizationState, service) -> CategorizationState:
    """
    Load the user's latest stored health data when a uid was supplied.

    The store never raises; a failed fetch leaves health_data as None.
    """
    t0 = time.perf_counter()
    uid = state.get("uid")
    state["health_data"] = service.fetch_health_data(uid) if uid else None

    timing_ms = calculate_ms(t0)
    state["timings"]["health_data_ms"] = timing_ms
    log_node_summary("health_data", True, timing_ms, found=state["health_data"] is not None)
    return state
