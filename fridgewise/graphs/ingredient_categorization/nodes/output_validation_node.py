import logging
import time

from pydantic import ValidationError

from ....models.analysis import IngredientCategorization
from ..state.categorization_state import CategorizationState
from ..utils.timing import calculate_ms, log_node_summary

logger = logging.getLogger(__name__)


def validate_output(state: CategorizationState) -> CategorizationState:
    """
    Check the model output against the categorization shape.

    The structured-output contract is trusted: a mismatch is logged and the
    parsed object is passed through unchanged.
    """
    t0 = time.perf_counter()
    result = state.get("result")
    ok = result is not None
    if isinstance(result, dict):
        try:
            IngredientCategorization(**result)
        except ValidationError as e:
            ok = False
            logger.warning("categorization output does not match schema: %s", e)

    timing_ms = calculate_ms(t0)
    state["timings"]["validate_output_ms"] = timing_ms
    log_node_summary("validate_output", ok, timing_ms)
    return state
