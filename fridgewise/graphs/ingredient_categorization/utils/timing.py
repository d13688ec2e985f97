import logging
import time

logger = logging.getLogger("fridgewise.graphs")


def calculate_ms(start_time: float) -> float:
    """Calculate elapsed time in milliseconds."""
    return (time.perf_counter() - start_time) * 1000


def log_node_summary(
    node_name: str,
    success: bool,
    timing_ms: float,
    **kwargs
) -> None:
    """
    Log a compact one-line summary of node execution.

    Args:
        node_name: Name of the executed node
        success: Whether the node executed successfully
        timing_ms: Execution time in milliseconds
        **kwargs: Additional key-value pairs to display
    """
    status = "ok" if success else "FAILED"
    extra_info = ""
    if kwargs:
        extra_info = " | " + " | ".join(f"{k}={v}" for k, v in kwargs.items())

    logger.info("%s %s (%.0fms)%s", status, node_name, timing_ms, extra_info)


def log_pipeline_summary(timings: dict, total_ms: float) -> None:
    breakdown = ", ".join(f"{node}={ms:.0f}ms" for node, ms in timings.items())
    logger.info("categorization pipeline total %.0fms [%s]", total_ms, breakdown)
