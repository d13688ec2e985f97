import time
from typing import Any, Dict, List, Optional

from langgraph.graph import StateGraph, END

from .state.categorization_state import CategorizationState
from .nodes.validation_node import validate_input
from .nodes.health_data_node import fetch_health_data
from .nodes.prompt_node import compose_prompt
from .nodes.llm_processing_node import categorize_with_gemini
from .nodes.output_validation_node import validate_output
from .utils.timing import log_pipeline_summary


def build_ingredient_categorization_graph(service):
    """
    Build the categorization graph:
    1. validate_input - checks the request shape
    2. health_data - loads the user's latest stored health data (never fails)
    3. prompt - fills the include/exclude template
    4. llm - structured-output call to Gemini
    5. validate_output - logs schema mismatches in the parsed result

    Args:
        service: AIService providing storage, templates and the Gemini call

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(CategorizationState)

    workflow.add_node("validate_input", validate_input)
    workflow.add_node("health_data", lambda state: fetch_health_data(state, service))
    workflow.add_node("prompt", lambda state: compose_prompt(state, service))
    workflow.add_node("llm", lambda state: categorize_with_gemini(state, service))
    workflow.add_node("validate_output", validate_output)

    workflow.set_entry_point("validate_input")
    workflow.add_edge("validate_input", "health_data")
    workflow.add_edge("health_data", "prompt")
    workflow.add_edge("prompt", "llm")
    workflow.add_edge("llm", "validate_output")
    workflow.add_edge("validate_output", END)

    return workflow.compile()


def run_ingredient_categorization(
    graph,
    medical_report_text: str,
    ingredients: List[str],
    uid: Optional[str],
    model: str,
) -> Optional[Dict[str, Any]]:
    """Run the compiled graph and return the parsed model output (or None)."""
    initial_state: CategorizationState = {
        "medical_report_text": medical_report_text,
        "ingredients": ingredients,
        "uid": uid,
        "model": model,
        "health_data": None,
        "prompt": None,
        "result": None,
        "timings": {},
        "total_ms": None,
    }

    t0_total = time.perf_counter()
    result = graph.invoke(initial_state)
    result["total_ms"] = round((time.perf_counter() - t0_total) * 1000.0, 2)
    log_pipeline_summary(result["timings"], result["total_ms"])

    return result["result"]
