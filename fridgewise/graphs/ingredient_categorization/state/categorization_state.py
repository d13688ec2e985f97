from typing import TypedDict, Optional, Dict, Any, List


class CategorizationState(TypedDict):
    """State for the ingredient categorization graph workflow."""

    # Input parameters
    medical_report_text: str
    ingredients: List[str]
    uid: Optional[str]
    model: str

    # Auxiliary data
    health_data: Optional[Dict[str, Any]]

    # Prompt and model output
    prompt: Optional[str]
    result: Optional[Dict[str, Any]]  # None when the model returned unparseable JSON

    # Performance tracking
    timings: Dict[str, float]   # per-node ms
    total_ms: Optional[float]   # total workflow ms
