"""
Ingredient Categorization Graph Module

LangGraph workflow that splits a user's available ingredients into
include/exclude lists using their medical report and stored health data.
"""

from .ingredient_categorization_graph import build_ingredient_categorization_graph, run_ingredient_categorization
from .state.categorization_state import CategorizationState

__all__ = [
    "build_ingredient_categorization_graph",
    "run_ingredient_categorization",
    "CategorizationState"
]
