from .ingredient_categorization import (
    build_ingredient_categorization_graph,
    run_ingredient_categorization,
    CategorizationState,
)

__all__ = [
    "build_ingredient_categorization_graph",
    "run_ingredient_categorization",
    "CategorizationState",
]
