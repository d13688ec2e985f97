# schemas.py
"""
Structured-output contracts for the two Gemini use cases.

Schemas and generation configs are static: built once at import and shared
by every request.
"""

from google.genai import types

JSON_MIME_TYPE = "application/json"


def fridge_scan_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        description="List of ingredients in image",
        properties={
            "ingredients": types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING)),
        },
        required=["ingredients"],
    )


def health_insight_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "title": types.Schema(
                type=types.Type.STRING,
                description='Health area title (e.g., "Blood Pressure Management", "Cholesterol Improvement")',
            ),
            "summary": types.Schema(
                type=types.Type.STRING,
                description="Encouraging summary of their progress or actionable guidance",
            ),
        },
        required=["title", "summary"],
        property_ordering=["title", "summary"],
    )


CATEGORIZATION_KEYS = ["include", "exclude", "healthInsights", "nutritionTips", "smartShopping"]


def categorization_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "include": types.Schema(
                type=types.Type.ARRAY,
                description="List of safe ingredients the patient can consume",
                items=types.Schema(type=types.Type.STRING),
            ),
            "exclude": types.Schema(
                type=types.Type.ARRAY,
                description="List of ingredients to avoid based on medical conditions",
                items=types.Schema(type=types.Type.STRING),
            ),
            "healthInsights": types.Schema(
                type=types.Type.ARRAY,
                description="Personalized health insights based on patient's conditions",
                items=health_insight_schema(),
            ),
            "nutritionTips": types.Schema(
                type=types.Type.STRING,
                description="Actionable nutrition tip tailored to their health conditions",
            ),
            "smartShopping": types.Schema(
                type=types.Type.STRING,
                description="Practical shopping advice to support their dietary needs",
            ),
        },
        required=CATEGORIZATION_KEYS,
        property_ordering=CATEGORIZATION_KEYS,
    )


def _json_config(schema: types.Schema, **extra) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        temperature=0.2,
        thinking_config=types.ThinkingConfig(thinking_budget=-1),
        response_mime_type=JSON_MIME_TYPE,
        response_schema=schema,
        **extra,
    )


# image-size hint: fridge photos do not need full resolution
FRIDGE_ANALYSIS_CONFIG = _json_config(
    fridge_scan_schema(),
    media_resolution=types.MediaResolution.MEDIA_RESOLUTION_MEDIUM,
)
INGREDIENTS_ANALYSIS_CONFIG = _json_config(categorization_schema())
