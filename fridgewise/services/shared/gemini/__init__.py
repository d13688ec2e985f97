from .gemini_client import make_client, extract_text_from_response, text_part, image_part, user_content
from .schemas import FRIDGE_ANALYSIS_CONFIG, INGREDIENTS_ANALYSIS_CONFIG, JSON_MIME_TYPE

__all__ = [
    "make_client", "extract_text_from_response", "text_part", "image_part", "user_content",
    "FRIDGE_ANALYSIS_CONFIG", "INGREDIENTS_ANALYSIS_CONFIG", "JSON_MIME_TYPE",
]
