"""
Gemini-backed analysis service.

Mediates between the HTTP layer and Gemini: loads prompt templates, builds
the multimodal request, and turns the structured-output response into a
plain dict. A JSON response that cannot be parsed becomes ``None``; vendor
and network errors are not caught here.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

from google.genai import types

from ..config.settings import AIServiceSettings
from ..graphs.ingredient_categorization import (
    build_ingredient_categorization_graph,
    run_ingredient_categorization,
)
from ..prompts.prompt_template import (
    INCLUDE_EXCLUDE_MARKERS,
    INCLUDE_EXCLUDE_TEMPLATE,
    SCANNER_TEMPLATE,
    PromptTemplate,
)
from ..utils.helpers import call_with_deadline
from .shared.gemini.gemini_client import (
    extract_text_from_response,
    image_part,
    make_client,
    text_part,
    user_content,
)
from .shared.gemini.schemas import FRIDGE_ANALYSIS_CONFIG, INGREDIENTS_ANALYSIS_CONFIG, JSON_MIME_TYPE

logger = logging.getLogger(__name__)


class AIService:
    def __init__(self, settings: AIServiceSettings, client=None, health_data_store=None):
        self.settings = settings
        # the client is read-only after construction and shared across requests
        self.client = client if client is not None else make_client(settings)
        self.health_data_store = health_data_store
        self.configs = {
            "fridgeAnalysis": FRIDGE_ANALYSIS_CONFIG,
            "ingredientsAnalysis": INGREDIENTS_ANALYSIS_CONFIG,
        }
        self._categorization_graph = build_ingredient_categorization_graph(self)

    def fetch_health_data(self, uid: str) -> Optional[Dict[str, Any]]:
        """Latest stored health data for `uid`, or None. Never raises."""
        if self.health_data_store is None:
            logger.warning("Health data storage not configured, skipping health data fetch")
            return None
        return self.health_data_store.fetch_health_data(uid)

    def load_template(self, name: str, expected_markers=()) -> PromptTemplate:
        return PromptTemplate.load(name, expected_markers, self.settings.prompts_dir)

    def generate_content(
        self,
        model: str,
        contents: List[types.Content],
        config: types.GenerateContentConfig,
    ) -> Union[Dict[str, Any], str, None]:
        """
        One request/response exchange with Gemini.

        Returns the parsed object when the config asks for JSON (None if the
        text does not parse), the raw text otherwise.
        """
        response = call_with_deadline(
            self.client.models.generate_content,
            model=model,
            contents=contents,
            config=config,
            timeout=self.settings.vendor_timeout,
            what=f"gemini {model}",
        )
        raw = extract_text_from_response(response)

        if config.response_mime_type == JSON_MIME_TYPE:
            try:
                return json.loads(raw)
            except ValueError as e:
                logger.error("Failed to parse JSON response: %s (raw=%.200r)", e, raw)
                return None

        return raw

    def analyze_image(
        self,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
        config: Optional[types.GenerateContentConfig] = None,
    ):
        contents = user_content([text_part(prompt), image_part(image_bytes, mime_type)])
        return self.generate_content(self.settings.model, contents, config or self.configs["fridgeAnalysis"])

    def analyze_fridge_image(self, image_bytes: bytes, mime_type: str) -> Optional[Dict[str, Any]]:
        """Detect ingredients in a fridge/receipt photo: {"ingredients": [...]} or None."""
        prompt = self.load_template(SCANNER_TEMPLATE).render({})
        return self.analyze_image(image_bytes, mime_type, prompt, self.configs["fridgeAnalysis"])

    def compose_categorization_prompt(
        self,
        medical_report_text: str,
        ingredients: List[str],
        health_data: Optional[Dict[str, Any]],
    ) -> str:
        template = self.load_template(INCLUDE_EXCLUDE_TEMPLATE, INCLUDE_EXCLUDE_MARKERS)
        health_data_text = json.dumps(health_data, indent=2, ensure_ascii=False) if health_data else "None"
        return template.render({
            "medical_report": medical_report_text,
            "ingredients": json.dumps(ingredients, ensure_ascii=False),
            "health_data": health_data_text,
        })

    def categorize_ingredients(
        self,
        medical_report_text: str,
        ingredients: List[str],
        uid: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Split `ingredients` into include/exclude with health insights, or None."""
        return run_ingredient_categorization(
            self._categorization_graph,
            medical_report_text,
            ingredients,
            uid,
            self.settings.model,
        )
