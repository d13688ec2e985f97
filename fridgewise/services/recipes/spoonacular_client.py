import logging
import re
from typing import Any, Dict, List, Optional

import requests

from ...config.settings import SpoonacularSettings

logger = logging.getLogger(__name__)


def normalize_ingredients(ingredients: str) -> str:
    """'egg,  milk spinach' -> 'egg,milk,spinach'"""
    s = re.sub(r"\s*,\s*", ",", ingredients.strip())
    s = re.sub(r"\s+", ",", s)
    s = re.sub(r",+", ",", s)
    return s.strip(",")


class SpoonacularClient:
    """Thin client for the Spoonacular recipe API.

    Lookups are best-effort: any HTTP or network failure is logged and turns
    into an empty result so the UI can show "no recipes" instead of an error.
    """

    def __init__(self, settings: SpoonacularSettings, session: Optional[requests.Session] = None):
        self.api_key = settings.api_key
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self.session = session or requests.Session()
        if not self.api_key:
            logger.warning("SPOONACULAR_API_KEY is not set")

    def _get(self, path: str, params: Dict[str, Any]):
        params = {**params, "apiKey": self.api_key}
        resp = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        if not resp.ok:
            raise requests.HTTPError(f"Spoonacular API error: {resp.status_code}", response=resp)
        return resp.json()

    def search_recipes(
        self,
        query: str,
        diet: Optional[str] = None,
        cuisine: Optional[str] = None,
        number: int = 5,
    ) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"query": query, "number": number}
        if diet:
            params["diet"] = diet
        if cuisine:
            params["cuisine"] = cuisine
        try:
            data = self._get("/recipes/complexSearch", params)
            return data.get("results") or []
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching recipes for %r: %s", query, e)
            return []

    def search_by_ingredients(self, ingredients: str, number: int = 6) -> List[Dict[str, Any]]:
        params = {"ingredients": normalize_ingredients(ingredients), "number": number}
        try:
            return self._get("/recipes/findByIngredients", params) or []
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching recipes by ingredients: %s", e)
            return []

    def get_recipe_information(self, recipe_id: int) -> Optional[Dict[str, Any]]:
        try:
            return self._get(f"/recipes/{int(recipe_id)}/information", {})
        except (requests.RequestException, ValueError) as e:
            logger.error("Error fetching recipe details for ID %s: %s", recipe_id, e)
            return None
