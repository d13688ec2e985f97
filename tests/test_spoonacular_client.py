from unittest.mock import Mock

import requests

from fridgewise.config.settings import SpoonacularSettings
from fridgewise.services.recipes.spoonacular_client import SpoonacularClient, normalize_ingredients


def _client(response=None, error=None):
    session = Mock(spec=requests.Session)
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return SpoonacularClient(SpoonacularSettings(api_key="key", timeout=3.0), session=session), session


def _ok(payload):
    return Mock(ok=True, status_code=200, json=Mock(return_value=payload))


def test_normalize_ingredients():
    assert normalize_ingredients(" egg ,  milk spinach,,tomato ") == "egg,milk,spinach,tomato"


def test_search_recipes_passes_filters():
    client, session = _client(_ok({"results": [{"id": 1, "title": "Omelette"}]}))

    results = client.search_recipes("omelette", diet="vegetarian", number=3)

    assert results == [{"id": 1, "title": "Omelette"}]
    url = session.get.call_args.args[0]
    params = session.get.call_args.kwargs["params"]
    assert url == "https://api.spoonacular.com/recipes/complexSearch"
    assert params == {"query": "omelette", "number": 3, "diet": "vegetarian", "apiKey": "key"}
    assert session.get.call_args.kwargs["timeout"] == 3.0


def test_search_by_ingredients():
    client, session = _client(_ok([{"id": 7, "usedIngredientCount": 2}]))

    assert client.search_by_ingredients("egg milk") == [{"id": 7, "usedIngredientCount": 2}]
    assert session.get.call_args.kwargs["params"]["ingredients"] == "egg,milk"
    assert session.get.call_args.kwargs["params"]["number"] == 6


def test_http_error_degrades_to_empty():
    client, _ = _client(Mock(ok=False, status_code=402))

    assert client.search_recipes("pasta") == []
    assert client.get_recipe_information(42) is None


def test_network_error_degrades_to_empty():
    client, _ = _client(error=requests.ConnectionError("down"))

    assert client.search_by_ingredients("egg") == []


def test_recipe_information():
    client, session = _client(_ok({"id": 42, "title": "Shakshuka"}))

    assert client.get_recipe_information(42)["title"] == "Shakshuka"
    assert session.get.call_args.args[0].endswith("/recipes/42/information")
