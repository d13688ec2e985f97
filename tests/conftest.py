"""Shared fixtures: a real AIService wired to fake vendor clients."""

from unittest.mock import Mock

import pytest

from fridgewise import create_app
from fridgewise.config.settings import PROMPTS_DIR, AIServiceSettings, TestingConfig
from fridgewise.services.ai_service import AIService
from tests._helpers.fakes import FakeGenaiClient, FakeHealthDataStore

CATEGORIZATION = {
    "include": ["spinach", "egg"],
    "exclude": ["bacon"],
    "healthInsights": [{"title": "Cholesterol Improvement", "summary": "LDL is trending down."}],
    "nutritionTips": "Swap processed meats for legumes.",
    "smartShopping": "Buy frozen spinach in bulk.",
}


@pytest.fixture
def settings():
    return AIServiceSettings(api_key="test-key", model="gemini-2.5-pro", prompts_dir=PROMPTS_DIR, vendor_timeout=2.0)


@pytest.fixture
def fake_client():
    return FakeGenaiClient()


@pytest.fixture
def health_store():
    return FakeHealthDataStore()


@pytest.fixture
def ai_service(settings, fake_client, health_store):
    return AIService(settings, client=fake_client, health_data_store=health_store)


@pytest.fixture
def recipe_client():
    return Mock()


@pytest.fixture
def speech_client():
    return Mock()


@pytest.fixture
def app(ai_service, recipe_client, speech_client):
    return create_app(
        TestingConfig,
        ai_service=ai_service,
        recipe_client=recipe_client,
        speech_client=speech_client,
    )


@pytest.fixture
def client(app):
    return app.test_client()
