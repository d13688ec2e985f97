"""Lazily built service instances, one set per Flask app."""

from typing import Any, Mapping

from ..config.settings import AIServiceSettings, SpeechSettings, SpoonacularSettings


class ServiceContainer:
    """Builds each service on first use from the app config.

    Tests pass ready-made instances through ``overrides``.
    """

    def __init__(self, config: Mapping[str, Any], **overrides):
        self.config = config
        self._ai_service = overrides.get("ai_service")
        self._recipe_client = overrides.get("recipe_client")
        self._speech_client = overrides.get("speech_client")
        self._health_data_store = overrides.get("health_data_store")

    def health_data_store(self):
        if self._health_data_store is None:
            from .storage.health_data_store import HealthDataStore, make_bucket

            bucket = make_bucket(self.config.get("FIREBASE_STORAGE_BUCKET"), self.config.get("FIREBASE_CREDENTIALS"))
            self._health_data_store = HealthDataStore(bucket, timeout=self.config.get("STORAGE_TIMEOUT"))
        return self._health_data_store

    def ai_service(self):
        if self._ai_service is None:
            from .ai_service import AIService

            self._ai_service = AIService(
                AIServiceSettings.from_config(self.config),
                health_data_store=self.health_data_store(),
            )
        return self._ai_service

    def recipe_client(self):
        if self._recipe_client is None:
            from .recipes.spoonacular_client import SpoonacularClient

            self._recipe_client = SpoonacularClient(SpoonacularSettings.from_config(self.config))
        return self._recipe_client

    def speech_client(self):
        if self._speech_client is None:
            from .speech.elevenlabs_client import TextToSpeechClient

            self._speech_client = TextToSpeechClient(SpeechSettings.from_config(self.config))
        return self._speech_client


def services() -> ServiceContainer:
    from flask import current_app

    return current_app.extensions["fridgewise"]
