import base64
import logging
from typing import Dict, List, Optional

import requests

from ...config.settings import SpeechSettings
from ...exceptions import ConfigurationError, VendorTimeoutError
from ...models.analysis import DEFAULT_OUTPUT_FORMAT, DEFAULT_TTS_MODEL

logger = logging.getLogger(__name__)

AVAILABLE_VOICES: List[Dict[str, str]] = [
    {"id": "3uuRWB9kyEGWr019IxaR", "name": "Pino"},
    {"id": "lvEfOaHGjgQz1ZC9TeMS", "name": "Alcaraz"},
]


class TextToSpeechClient:
    """ElevenLabs text-to-speech over its REST API."""

    def __init__(self, settings: SpeechSettings, session: Optional[requests.Session] = None):
        self.api_key = settings.api_key
        self.base_url = settings.base_url.rstrip("/")
        self.timeout = settings.timeout
        self.session = session or requests.Session()

    def synthesize(
        self,
        text: str,
        voice_id: str,
        model_id: str = DEFAULT_TTS_MODEL,
        output_format: str = DEFAULT_OUTPUT_FORMAT,
    ) -> str:
        """Convert `text` to speech and return the audio base64-encoded."""
        if not text or not text.strip():
            raise ValueError("text must not be empty")
        if not self.api_key:
            raise ConfigurationError("ELEVENLABS_API_KEY not found in environment variables")

        url = f"{self.base_url}/v1/text-to-speech/{voice_id}"
        try:
            resp = self.session.post(
                url,
                params={"output_format": output_format},
                headers={"xi-api-key": self.api_key, "Accept": "audio/mpeg"},
                json={"text": text, "model_id": model_id},
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise VendorTimeoutError("elevenlabs text-to-speech", self.timeout) from e
        resp.raise_for_status()

        logger.info("synthesized %d chars with voice %s (%d bytes)", len(text), voice_id, len(resp.content))
        return base64.b64encode(resp.content).decode("ascii")
