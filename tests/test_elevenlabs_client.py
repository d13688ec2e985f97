import base64
from unittest.mock import Mock

import pytest
import requests

from fridgewise.config.settings import SpeechSettings
from fridgewise.exceptions import ConfigurationError, VendorTimeoutError
from fridgewise.services.speech.elevenlabs_client import TextToSpeechClient


def _client(api_key="xi-key"):
    session = Mock(spec=requests.Session)
    return TextToSpeechClient(SpeechSettings(api_key=api_key, timeout=4.0), session=session), session


def test_synthesize_returns_base64_audio():
    client, session = _client()
    session.post.return_value = Mock(content=b"ID3audio", raise_for_status=Mock())

    audio = client.synthesize("Sift the flour.", "voice-1")

    assert base64.b64decode(audio) == b"ID3audio"
    args, kwargs = session.post.call_args
    assert args[0] == "https://api.elevenlabs.io/v1/text-to-speech/voice-1"
    assert kwargs["json"] == {"text": "Sift the flour.", "model_id": "eleven_multilingual_v2"}
    assert kwargs["params"] == {"output_format": "mp3_44100_128"}
    assert kwargs["headers"]["xi-api-key"] == "xi-key"


def test_empty_text_is_rejected():
    client, session = _client()
    with pytest.raises(ValueError):
        client.synthesize("   ", "voice-1")
    session.post.assert_not_called()


def test_missing_key():
    client, _ = _client(api_key=None)
    with pytest.raises(ConfigurationError):
        client.synthesize("hello", "voice-1")


def test_timeout_has_its_own_error():
    client, session = _client()
    session.post.side_effect = requests.Timeout()

    with pytest.raises(VendorTimeoutError):
        client.synthesize("hello", "voice-1")


def test_http_errors_propagate():
    client, session = _client()
    session.post.return_value = Mock(raise_for_status=Mock(side_effect=requests.HTTPError("401")))

    with pytest.raises(requests.HTTPError):
        client.synthesize("hello", "voice-1")
