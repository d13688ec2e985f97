# gemini_client.py
import base64
from typing import List, Optional

from google import genai
from google.genai import types

from ....config.settings import AIServiceSettings
from ....exceptions import ConfigurationError


def http_options(settings: AIServiceSettings) -> Optional[types.HttpOptions]:
    """Request timeout enforced by the SDK itself (milliseconds)."""
    if not settings.vendor_timeout:
        return None
    return types.HttpOptions(timeout=int(settings.vendor_timeout * 1000))


def make_client(settings: AIServiceSettings) -> genai.Client:
    # Prefer API key authentication; Vertex AI only when a project is configured
    if settings.api_key:
        return genai.Client(api_key=settings.api_key, http_options=http_options(settings))

    if settings.project:
        try:
            return genai.Client(
                vertexai=True,
                project=settings.project,
                location=settings.location,
                http_options=http_options(settings),
            )
        except Exception as e:
            raise ConfigurationError(f"Failed to initialize Vertex AI client: {e}") from e

    raise ConfigurationError("GEMINI_API_KEY not found; set it or GOOGLE_CLOUD_PROJECT for Vertex AI.")


def text_part(text: str) -> types.Part:
    return types.Part.from_text(text=text)


def image_part(data: bytes, mime_type: str) -> types.Part:
    """Inline image part; the SDK base64-encodes the bytes on the wire."""
    return types.Part.from_bytes(data=data, mime_type=mime_type)


def user_content(parts: List[types.Part]) -> List[types.Content]:
    return [types.Content(role="user", parts=parts)]


def extract_text_from_response(resp) -> str:
    """Return JSON/text from parts; also decode inline_data if needed."""
    top: Optional[str] = getattr(resp, "text", None)
    if isinstance(top, str) and top.strip():
        return top
    for cand in (getattr(resp, "candidates", None) or []):
        content = getattr(cand, "content", None)
        if not content:
            continue
        for part in (getattr(content, "parts", None) or []):
            t = getattr(part, "text", None)
            if isinstance(t, str) and t.strip():
                return t
            inline = getattr(part, "inline_data", None)
            if inline:
                data = getattr(inline, "data", None)
                if isinstance(data, (bytes, bytearray)):
                    return data.decode("utf-8", "ignore")
                if isinstance(data, str):
                    return base64.b64decode(data).decode("utf-8", "ignore")
    return ""
