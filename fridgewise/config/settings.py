import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PROMPTS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "prompts", "templates")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    return float(raw) if raw else default


class Config:
    """Base configuration class"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_CONTENT_LENGTH = 25 * 1024 * 1024  # 25MB per request
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Upload settings
    ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "heic"}

    # Gemini settings (API key first, Vertex AI project as fallback)
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    GOOGLE_CLOUD_PROJECT = os.getenv("GOOGLE_CLOUD_PROJECT")
    GOOGLE_CLOUD_LOCATION = os.getenv("GOOGLE_CLOUD_LOCATION", "global")

    # Model settings
    DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-pro")
    PROMPTS_DIR = os.getenv("PROMPTS_DIR", PROMPTS_DIR)

    # Deadlines (seconds)
    VENDOR_TIMEOUT = _float_env("VENDOR_TIMEOUT", 120.0)
    STORAGE_TIMEOUT = _float_env("STORAGE_TIMEOUT", 15.0)
    HTTP_TIMEOUT = _float_env("HTTP_TIMEOUT", 15.0)

    # Firebase Storage (per-user health data)
    FIREBASE_STORAGE_BUCKET = os.getenv("FIREBASE_STORAGE_BUCKET")
    FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS")  # service account json path

    # Third-party APIs
    SPOONACULAR_API_KEY = os.getenv("SPOONACULAR_API_KEY")
    SPOONACULAR_BASE_URL = "https://api.spoonacular.com"
    ELEVENLABS_API_KEY = os.getenv("ELEVENLABS_API_KEY")
    ELEVENLABS_BASE_URL = "https://api.elevenlabs.io"

    @staticmethod
    def init_app(app):
        """Initialize app with configuration"""
        if not app.config.get("GEMINI_API_KEY") and not app.config.get("GOOGLE_CLOUD_PROJECT"):
            app.logger.warning("GEMINI_API_KEY not set; AI endpoints will fail until it is configured")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    GEMINI_API_KEY = "test-gemini-key"
    SPOONACULAR_API_KEY = "test-spoonacular-key"
    ELEVENLABS_API_KEY = "test-elevenlabs-key"
    FIREBASE_STORAGE_BUCKET = None
    VENDOR_TIMEOUT = 5.0
    STORAGE_TIMEOUT = 5.0


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


@dataclass(frozen=True)
class AIServiceSettings:
    """Everything the Gemini-facing service needs, resolved once at startup."""
    api_key: Optional[str]
    project: Optional[str] = None
    location: str = "global"
    model: str = "gemini-2.5-pro"
    prompts_dir: str = PROMPTS_DIR
    vendor_timeout: float = 120.0
    storage_timeout: float = 15.0

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "AIServiceSettings":
        return cls(
            api_key=cfg.get("GEMINI_API_KEY"),
            project=cfg.get("GOOGLE_CLOUD_PROJECT"),
            location=cfg.get("GOOGLE_CLOUD_LOCATION") or "global",
            model=cfg.get("DEFAULT_MODEL") or "gemini-2.5-pro",
            prompts_dir=cfg.get("PROMPTS_DIR") or PROMPTS_DIR,
            vendor_timeout=float(cfg.get("VENDOR_TIMEOUT", 120.0)),
            storage_timeout=float(cfg.get("STORAGE_TIMEOUT", 15.0)),
        )


@dataclass(frozen=True)
class SpoonacularSettings:
    api_key: Optional[str]
    base_url: str = "https://api.spoonacular.com"
    timeout: float = 15.0

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "SpoonacularSettings":
        return cls(
            api_key=cfg.get("SPOONACULAR_API_KEY"),
            base_url=cfg.get("SPOONACULAR_BASE_URL") or cls.base_url,
            timeout=float(cfg.get("HTTP_TIMEOUT", 15.0)),
        )


@dataclass(frozen=True)
class SpeechSettings:
    api_key: Optional[str]
    base_url: str = "https://api.elevenlabs.io"
    timeout: float = 15.0

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "SpeechSettings":
        return cls(
            api_key=cfg.get("ELEVENLABS_API_KEY"),
            base_url=cfg.get("ELEVENLABS_BASE_URL") or cls.base_url,
            timeout=float(cfg.get("HTTP_TIMEOUT", 15.0)),
        )
