# fridgewise/models/analysis.py
from typing import Annotated, List, Optional

from pydantic import BaseModel, StringConstraints

DEFAULT_VOICE_ID = "3uuRWB9kyEGWr019IxaR"
DEFAULT_TTS_MODEL = "eleven_multilingual_v2"
DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"


class FridgeScanResult(BaseModel):
    ingredients: List[str] = []


class HealthInsight(BaseModel):
    title: str
    summary: str


class IngredientCategorization(BaseModel):
    include: List[str] = []
    exclude: List[str] = []
    healthInsights: List[HealthInsight] = []
    nutritionTips: str = ""
    smartShopping: str = ""


class CategorizeRequest(BaseModel):
    medicalReportText: str
    ingredients: List[str]
    uid: Optional[str] = None


class TextToSpeechRequest(BaseModel):
    text: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    voiceId: str = DEFAULT_VOICE_ID
    modelId: str = DEFAULT_TTS_MODEL
    outputFormat: str = DEFAULT_OUTPUT_FORMAT
