from flask import Blueprint, request, jsonify

from ..models.analysis import TextToSpeechRequest
from ..services.container import services
from ..services.speech.elevenlabs_client import AVAILABLE_VOICES

speech_bp = Blueprint('speech', __name__, url_prefix="/api")


@speech_bp.post("/text-to-speech")
def text_to_speech():
    """Convert text to speech; returns base64 audio"""
    body = request.get_json(silent=True)
    if not body:
        return jsonify({"error": "missing_body", "msg": "JSON { 'text': '...' } required"}), 400

    req = TextToSpeechRequest.model_validate(body)
    audio = services().speech_client().synthesize(req.text, req.voiceId, req.modelId, req.outputFormat)
    return jsonify({"audio": audio, "format": req.outputFormat}), 200


@speech_bp.get("/voices")
def voices():
    return jsonify({"voices": AVAILABLE_VOICES}), 200
