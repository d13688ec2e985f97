import logging

from flask import Blueprint, request, jsonify

from ..models.analysis import CategorizeRequest, FridgeScanResult, IngredientCategorization
from ..services.container import services
from ..utils.helpers import decode_data_url, gather_image, read_upload

logger = logging.getLogger(__name__)

analysis_bp = Blueprint('analysis', __name__, url_prefix="/api")


def _image_from_request():
    """Image bytes and MIME type from multipart 'image' or JSON {"image": "<data URL>"}"""
    f = gather_image(request.files)
    if f is not None:
        return read_upload(f)
    body = request.get_json(silent=True)
    if isinstance(body, dict) and body.get("image"):
        return decode_data_url(body["image"])
    return None


@analysis_bp.post("/analyze-fridge")
def analyze_fridge():
    """Detect the ingredients visible in a fridge or receipt photo"""
    try:
        image = _image_from_request()
    except ValueError as ve:
        return jsonify({"error": "bad_image", "msg": str(ve)}), 400
    if image is None:
        return jsonify({"error": "missing_file", "msg": "form field 'image' or JSON 'image' data URL required"}), 400

    data, mime_type = image
    result = services().ai_service().analyze_fridge_image(data, mime_type)
    if result is None:
        logger.warning("fridge scan returned no parseable result")
        result = FridgeScanResult().model_dump()
    return jsonify(result), 200


@analysis_bp.post("/categorize-ingredients")
def categorize_ingredients():
    """Split ingredients into include/exclude using the medical report and stored health data"""
    body = request.get_json(silent=True)
    if not body:
        return jsonify({"error": "missing_body", "msg": "JSON body required"}), 400

    req = CategorizeRequest.model_validate(body)
    result = services().ai_service().categorize_ingredients(req.medicalReportText, req.ingredients, req.uid)
    if result is None:
        logger.warning("categorization returned no parseable result")
        result = IngredientCategorization().model_dump()
    return jsonify(result), 200
