import logging

import requests
from flask import jsonify
from google.genai import errors as genai_errors
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from ..exceptions import ConfigurationError, VendorTimeoutError

logger = logging.getLogger(__name__)


def error_response(code: str, msg: str, status: int):
    return jsonify({"error": code, "msg": msg}), status


def register_error_handlers(app):
    """Map failures that escape a route to JSON error bodies."""

    @app.errorhandler(ValidationError)
    def _bad_request(e: ValidationError):
        return jsonify({"error": "invalid_request", "msg": "request body failed validation",
                        "details": e.errors(include_url=False, include_context=False)}), 400

    @app.errorhandler(ConfigurationError)
    def _configuration(e: ConfigurationError):
        logger.error("configuration error: %s", e)
        return error_response("configuration_error", str(e), 500)

    @app.errorhandler(VendorTimeoutError)
    def _timeout(e: VendorTimeoutError):
        logger.error("%s", e)
        return error_response("timeout", str(e), 504)

    @app.errorhandler(genai_errors.APIError)
    def _gemini(e: genai_errors.APIError):
        logger.error("Gemini request failed: %s", e)
        return error_response("vendor_error", str(e), 502)

    @app.errorhandler(requests.RequestException)
    def _upstream(e: requests.RequestException):
        logger.error("upstream request failed: %s", e)
        return error_response("vendor_error", str(e), 502)

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled error")
        return error_response("internal_error", str(e), 500)
