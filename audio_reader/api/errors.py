from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from audio_reader.logging.logger import Log
from audio_reader.processor.exceptions import (
    DocumentNotReadyError,
    ForbiddenError,
    NotAuthenticatedError,
    NotFoundError,
    ValidationError,
)
from audio_reader.synthesis.exceptions import SynthesisError, VoiceNotFoundError

# Flask resolves handlers by exception MRO, so subclasses override their bases.
ERROR_STATUS_CODES: tuple[tuple[type[Exception], int], ...] = (
    (NotAuthenticatedError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
    (DocumentNotReadyError, 409),
    (VoiceNotFoundError, 400),
    (SynthesisError, 502),
)


def register_error_handlers(app: Flask) -> None:
    for error_cls, status_code in ERROR_STATUS_CODES:
        app.register_error_handler(error_cls, _json_handler(status_code))

    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(_exc: RequestEntityTooLarge):
        return jsonify({"error": "File too large"}), 400

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def _unexpected(exc: Exception):
        Log.exception(f"Unhandled request error: {exc}")
        return jsonify({"error": "Internal server error"}), 500


def _json_handler(status_code: int):
    def handler(exc: Exception):
        return jsonify({"error": str(exc)}), status_code

    return handler
