from flask import Blueprint, Response, current_app, jsonify, request

from audio_reader.api.auth import current_user_id, require_same_user
from audio_reader.processor.exceptions import ValidationError
from audio_reader.processor.service import UploadedFile
from audio_reader.store.models import utc_now_iso

api_bp = Blueprint("api", __name__)


def _services():
    return current_app.extensions["audio_reader"]


@api_bp.post("/documents/upload")
def upload_document():
    current_user_id()
    file = request.files.get("file")
    if file is None or not file.filename:
        raise ValidationError("No file provided")
    user_id = require_same_user(request.form.get("userId"))

    document = _services().documents.upload(
        user_id,
        UploadedFile(
            filename=file.filename,
            content_type=file.mimetype or "",
            data=file.read(),
        ),
    )
    return jsonify(
        {
            "documentId": document.id,
            "url": document.file_url,
            "filename": document.original_filename,
            "size": document.file_size,
            "type": document.file_type,
        }
    )


@api_bp.post("/documents/process")
def process_document():
    current_user_id()
    body = request.get_json(silent=True) or {}
    user_id = require_same_user(body.get("userId"))
    document_id = body.get("documentId")
    if not document_id:
        raise ValidationError("Document ID is required")

    _services().processing.request_processing(document_id, user_id, body.get("voiceId"))
    return jsonify({"success": True}), 202


@api_bp.get("/documents/<document_id>/status")
def document_status(document_id: str):
    user_id = current_user_id()
    return jsonify(_services().documents.get_status(document_id, user_id))


@api_bp.get("/documents/<document_id>/reader")
def document_reader(document_id: str):
    user_id = current_user_id()
    return jsonify(_services().documents.get_reader_view(document_id, user_id))


@api_bp.post("/voice-preview")
def voice_preview():
    body = request.get_json(silent=True) or {}
    text = body.get("text")
    voice = body.get("voice")
    if not text or not voice:
        raise ValidationError("Text and voice are required")

    audio = _services().previewer.preview(text, voice)
    return Response(
        audio,
        mimetype="audio/mpeg",
        headers={"Content-Length": str(len(audio)), "Cache-Control": "no-cache"},
    )


@api_bp.get("/health")
def health():
    try:
        _services().redis_client.ping()
    except Exception as exc:  # noqa: BLE001 - any store failure means unhealthy
        return (
            jsonify(
                {
                    "status": "unhealthy",
                    "timestamp": utc_now_iso(),
                    "services": {"redis": "disconnected"},
                    "error": str(exc),
                }
            ),
            503,
        )
    return jsonify(
        {"status": "healthy", "timestamp": utc_now_iso(), "services": {"redis": "connected"}}
    )
