import re

from flask import Blueprint, current_app, request, jsonify, make_response

from storage import get_blob_store
from utils.audit import log_event
from utils.auth_context import admin_required
from utils.errors import handle_failures

logo_bp = Blueprint("logos", __name__, url_prefix="/api")

LOGO_PREFIX = "logos/"
_UNSAFE = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_logo_name(name: str) -> str:
    """'Open AI!' -> 'OpenAI.svg'. Returns '' when nothing usable is left."""
    base = _UNSAFE.sub("", name or "")
    if base.lower().endswith(".svg"):
        base = base[:-4]
    base = base.strip(".")
    return f"{base}.svg" if base else ""


@logo_bp.get("/logos")
@handle_failures("Failed to list logos")
def list_logos():
    keys = get_blob_store().list(LOGO_PREFIX)
    return jsonify([k[len(LOGO_PREFIX):] for k in keys if k.endswith(".svg")]), 200


@logo_bp.post("/logos")
@admin_required
@handle_failures("Failed to upload logo")
def upload_logo():
    data = request.get_json(silent=True) or {}
    content = data.get("content")
    name = sanitize_logo_name(data.get("name") if isinstance(data.get("name"), str) else "")

    if not name or not isinstance(content, str) or not content.strip():
        return jsonify(error="name and content are required"), 400

    get_blob_store().put(LOGO_PREFIX + name, content, content_type="image/svg+xml")
    log_event("LOGO_UPLOAD", entity="logo", entity_id=name)
    return jsonify(name=name), 201


@logo_bp.delete("/logos/<name>")
@admin_required
@handle_failures("Failed to delete logo")
def delete_logo(name: str):
    safe = sanitize_logo_name(name)
    if not safe:
        return jsonify(error="Logo not found"), 404

    get_blob_store().delete(LOGO_PREFIX + safe)
    log_event("LOGO_DELETE", entity="logo", entity_id=safe)
    return jsonify(deleted=safe), 200


@logo_bp.get("/logo/<name>")
@handle_failures("Failed to fetch logo")
def serve_logo(name: str):
    safe = sanitize_logo_name(name)
    obj = get_blob_store().get(LOGO_PREFIX + safe) if safe else None
    if obj is None:
        return jsonify(error="Logo not found"), 404

    if request.if_none_match.contains(obj.etag.strip('"')):
        resp = make_response("", 304)
    else:
        resp = make_response(obj.data)
        resp.headers["Content-Type"] = "image/svg+xml"

    max_age = current_app.config.get("LOGO_CACHE_SECONDS", 7 * 24 * 60 * 60)
    resp.headers["Cache-Control"] = f"public, max-age={max_age}, immutable"
    resp.headers["ETag"] = obj.etag
    return resp
