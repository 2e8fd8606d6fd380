import base64
import binascii
import re

from flask import Blueprint, request, jsonify

from models import db
from models.demo import Demo, DEMO_TYPES
from models.demo_like import DemoLike
from models.tab import Tab
from storage import get_blob_store
from utils.audit import log_event
from utils.auth_context import admin_required
from utils.catalog import get_catalog
from utils.demo_content import render_demo_content
from utils.errors import handle_failures
from utils.ids import new_id

demo_bp = Blueprint("demos", __name__, url_prefix="/api/demos")

_DATA_URL_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,")


def serialize_demo(demo: Demo) -> dict:
    return {
        "id": demo.id,
        "tab_id": demo.tab_id,
        "model_key": demo.model_key,
        "model_name": demo.model_name,
        "file_key": demo.file_key,
        "thumbnail_key": demo.thumbnail_key,
        "demo_type": demo.demo_type,
        "comment": demo.comment,
        "created_at": demo.created_at.isoformat(),
    }


def file_key_for(demo_id: str) -> str:
    return f"demos/{demo_id}/index.html"


def thumbnail_key_for(demo_id: str) -> str:
    return f"demos/{demo_id}/thumbnail.png"


def decode_thumbnail(value: str) -> bytes:
    """Accepts raw base64 or a data: URL. Raises ValueError on bad input."""
    payload = _DATA_URL_PREFIX.sub("", value.strip())
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("thumbnail must be base64 encoded") from exc
    if not data:
        raise ValueError("thumbnail is empty")
    return data


def _text(data: dict, field: str) -> str:
    value = data.get(field)
    return value.strip() if isinstance(value, str) else ""


@demo_bp.get("")
@handle_failures("Failed to fetch demos")
def list_demos():
    tab_id = (request.args.get("tab") or "").strip()
    q = Demo.query
    if tab_id:
        q = q.filter(Demo.tab_id == tab_id)
    demos = q.order_by(Demo.created_at.desc()).all()
    return jsonify([serialize_demo(d) for d in demos]), 200


@demo_bp.get("/<demo_id>")
@handle_failures("Failed to fetch demo")
def get_demo(demo_id: str):
    demo = db.session.get(Demo, demo_id)
    if not demo:
        return jsonify(error="Demo not found"), 404
    return jsonify(serialize_demo(demo)), 200


@demo_bp.post("")
@admin_required
@handle_failures("Failed to upload demo")
def create_demo():
    data = request.get_json(silent=True) or {}
    tab_id = _text(data, "tab_id")
    model_key = _text(data, "model_key")
    demo_type = _text(data, "demo_type") or "html"
    code = data.get("code")
    comment = _text(data, "comment") or None

    if not tab_id or not model_key or not isinstance(code, str) or not code.strip():
        return jsonify(error="tab_id, model_key and code are required"), 400
    if demo_type not in DEMO_TYPES:
        return jsonify(error=f"demo_type must be one of: {', '.join(DEMO_TYPES)}"), 400

    thumbnail = None
    if data.get("thumbnail"):
        if not isinstance(data["thumbnail"], str):
            return jsonify(error="thumbnail must be base64 encoded"), 400
        try:
            thumbnail = decode_thumbnail(data["thumbnail"])
        except ValueError as exc:
            return jsonify(error=str(exc)), 400

    if not db.session.get(Tab, tab_id):
        return jsonify(error="Tab not found"), 404

    model_name = _text(data, "model_name") or get_catalog().model_name(model_key)

    demo_id = new_id("demo")
    store = get_blob_store()
    file_key = file_key_for(demo_id)
    store.put(file_key, render_demo_content(demo_type, code), content_type="text/html")

    thumbnail_key = None
    if thumbnail is not None:
        thumbnail_key = thumbnail_key_for(demo_id)
        store.put(thumbnail_key, thumbnail, content_type="image/png")

    demo = Demo(
        id=demo_id,
        tab_id=tab_id,
        model_key=model_key,
        model_name=model_name,
        file_key=file_key,
        thumbnail_key=thumbnail_key,
        demo_type=demo_type,
        comment=comment,
    )
    db.session.add(demo)
    db.session.commit()

    log_event("DEMO_CREATE", entity="demo", entity_id=demo.id, metadata={"demo_type": demo_type, "tab_id": tab_id})
    return jsonify(serialize_demo(demo)), 201


@demo_bp.put("/<demo_id>")
@admin_required
@handle_failures("Failed to update demo")
def update_demo(demo_id: str):
    data = request.get_json(silent=True) or {}
    fields = [k for k in ("tab_id", "model_key", "model_name", "demo_type", "comment", "code", "thumbnail") if k in data]
    if not fields:
        return jsonify(error="No fields to update"), 400

    demo = db.session.get(Demo, demo_id)
    if not demo:
        return jsonify(error="Demo not found"), 404

    # validate everything before touching the row
    tab_id = _text(data, "tab_id")
    if "tab_id" in data and (not tab_id or not db.session.get(Tab, tab_id)):
        return jsonify(error="Tab not found"), 404

    model_key = _text(data, "model_key")
    if "model_key" in data and not model_key:
        return jsonify(error="model_key must be a non-empty string"), 400

    demo_type = _text(data, "demo_type") if "demo_type" in data else demo.demo_type
    if demo_type not in DEMO_TYPES:
        return jsonify(error=f"demo_type must be one of: {', '.join(DEMO_TYPES)}"), 400
    if demo_type != demo.demo_type and "code" not in data:
        # stored HTML is already wrapped; the source is not kept
        return jsonify(error="Changing demo_type requires code"), 400

    code = data.get("code")
    if "code" in data and (not isinstance(code, str) or not code.strip()):
        return jsonify(error="code must be a non-empty string"), 400

    thumbnail = None
    if data.get("thumbnail"):
        if not isinstance(data["thumbnail"], str):
            return jsonify(error="thumbnail must be base64 encoded"), 400
        try:
            thumbnail = decode_thumbnail(data["thumbnail"])
        except ValueError as exc:
            return jsonify(error=str(exc)), 400

    if tab_id:
        demo.tab_id = tab_id
    if model_key:
        demo.model_key = model_key
    if "model_name" in data or model_key:
        demo.model_name = _text(data, "model_name") or get_catalog().model_name(demo.model_key)
    if "comment" in data:
        demo.comment = _text(data, "comment") or None
    demo.demo_type = demo_type

    store = get_blob_store()
    if "code" in data:
        store.put(demo.file_key, render_demo_content(demo.demo_type, code), content_type="text/html")

    if thumbnail is not None:
        demo.thumbnail_key = demo.thumbnail_key or thumbnail_key_for(demo.id)
        store.put(demo.thumbnail_key, thumbnail, content_type="image/png")

    db.session.commit()
    log_event("DEMO_UPDATE", entity="demo", entity_id=demo.id, metadata={"fields": fields})
    return jsonify(serialize_demo(demo)), 200


@demo_bp.delete("/<demo_id>")
@admin_required
@handle_failures("Failed to delete demo")
def delete_demo(demo_id: str):
    demo = db.session.get(Demo, demo_id)
    if not demo:
        return jsonify(error="Demo not found"), 404

    store = get_blob_store()
    store.delete(demo.file_key)
    if demo.thumbnail_key:
        store.delete(demo.thumbnail_key)

    DemoLike.query.filter_by(demo_id=demo_id).delete(synchronize_session=False)
    db.session.delete(demo)
    db.session.commit()

    log_event("DEMO_DELETE", entity="demo", entity_id=demo_id)
    return jsonify(success=True), 200
