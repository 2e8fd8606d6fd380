from flask import Blueprint, request, jsonify

from models import db
from models.model_registry import Brand, ModelEntry
from utils.audit import log_event
from utils.auth_context import admin_required
from utils.catalog import get_catalog
from utils.errors import handle_failures
from utils.ids import slugify
from utils.seed import DEFAULT_COLOR

registry_bp = Blueprint("registry", __name__, url_prefix="/api")


def serialize_model(model: ModelEntry) -> dict:
    return {
        "key": model.key,
        "name": model.name,
        "brand_key": model.brand_key,
        "brand_name": model.brand.name if model.brand else None,
        "logo_filename": model.logo_filename,
        "color": model.color,
        "created_at": model.created_at.isoformat(),
    }


def serialize_brand(brand: Brand) -> dict:
    return {
        "key": brand.key,
        "name": brand.name,
        "logo_filename": brand.logo_filename,
        "created_at": brand.created_at.isoformat(),
    }


def _text(data: dict, field: str) -> str:
    value = data.get(field)
    return value.strip() if isinstance(value, str) else ""


# ---- models ----

@registry_bp.get("/models")
@handle_failures("Failed to fetch models")
def list_models():
    models = ModelEntry.query.order_by(ModelEntry.name.asc()).all()
    return jsonify([serialize_model(m) for m in models]), 200


@registry_bp.post("/models")
@admin_required
@handle_failures("Failed to save model")
def save_model():
    """Create or replace a registry entry keyed by ``key`` (defaults to a slug of ``name``)."""
    data = request.get_json(silent=True) or {}
    name = _text(data, "name")
    if not name:
        return jsonify(error="name is required"), 400

    key = _text(data, "key") or slugify(name)
    if not key:
        return jsonify(error="key could not be derived from name"), 400

    brand_key = _text(data, "brand_key") or None
    brand = None
    if brand_key:
        brand = db.session.get(Brand, brand_key)
        if not brand:
            return jsonify(error="Brand not found"), 404

    logo_filename = _text(data, "logo_filename")
    if not logo_filename:
        logo_filename = brand.logo_filename if brand else get_catalog().logo_for(key)

    color = _text(data, "color") or DEFAULT_COLOR
    existed = db.session.get(ModelEntry, key) is not None

    model = db.session.merge(ModelEntry(
        key=key,
        name=name,
        brand_key=brand_key,
        logo_filename=logo_filename,
        color=color,
    ))
    db.session.commit()
    get_catalog().invalidate()

    log_event("MODEL_SAVE", entity="model", entity_id=key, metadata={"updated": existed})
    return jsonify(serialize_model(model)), 200 if existed else 201


@registry_bp.delete("/models/<key>")
@admin_required
@handle_failures("Failed to delete model")
def delete_model(key: str):
    model = db.session.get(ModelEntry, key)
    if not model:
        return jsonify(error="Model not found"), 404

    db.session.delete(model)
    db.session.commit()
    get_catalog().invalidate()

    log_event("MODEL_DELETE", entity="model", entity_id=key)
    return jsonify(deleted=key), 200


# ---- brands ----

@registry_bp.get("/brands")
@handle_failures("Failed to fetch brands")
def list_brands():
    brands = Brand.query.order_by(Brand.name.asc()).all()
    return jsonify([serialize_brand(b) for b in brands]), 200


@registry_bp.post("/brands")
@admin_required
@handle_failures("Failed to create brand")
def create_brand():
    data = request.get_json(silent=True) or {}
    key = _text(data, "key")
    name = _text(data, "name")
    logo_filename = _text(data, "logo_filename")

    if not key or not name or not logo_filename:
        return jsonify(error="key, name and logo_filename are required"), 400

    if db.session.get(Brand, key):
        return jsonify(error="Brand already exists"), 409

    brand = Brand(key=key, name=name, logo_filename=logo_filename)
    db.session.add(brand)
    db.session.commit()
    get_catalog().invalidate()

    log_event("BRAND_CREATE", entity="brand", entity_id=key)
    return jsonify(serialize_brand(brand)), 201


@registry_bp.delete("/brands/<key>")
@admin_required
@handle_failures("Failed to delete brand")
def delete_brand(key: str):
    brand = db.session.get(Brand, key)
    if not brand:
        return jsonify(error="Brand not found"), 404

    in_use = ModelEntry.query.filter_by(brand_key=key).count()
    if in_use:
        return jsonify(error=f"Cannot delete brand: {in_use} model(s) still reference it"), 409

    db.session.delete(brand)
    db.session.commit()
    get_catalog().invalidate()

    log_event("BRAND_DELETE", entity="brand", entity_id=key)
    return jsonify(deleted=key), 200
