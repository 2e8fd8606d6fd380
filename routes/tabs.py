from flask import Blueprint, request, jsonify

from models import db
from models.demo import Demo
from models.demo_like import DemoLike
from models.tab import Tab
from storage import get_blob_store
from utils.audit import log_event
from utils.auth_context import admin_required
from utils.errors import handle_failures
from utils.ids import new_id

tab_bp = Blueprint("tabs", __name__, url_prefix="/api/tabs")

EDITABLE_FIELDS = ("name_cn", "name_en", "slug", "sort_order")


def serialize_tab(tab: Tab) -> dict:
    return {
        "id": tab.id,
        "name_cn": tab.name_cn,
        "name_en": tab.name_en,
        "slug": tab.slug,
        "sort_order": tab.sort_order,
        "created_at": tab.created_at.isoformat(),
    }


def _text(data: dict, field: str) -> str:
    value = data.get(field)
    return value.strip() if isinstance(value, str) else ""


def _sort_order(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("sort_order must be an integer")
    return value


@tab_bp.get("")
@handle_failures("Failed to fetch tabs")
def list_tabs():
    tabs = Tab.query.order_by(Tab.sort_order.asc(), Tab.created_at.asc()).all()
    return jsonify([serialize_tab(t) for t in tabs]), 200


@tab_bp.post("")
@admin_required
@handle_failures("Failed to create tab")
def create_tab():
    data = request.get_json(silent=True) or {}
    name_cn = _text(data, "name_cn")
    name_en = _text(data, "name_en")
    slug = _text(data, "slug")

    if not name_cn or not name_en or not slug:
        return jsonify(error="name_cn, name_en and slug are required"), 400

    try:
        sort_order = _sort_order(data.get("sort_order") or 0)
    except ValueError as exc:
        return jsonify(error=str(exc)), 400

    if Tab.query.filter_by(slug=slug).first():
        return jsonify(error="Tab slug already exists"), 409

    tab = Tab(id=new_id("tab"), name_cn=name_cn, name_en=name_en, slug=slug, sort_order=sort_order)
    db.session.add(tab)
    db.session.commit()

    log_event("TAB_CREATE", entity="tab", entity_id=tab.id)
    return jsonify(serialize_tab(tab)), 201


@tab_bp.put("/<tab_id>")
@admin_required
@handle_failures("Failed to update tab")
def update_tab(tab_id: str):
    data = request.get_json(silent=True) or {}
    updates = {k: data[k] for k in EDITABLE_FIELDS if k in data}
    if not updates:
        return jsonify(error="No fields to update"), 400

    tab = db.session.get(Tab, tab_id)
    if not tab:
        return jsonify(error="Tab not found"), 404

    clean = {}
    for field, value in updates.items():
        if field == "sort_order":
            try:
                clean[field] = _sort_order(value)
            except ValueError as exc:
                return jsonify(error=str(exc)), 400
            continue
        if not isinstance(value, str) or not value.strip():
            return jsonify(error=f"{field} must be a non-empty string"), 400
        clean[field] = value.strip()

    if "slug" in clean:
        clash = Tab.query.filter(Tab.slug == clean["slug"], Tab.id != tab.id).first()
        if clash:
            return jsonify(error="Tab slug already exists"), 409

    for field, value in clean.items():
        setattr(tab, field, value)
    db.session.commit()
    log_event("TAB_UPDATE", entity="tab", entity_id=tab.id, metadata={"fields": sorted(updates)})
    return jsonify(serialize_tab(tab)), 200


@tab_bp.delete("/<tab_id>")
@admin_required
@handle_failures("Failed to delete tab")
def delete_tab(tab_id: str):
    tab = db.session.get(Tab, tab_id)
    if not tab:
        return jsonify(error="Tab not found"), 404

    demos = Demo.query.filter_by(tab_id=tab_id).all()
    store = get_blob_store()

    # Blobs go first; a failure part way leaves rows pointing at missing files
    for demo in demos:
        store.delete(demo.file_key)
        if demo.thumbnail_key:
            store.delete(demo.thumbnail_key)

    demo_ids = [d.id for d in demos]
    if demo_ids:
        DemoLike.query.filter(DemoLike.demo_id.in_(demo_ids)).delete(synchronize_session=False)
        Demo.query.filter(Demo.id.in_(demo_ids)).delete(synchronize_session=False)
    db.session.delete(tab)
    db.session.commit()

    log_event("TAB_DELETE", entity="tab", entity_id=tab_id, metadata={"demos_deleted": len(demo_ids)})
    return jsonify(success=True), 200
