from flask import Blueprint, request, jsonify
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from models import db
from models.demo import Demo
from models.demo_like import DemoLike
from models.model_registry import Brand, ModelEntry
from utils.catalog import get_catalog
from utils.client_ip import client_ip
from utils.errors import handle_failures
from utils.seed import DEFAULT_COLOR

like_bp = Blueprint("likes", __name__, url_prefix="/api")


def _like_count(demo_id: str) -> int:
    return DemoLike.query.filter_by(demo_id=demo_id).count()


@like_bp.post("/demos/<demo_id>/like")
@handle_failures("Failed to toggle like")
def toggle_like(demo_id: str):
    if not db.session.get(Demo, demo_id):
        return jsonify(error="Demo not found"), 404

    ip = client_ip()
    existing = DemoLike.query.filter_by(demo_id=demo_id, ip=ip).first()
    if existing:
        db.session.delete(existing)
        db.session.commit()
        liked = False
    else:
        db.session.add(DemoLike(demo_id=demo_id, ip=ip))
        try:
            db.session.commit()
        except IntegrityError:
            # a concurrent request from the same IP already liked it
            db.session.rollback()
        liked = True

    return jsonify(liked=liked, count=_like_count(demo_id)), 200


@like_bp.get("/demos/<demo_id>/like")
@handle_failures("Failed to fetch likes")
def like_status(demo_id: str):
    ip = client_ip()
    liked = DemoLike.query.filter_by(demo_id=demo_id, ip=ip).first() is not None
    return jsonify(count=_like_count(demo_id), liked=liked), 200


@like_bp.get("/likes")
@handle_failures("Failed to fetch likes")
def list_likes():
    """Like counts for every demo that has any, keyed by demo id."""
    tab_id = (request.args.get("tab") or "").strip()
    ip = client_ip()

    counts = db.session.query(DemoLike.demo_id, func.count(DemoLike.id)).group_by(DemoLike.demo_id)
    mine = db.session.query(DemoLike.demo_id).filter(DemoLike.ip == ip)
    if tab_id:
        counts = counts.join(Demo, Demo.id == DemoLike.demo_id).filter(Demo.tab_id == tab_id)
        mine = mine.join(Demo, Demo.id == DemoLike.demo_id).filter(Demo.tab_id == tab_id)

    liked_ids = {row[0] for row in mine.all()}
    out = {
        demo_id: {"count": count, "liked": demo_id in liked_ids}
        for demo_id, count in counts.all()
    }
    return jsonify(out), 200


@like_bp.get("/leaderboard")
@handle_failures("Failed to fetch leaderboard")
def leaderboard():
    tab_id = (request.args.get("tab") or "").strip()
    like_count = func.count(DemoLike.id).label("like_count")

    q = (
        db.session.query(Demo, ModelEntry.color, Brand.name, like_count)
        .join(DemoLike, DemoLike.demo_id == Demo.id)
        .outerjoin(ModelEntry, ModelEntry.key == Demo.model_key)
        .outerjoin(Brand, Brand.key == ModelEntry.brand_key)
    )
    if tab_id:
        q = q.filter(Demo.tab_id == tab_id)
    rows = (
        q.group_by(Demo.id, ModelEntry.color, Brand.name)
        .having(func.count(DemoLike.id) > 0)
        .order_by(like_count.desc(), Demo.created_at.asc())
        .all()
    )

    catalog = get_catalog()
    out = []
    for demo, color, brand_name, count in rows:
        # demos of predefined models not yet in the registry table
        if color is None or brand_name is None:
            model = catalog.model(demo.model_key) or {}
            brand = catalog.brand(model.get("brand_key", "")) or {}
            color = color or model.get("color") or DEFAULT_COLOR
            brand_name = brand_name or brand.get("name")
        out.append({
            "demo_id": demo.id,
            "model_name": demo.model_name,
            "model_key": demo.model_key,
            "tab_id": demo.tab_id,
            "brand_name": brand_name,
            "color": color,
            "like_count": count,
        })
    return jsonify(out), 200
