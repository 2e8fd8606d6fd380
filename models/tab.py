from datetime import datetime
from models.db import db

class Tab(db.Model):
    __tablename__ = "tabs"

    id = db.Column(db.String(64), primary_key=True)
    name_cn = db.Column(db.String(120), nullable=False)
    name_en = db.Column(db.String(120), nullable=False)
    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)

    sort_order = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
