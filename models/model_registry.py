from datetime import datetime
from models.db import db

class Brand(db.Model):
    __tablename__ = "model_brands"

    key = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    logo_filename = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

class ModelEntry(db.Model):
    __tablename__ = "models_registry"

    key = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    brand_key = db.Column(db.String(64), db.ForeignKey("model_brands.key"), nullable=True, index=True)
    logo_filename = db.Column(db.String(255), nullable=False)
    color = db.Column(db.String(16), nullable=False, default="#6366f1")
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    brand = db.relationship("Brand")
