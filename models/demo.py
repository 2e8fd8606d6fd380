from datetime import datetime
from models.db import db

DEMO_TYPES = ("html", "python", "markdown")

class Demo(db.Model):
    __tablename__ = "demos"

    id = db.Column(db.String(64), primary_key=True)
    tab_id = db.Column(db.String(64), db.ForeignKey("tabs.id"), nullable=False, index=True)

    # model_key points at models_registry.key but is not enforced: demos outlive registry edits
    model_key = db.Column(db.String(64), nullable=False, index=True)
    model_name = db.Column(db.String(120), nullable=False)

    # blob store keys
    file_key = db.Column(db.String(255), nullable=False)
    thumbnail_key = db.Column(db.String(255), nullable=True)

    demo_type = db.Column(db.String(16), nullable=False, default="html")
    comment = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
