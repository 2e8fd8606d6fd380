from datetime import datetime
from models.db import db

class DemoLike(db.Model):
    __tablename__ = "demo_likes"

    id = db.Column(db.Integer, primary_key=True)
    demo_id = db.Column(db.String(64), db.ForeignKey("demos.id"), nullable=False, index=True)
    ip = db.Column(db.String(64), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("demo_id", "ip", name="uq_demo_likes_demo_ip"),
    )
