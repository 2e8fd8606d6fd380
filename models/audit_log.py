from datetime import datetime
from models.db import db

class AuditLog(db.Model):
    __tablename__ = "audit_logs"

    id = db.Column(db.Integer, primary_key=True)
    # LOGIN_FAIL, LOGIN_SUCCESS, DEMO_CREATE, TAB_DELETE, ...
    action = db.Column(db.String(80), nullable=False, index=True)
    entity = db.Column(db.String(80), nullable=True)   # tab, demo, model, brand, logo
    entity_id = db.Column(db.String(80), nullable=True)

    # no user column: there is a single shared admin identity
    ip = db.Column(db.String(64), nullable=True)
    user_agent = db.Column(db.String(255), nullable=True)
    metadata_json = db.Column(db.Text, nullable=True)

    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
