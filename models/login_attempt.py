from datetime import datetime
from models.db import db

class LoginAttempt(db.Model):
    __tablename__ = "login_attempts"

    # One row per client IP; the row is the whole lockout state
    ip = db.Column(db.String(64), primary_key=True)

    count = db.Column(db.Integer, default=0, nullable=False)
    first_attempt = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    last_attempt = db.Column(db.DateTime, nullable=True)
    locked_until = db.Column(db.DateTime, nullable=True)
