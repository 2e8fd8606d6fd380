from functools import wraps
from flask import current_app, jsonify

from models import db


def handle_failures(message: str):
    """
    Turns any unexpected store/blob error into a generic 500 ``{"error": message}``.
    The original exception is logged, never returned to the client.

    Usage: @handle_failures("Failed to fetch demos")
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except Exception:
                db.session.rollback()
                current_app.logger.exception("%s (%s)", message, fn.__name__)
                return jsonify(error=message), 500
        return wrapper
    return decorator
