from functools import wraps
from flask import current_app, g, jsonify, request
from security.token import verify_token


def bearer_token():
    auth = request.headers.get("Authorization") or ""
    if auth.startswith("Bearer "):
        return auth[7:].strip() or None
    return None


def check_token(token):
    """(valid, expires_at_ms) for a token under the app's current secret."""
    return verify_token(
        token,
        current_app.config.get("ADMIN_PASSWORD") or "",
        scheme=current_app.config.get("TOKEN_SCHEME", "prefix"),
    )


def load_current_admin():
    token = bearer_token()
    if not token:
        g.is_admin = False
        g.token_expires_at = None
        return
    valid, expires_at = check_token(token)
    g.is_admin = valid
    g.token_expires_at = expires_at


def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not getattr(g, "is_admin", False):
            return jsonify(error="Unauthorized"), 401
        return fn(*args, **kwargs)
    return wrapper
