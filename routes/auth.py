import hmac

from flask import Blueprint, request, jsonify, current_app

from security.bruteforce import check_lock, register_failure, reset_attempts
from security.token import issue_token
from utils.audit import log_event
from utils.auth_context import bearer_token, check_token
from utils.client_ip import client_ip
from utils.errors import handle_failures


auth_bp = Blueprint("auth", __name__, url_prefix="/api")


def _passwords_match(submitted: str, expected: str) -> bool:
    return hmac.compare_digest(submitted.encode("utf-8"), expected.encode("utf-8"))


@auth_bp.post("/login")
@handle_failures("Failed to log in")
def login():
    ip = client_ip()

    # Locked clients are rejected before the password is even read
    locked, remaining_minutes = check_lock(ip)
    if locked:
        log_event("LOGIN_LOCKED", metadata={"remaining_minutes": remaining_minutes})
        return jsonify(
            success=False,
            message=f"Too many failed attempts. Try again in {remaining_minutes} minutes.",
            locked=True,
            remainingMinutes=remaining_minutes,
        ), 429

    data = request.get_json(silent=True) or {}
    password = data.get("password")
    if not password or not isinstance(password, str):
        return jsonify(success=False, message="Password required"), 400

    admin_password = current_app.config.get("ADMIN_PASSWORD")
    if not admin_password:
        current_app.logger.error("ADMIN_PASSWORD is not configured")
        return jsonify(success=False, message="Server configuration error: ADMIN_PASSWORD not set"), 500

    if _passwords_match(password, admin_password):
        reset_attempts(ip)
        ttl_ms = current_app.config.get("TOKEN_TTL_SECONDS", 24 * 60 * 60) * 1000
        token, expires_at = issue_token(
            admin_password,
            ttl_ms,
            scheme=current_app.config.get("TOKEN_SCHEME", "prefix"),
        )
        log_event("LOGIN_SUCCESS")
        return jsonify(success=True, token=token, expiresAt=expires_at), 200

    fail_count, locked_now = register_failure(ip)
    log_event("LOGIN_FAIL", metadata={"fail_count": fail_count, "locked_now": locked_now})

    if locked_now:
        lockout_minutes = current_app.config.get("LOCKOUT_MINUTES", 60)
        hours = lockout_minutes // 60
        span = f"{hours} hour{'s' if hours != 1 else ''}" if lockout_minutes % 60 == 0 else f"{lockout_minutes} minutes"
        return jsonify(
            success=False,
            message=f"Too many failed attempts. Account locked for {span}.",
            locked=True,
            remainingMinutes=lockout_minutes,
        ), 429

    remaining = current_app.config.get("MAX_LOGIN_ATTEMPTS", 5) - fail_count
    return jsonify(success=False, message=f"Invalid password. {remaining} attempts remaining."), 401


@auth_bp.post("/verify")
@handle_failures("Failed to verify token")
def verify():
    token = bearer_token()
    if not token:
        data = request.get_json(silent=True) or {}
        token = data.get("token") if isinstance(data.get("token"), str) else None

    if not token or not current_app.config.get("ADMIN_PASSWORD"):
        return jsonify(valid=False), 200

    valid, expires_at = check_token(token)
    if not valid:
        return jsonify(valid=False), 200
    return jsonify(valid=True, expiresAt=expires_at), 200
