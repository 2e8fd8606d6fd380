"""
Stateless admin bearer tokens.

Two formats are supported:

* ``prefix`` (default): ``base64(json + ":" + secret[:8])``. This is the
  format existing clients hold. It is NOT a signature: the first eight
  characters of the admin secret are readable inside every token, so anyone
  holding one token can forge others until the secret is rotated. The
  expiry is not protected either: editing the base64 characters that cover
  the exp digits gives a token that verifies with a different expiry.
* ``hmac``: ``base64url(json) + "." + hex(HMAC-SHA256(secret, base64url(json)))``.
  Opt in with ``TOKEN_SCHEME=hmac``; tokens of one format never verify
  under the other.

Nothing is stored server side. Expiry and secret rotation are the only
invalidation mechanisms.
"""
import base64
import binascii
import hashlib
import hmac
import json
import time

TOKEN_SEPARATOR = ":"
SECRET_FRAGMENT_LENGTH = 8
SCHEMES = ("prefix", "hmac")


def _now_ms() -> int:
    return int(time.time() * 1000)


def _payload(exp: int) -> str:
    # compact separators match the JSON the original clients produce
    return json.dumps({"admin": True, "exp": exp}, separators=(",", ":"))


def _secret_suffix(secret: str) -> str:
    return TOKEN_SEPARATOR + secret[:SECRET_FRAGMENT_LENGTH]


def _parse_claims(text: str):
    try:
        data = json.loads(text)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return None
    if data.get("admin") is not True:
        return None
    return data


def _sign(secret: str, message: str) -> str:
    return hmac.new(secret.encode("utf-8"), message.encode("ascii"), hashlib.sha256).hexdigest()


def issue_token(secret: str, ttl_ms: int, now_ms: int = None, scheme: str = "prefix") -> tuple[str, int]:
    """
    Returns (token, expires_at_ms).
    """
    if not secret:
        raise ValueError("secret must be a non-empty string")
    if scheme not in SCHEMES:
        raise ValueError(f"Unknown token scheme: {scheme}")

    now_ms = _now_ms() if now_ms is None else now_ms
    exp = now_ms + int(ttl_ms)
    payload = _payload(exp)

    if scheme == "hmac":
        body = base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")
        return body + "." + _sign(secret, body), exp

    raw = (payload + _secret_suffix(secret)).encode("utf-8")
    return base64.b64encode(raw).decode("ascii"), exp


def _decode_prefix(token: str, secret: str):
    try:
        raw = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError):
        return None
    # reject non-canonical encodings so a flipped padding bit cannot alias a valid token
    if base64.b64encode(raw).decode("ascii") != token:
        return None
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None

    suffix = _secret_suffix(secret)
    if not text.endswith(suffix):
        return None
    return _parse_claims(text[:-len(suffix)])


def _decode_hmac(token: str, secret: str):
    body, sep, signature = token.rpartition(".")
    if not sep or not body:
        return None
    if not hmac.compare_digest(signature, _sign(secret, body)):
        return None
    try:
        raw = base64.urlsafe_b64decode(body + "=" * (-len(body) % 4))
        text = raw.decode("utf-8")
    except (binascii.Error, ValueError):
        return None
    return _parse_claims(text)


def verify_token(token: str, secret: str, now_ms: int = None, scheme: str = "prefix") -> tuple[bool, int]:
    """
    Returns (valid, expires_at_ms). Every failure collapses to (False, None).
    """
    if not token or not secret or not isinstance(token, str):
        return False, None

    try:
        if scheme == "hmac":
            claims = _decode_hmac(token, secret)
        elif scheme == "prefix":
            claims = _decode_prefix(token, secret)
        else:
            return False, None
    except (TypeError, ValueError):
        return False, None

    if claims is None:
        return False, None

    now_ms = _now_ms() if now_ms is None else now_ms
    if claims["exp"] <= now_ms:
        return False, None
    return True, claims["exp"]
