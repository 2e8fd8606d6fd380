import re
import secrets
import string
import time

_ALPHABET = string.ascii_lowercase + string.digits


def new_id(prefix: str) -> str:
    """e.g. demo-1718000000000-k3x9qa"""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(6))
    return f"{prefix}-{int(time.time() * 1000)}-{suffix}"


def slugify(value: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (value or "").strip().lower())
    return slug.strip("-")
