import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

class Config:
    # Secrets
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # Shared admin secret: login password and token signing input
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

    # SQLite database file stored next to app.py as arena.db
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(BASE_DIR, "arena.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "prefix" keeps the legacy token format, "hmac" signs the payload
    TOKEN_SCHEME = os.getenv("TOKEN_SCHEME", "prefix")

    # 24 hours token lifetime
    TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", str(24 * 60 * 60)))

    # Brute-force protection
    MAX_LOGIN_ATTEMPTS = 5
    LOCKOUT_MINUTES = 60

    # Blob storage: "local" or "s3"
    BLOB_BACKEND = os.getenv("BLOB_BACKEND", "local")
    BLOB_LOCAL_DIR = os.getenv("BLOB_LOCAL_DIR", os.path.join(BASE_DIR, "blobs"))
    S3_BUCKET = os.getenv("S3_BUCKET")
    S3_PREFIX = os.getenv("S3_PREFIX", "")
    S3_ENDPOINT_URL = os.getenv("S3_ENDPOINT_URL")  # R2/MinIO compatible endpoints

    # Logo responses are immutable for a week
    LOGO_CACHE_SECONDS = 7 * 24 * 60 * 60

    CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")

    # Number of reverse proxies in front of the app whose X-Forwarded-* headers are trusted.
    # 0 means the socket peer is the client; forwarding headers are ignored.
    TRUSTED_PROXY_HOPS = int(os.getenv("TRUSTED_PROXY_HOPS", "0"))

    # Only enable behind Cloudflare, which overwrites CF-Connecting-IP on every request
    TRUST_CF_CONNECTING_IP = os.getenv("TRUST_CF_CONNECTING_IP", "false").lower() in ("1", "true", "yes")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Basic app settings
    DEBUG = False
