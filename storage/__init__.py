from flask import current_app

from .base import BlobObject, BlobStore, BlobStoreError, InvalidBlobKey
from .local import LocalBlobStore


def create_blob_store(config) -> BlobStore:
    backend = (config.get("BLOB_BACKEND") or "local").lower()
    if backend == "s3":
        from .s3 import S3BlobStore
        return S3BlobStore(
            bucket=config.get("S3_BUCKET"),
            prefix=config.get("S3_PREFIX", ""),
            endpoint_url=config.get("S3_ENDPOINT_URL"),
        )
    if backend == "local":
        return LocalBlobStore(config["BLOB_LOCAL_DIR"])
    raise ValueError(f"Unknown BLOB_BACKEND: {backend}")


def init_blob_store(app, store: BlobStore = None):
    app.extensions["blob_store"] = store or create_blob_store(app.config)


def get_blob_store() -> BlobStore:
    return current_app.extensions["blob_store"]
