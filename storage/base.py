import hashlib
import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass


class BlobStoreError(Exception):
    """Raised when the backing object store fails."""


class InvalidBlobKey(BlobStoreError):
    """Raised for keys that could escape the store's namespace."""


@dataclass
class BlobObject:
    key: str
    data: bytes
    content_type: str
    etag: str


def guess_content_type(key: str) -> str:
    if key.endswith(".svg"):
        return "image/svg+xml"
    guessed, _ = mimetypes.guess_type(key)
    return guessed or "application/octet-stream"


def compute_etag(data: bytes) -> str:
    return '"' + hashlib.md5(data).hexdigest() + '"'


def validate_key(key: str) -> str:
    if not key or key.startswith("/") or "\\" in key:
        raise InvalidBlobKey(key)
    if any(part in ("", ".", "..") for part in key.split("/")):
        raise InvalidBlobKey(key)
    return key


class BlobStore(ABC):
    """Key -> bytes storage for demo pages, thumbnails and logos."""

    @abstractmethod
    def put(self, key: str, data, content_type: str = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, key: str):
        """Return a BlobObject, or None when the key does not exist."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a key. Deleting a missing key is not an error."""
        raise NotImplementedError

    @abstractmethod
    def list(self, prefix: str = "") -> list[str]:
        raise NotImplementedError
