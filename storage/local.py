import json
import os

from storage.base import (
    BlobObject,
    BlobStore,
    BlobStoreError,
    InvalidBlobKey,
    compute_etag,
    guess_content_type,
    validate_key,
)

META_SUFFIX = ".meta.json"


class LocalBlobStore(BlobStore):
    """Stores each blob as a file under ``root`` with a JSON sidecar for its content type."""

    def __init__(self, root: str):
        self.root = os.path.abspath(root)
        os.makedirs(self.root, exist_ok=True)

    def _path(self, key: str) -> str:
        validate_key(key)
        if key.endswith(META_SUFFIX):
            raise InvalidBlobKey(key)
        return os.path.join(self.root, *key.split("/"))

    def put(self, key: str, data, content_type: str = None) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        path = self._path(key)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        try:
            with open(path, "wb") as fh:
                fh.write(data)
            with open(path + META_SUFFIX, "w", encoding="utf-8") as fh:
                json.dump({"content_type": content_type or guess_content_type(key)}, fh)
        except OSError as exc:
            raise BlobStoreError(str(exc)) from exc

    def get(self, key: str):
        path = self._path(key)
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "rb") as fh:
                data = fh.read()
            content_type = guess_content_type(key)
            if os.path.isfile(path + META_SUFFIX):
                with open(path + META_SUFFIX, encoding="utf-8") as fh:
                    content_type = json.load(fh).get("content_type") or content_type
        except (OSError, ValueError) as exc:
            raise BlobStoreError(str(exc)) from exc
        return BlobObject(key=key, data=data, content_type=content_type, etag=compute_etag(data))

    def delete(self, key: str) -> None:
        path = self._path(key)
        for target in (path, path + META_SUFFIX):
            try:
                os.remove(target)
            except FileNotFoundError:
                pass
            except OSError as exc:
                raise BlobStoreError(str(exc)) from exc

    def list(self, prefix: str = "") -> list[str]:
        keys = []
        for dirpath, _, filenames in os.walk(self.root):
            for name in filenames:
                if name.endswith(META_SUFFIX):
                    continue
                rel = os.path.relpath(os.path.join(dirpath, name), self.root)
                key = rel.replace(os.sep, "/")
                if key.startswith(prefix):
                    keys.append(key)
        return sorted(keys)
