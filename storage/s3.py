import boto3
from botocore.exceptions import BotoCoreError, ClientError

from storage.base import BlobObject, BlobStore, BlobStoreError, guess_content_type, validate_key


class S3BlobStore(BlobStore):
    """
    Blob store on any S3-compatible bucket (AWS S3, Cloudflare R2, MinIO).
    ``prefix`` namespaces every key inside the bucket.
    """

    def __init__(self, bucket: str, client=None, prefix: str = "", endpoint_url: str = None):
        if not bucket:
            raise BlobStoreError("S3 bucket not configured")
        self.bucket = bucket
        self.prefix = prefix.strip("/")
        self.client = client or boto3.client("s3", endpoint_url=endpoint_url)

    def _full_key(self, key: str) -> str:
        validate_key(key)
        return f"{self.prefix}/{key}" if self.prefix else key

    def _strip_prefix(self, full_key: str) -> str:
        if self.prefix and full_key.startswith(self.prefix + "/"):
            return full_key[len(self.prefix) + 1:]
        return full_key

    def put(self, key: str, data, content_type: str = None) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=self._full_key(key),
                Body=data,
                ContentType=content_type or guess_content_type(key),
            )
        except (BotoCoreError, ClientError) as exc:
            raise BlobStoreError(str(exc)) from exc

    def get(self, key: str):
        try:
            resp = self.client.get_object(Bucket=self.bucket, Key=self._full_key(key))
            data = resp["Body"].read()
        except ClientError as exc:
            error_code = exc.response.get("Error", {}).get("Code")
            if error_code in ("NoSuchKey", "404"):
                return None
            raise BlobStoreError(str(exc)) from exc
        except BotoCoreError as exc:
            raise BlobStoreError(str(exc)) from exc
        return BlobObject(
            key=key,
            data=data,
            content_type=resp.get("ContentType") or guess_content_type(key),
            etag=resp.get("ETag", ""),
        )

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=self._full_key(key))
        except (BotoCoreError, ClientError) as exc:
            raise BlobStoreError(str(exc)) from exc

    def list(self, prefix: str = "") -> list[str]:
        full_prefix = f"{self.prefix}/{prefix}" if self.prefix else prefix
        keys = []
        try:
            paginator = self.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self.bucket, Prefix=full_prefix):
                for obj in page.get("Contents", []):
                    keys.append(self._strip_prefix(obj["Key"]))
        except (BotoCoreError, ClientError) as exc:
            raise BlobStoreError(str(exc)) from exc
        return keys
