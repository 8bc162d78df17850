"""
Storage abstraction for S3 uploads and in-memory testing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import boto3

CACHE_CONTROL_IMMUTABLE = "public, max-age=31536000, immutable"


class StorageClient(Protocol):
    """Defines the operations the API needs from object storage."""

    def upload_bytes(self, key: str, body: bytes, content_type: str) -> None:
        ...

    def public_url(self, key: str) -> str:
        ...


@dataclass
class InMemoryStorageClient:
    """Test double for storage interactions."""

    bucket: str = "test-bucket"
    region: str = "eu-north-1"
    stored_objects: dict = field(default_factory=dict)

    def upload_bytes(self, key: str, body: bytes, content_type: str) -> None:
        self.stored_objects[key] = {"body": body, "content_type": content_type}

    def public_url(self, key: str) -> str:
        return f"https://s3.{self.region}.amazonaws.com/{self.bucket}/{key}"


@dataclass
class S3StorageClient:
    """
    AWS S3 client. Objects are served directly from the bucket, so the
    bucket policy decides who can read them.
    """

    bucket: str
    region: str
    access_key_id: str
    secret_access_key: str

    def __post_init__(self):
        self._client = boto3.client(
            "s3",
            region_name=self.region,
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
        )

    def upload_bytes(self, key: str, body: bytes, content_type: str) -> None:
        self._client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            CacheControl=CACHE_CONTROL_IMMUTABLE,
        )

    def public_url(self, key: str) -> str:
        # Regional endpoint, no expiry.
        return f"https://s3.{self.region}.amazonaws.com/{self.bucket}/{key}"
