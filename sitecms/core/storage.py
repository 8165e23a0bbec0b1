"""
File storage abstraction layer supporting both local filesystem and AWS S3.

This module provides a unified interface for upload storage, allowing seamless
switching between local storage (served by the static /uploads mount) and S3
(served from the bucket or a CDN in front of it).
"""

import logging
import os
import secrets
import time
from dataclasses import dataclass
from io import BytesIO
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sitecms.core.config import Settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the storage backend cannot store or remove a file."""
    pass


@dataclass
class StoredFile:
    url: str
    id: str


def generate_filename(original_filename: Optional[str]) -> str:
    """
    Collision-resistant name: <epoch millis>-<random 9 digits><original extension>.
    """
    ext = os.path.splitext(original_filename or "")[1].lower()
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{ext}"


class StorageBackend:
    """Abstract base class for storage backends"""

    name = "abstract"

    def save(self, content: bytes, filename: str, content_type: str, folder: str = "") -> StoredFile:
        """Store file content and return its public URL and backend identifier"""
        raise NotImplementedError

    def delete_file(self, url: str) -> bool:
        """Delete a stored file by the URL returned from save()"""
        raise NotImplementedError


class LocalStorage(StorageBackend):
    """Local filesystem storage backend"""

    name = "local"

    def __init__(self, base_dir: str = "public/uploads", url_prefix: str = "/uploads"):
        self.base_dir = os.path.abspath(base_dir)
        self.url_prefix = "/" + url_prefix.strip("/")
        os.makedirs(self.base_dir, exist_ok=True)

    def save(self, content: bytes, filename: str, content_type: str, folder: str = "") -> StoredFile:
        """Save file under the uploads directory with a generated name"""
        unique_filename = generate_filename(filename)
        relative = f"{folder.strip('/')}/{unique_filename}" if folder else unique_filename
        file_path = os.path.join(self.base_dir, relative)

        try:
            os.makedirs(os.path.dirname(file_path), exist_ok=True)
            with open(file_path, "wb") as buffer:
                buffer.write(content)
        except OSError as e:
            logger.error(f"Error writing upload {file_path}: {e}")
            raise StorageError(f"Failed to write file: {e}") from e

        return StoredFile(url=f"{self.url_prefix}/{relative}", id=relative)

    def owns(self, url: str) -> bool:
        return bool(url) and url.startswith(self.url_prefix + "/")

    def path_for(self, url: str) -> Optional[str]:
        """Map a /uploads/... URL to a path inside base_dir, None if it points elsewhere"""
        if not self.owns(url):
            return None
        relative = url[len(self.url_prefix) + 1:]
        file_path = os.path.abspath(os.path.join(self.base_dir, relative))
        if os.path.commonpath([file_path, self.base_dir]) != self.base_dir:
            return None
        return file_path

    def delete_file(self, url: str) -> bool:
        """Delete file from local filesystem; remote URLs are ignored"""
        file_path = self.path_for(url)
        if file_path is None or not os.path.isfile(file_path):
            return False
        try:
            os.remove(file_path)
            logger.info(f"Deleted local upload {file_path}")
            return True
        except OSError as e:
            logger.error(f"Error deleting file {file_path}: {e}")
            return False


class S3Storage(StorageBackend):
    """AWS S3 storage backend"""

    name = "s3"

    def __init__(self, bucket_name: str, region: str, key_prefix: str = "uploads",
                 public_base_url: str = "", access_key_id: str = "", secret_access_key: str = ""):
        self.bucket_name = bucket_name
        self.region = region
        self.key_prefix = key_prefix.strip("/")
        self.public_base_url = (
            public_base_url.rstrip("/") or f"https://{bucket_name}.s3.{region}.amazonaws.com"
        )

        # If AWS_ACCESS_KEY_ID is not set, boto3 will use IAM roles (for EC2/ECS)
        if access_key_id and secret_access_key:
            self.s3_client = boto3.client(
                's3',
                aws_access_key_id=access_key_id,
                aws_secret_access_key=secret_access_key,
                region_name=region
            )
        else:
            self.s3_client = boto3.client('s3', region_name=region)

    def save(self, content: bytes, filename: str, content_type: str, folder: str = "") -> StoredFile:
        """Upload file to S3 and return its public URL and key"""
        parts = [p for p in (self.key_prefix, folder.strip("/"), generate_filename(filename)) if p]
        s3_key = "/".join(parts)

        try:
            self.s3_client.upload_fileobj(
                BytesIO(content),
                self.bucket_name,
                s3_key,
                ExtraArgs={
                    'ContentType': content_type or 'application/octet-stream',
                    'CacheControl': 'public, max-age=31536000, immutable',
                }
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error uploading to S3: {e}")
            raise StorageError(f"Failed to upload file to S3: {e}") from e

        return StoredFile(url=f"{self.public_base_url}/{s3_key}", id=s3_key)

    def delete_file(self, url: str) -> bool:
        """Delete an object by its public URL or key"""
        s3_key = url[len(self.public_base_url) + 1:] if url.startswith(self.public_base_url + "/") else url
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=s3_key)
            return True
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error deleting from S3: {e}")
            return False


def build_storage(settings: Settings) -> StorageBackend:
    """Get storage backend based on STORAGE_BACKEND setting"""
    if settings.STORAGE_BACKEND == "s3":
        if not settings.S3_BUCKET_NAME:
            raise StorageError("S3_BUCKET_NAME must be set when STORAGE_BACKEND=s3")
        return S3Storage(
            bucket_name=settings.S3_BUCKET_NAME,
            region=settings.AWS_REGION,
            key_prefix=settings.S3_KEY_PREFIX,
            public_base_url=settings.S3_PUBLIC_BASE_URL,
            access_key_id=settings.AWS_ACCESS_KEY_ID,
            secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        )
    if settings.STORAGE_BACKEND == "local":
        return LocalStorage(settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX)
    raise StorageError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
