"""
S3 client for the quote PDF artifact bucket.

Writes rendered PDFs and builds the locator handed back to callers:
either the object's public URL or a presigned GET URL. The underlying
boto3 client has bounded connect/read timeouts and no internal retries,
so an upload thread abandoned by a phase deadline always ends.

Dependencies: boto3, botocore
System role: Object store boundary for rendered artifacts
"""

import logging
from datetime import datetime, timedelta, timezone
from urllib.parse import quote

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from quote_pdf.configs.storage import StorageSettings
from quote_pdf.core.exceptions import UploadFailed

logger = logging.getLogger(__name__)


class S3ArtifactClient:
    """S3 client for the artifact bucket (put + locator)."""

    def __init__(self, settings: StorageSettings, s3_client=None) -> None:
        """
        Initialize S3 client for the artifact bucket.

        Args:
            settings: Bucket, region, locator and timeout settings
            s3_client: Pre-built boto3 S3 client (tests inject a stub)
        """
        self._settings = settings
        self._bucket = settings.bucket
        self._region = settings.region
        self._s3_client = s3_client or boto3.client(
            "s3",
            region_name=settings.region,
            config=Config(
                connect_timeout=settings.connect_timeout,
                read_timeout=settings.read_timeout,
                retries={"max_attempts": 1, "mode": "standard"},
            ),
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    def put_object(self, key: str, body: bytes, content_type: str = "application/pdf") -> None:
        """
        Upload one object.

        Args:
            key: S3 object key
            body: Object content
            content_type: MIME type stored with the object

        Raises:
            UploadFailed: S3 rejected the request or the transport failed
        """
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "%s:put_object - Upload failed: %s",
                __name__,
                e,
                extra={"bucket": self._bucket, "key": key},
            )
            raise UploadFailed(f"Failed to upload artifact: {e}", key=key) from e

        logger.info(
            "%s:put_object - Uploaded %d bytes",
            __name__,
            len(body),
            extra={"bucket": self._bucket, "key": key},
        )

    def public_url(self, key: str) -> str:
        """Public URL of an object (configured base URL or virtual-hosted style)."""
        base = self._settings.public_base_url or (
            f"https://{self._bucket}.s3.{self._region}.amazonaws.com"
        )
        return f"{base.rstrip('/')}/{quote(key)}"

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for downloading/viewing an S3 object.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            UploadFailed: If presigned URL generation fails
        """
        try:
            presigned_url = self._s3_client.generate_presigned_url(
                ClientMethod="get_object",
                Params={
                    "Bucket": self._bucket,
                    "Key": s3_key,
                },
                ExpiresIn=expires_in,
            )
        except (ClientError, BotoCoreError) as e:
            raise UploadFailed(f"Failed to sign artifact URL: {e}", key=s3_key) from e
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at

    def locator_for(self, key: str) -> str:
        """
        Caller-retrievable locator for a stored object.

        Returns the public URL, or a presigned GET URL when the bucket is
        private (locator_mode = "presigned").
        """
        if self._settings.locator_mode == "presigned":
            url, _ = self.generate_presigned_download_url(
                key, expires_in=self._settings.presigned_url_expiry
            )
            return url
        return self.public_url(key)
