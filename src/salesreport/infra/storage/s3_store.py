"""Object storage for generated reports, backed by S3."""

import logging
from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta
from typing import Any, Callable

from salesreport.domain.models import DownloadLink

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ObjectStore(ABC):
    """Durable byte storage plus time-limited retrieval links."""

    @abstractmethod
    def put(self, bucket: str, key: str, data: bytes) -> None:
        """Store data under bucket/key."""

    @abstractmethod
    def presign(self, bucket: str, key: str, expiry: timedelta) -> DownloadLink:
        """Return a credential-free GET link for bucket/key valid for expiry."""


class S3ObjectStore(ObjectStore):
    """ObjectStore over a boto3 S3 client.

    botocore errors (ClientError, BotoCoreError) are not caught here.
    """

    def __init__(
        self,
        client: Any,
        content_type: str = PDF_CONTENT_TYPE,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._client = client
        self._content_type = content_type
        self._clock = clock

    def put(self, bucket: str, key: str, data: bytes) -> None:
        self._client.put_object(
            Bucket=bucket,
            Key=key,
            Body=data,
            ContentType=self._content_type,
        )
        logger.info("Uploaded s3://%s/%s (%d bytes)", bucket, key, len(data))

    def presign(self, bucket: str, key: str, expiry: timedelta) -> DownloadLink:
        issued_at = self._clock()
        url = self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": bucket, "Key": key},
            ExpiresIn=int(expiry.total_seconds()),
        )
        return DownloadLink(url=url, expires_at=issued_at + expiry)
