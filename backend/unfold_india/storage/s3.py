"""
S3 object store.

Each bucket name maps to an S3 bucket; public URLs assume the bucket allows
anonymous reads of its objects.

Dependencies: boto3
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from unfold_india.core.exceptions import RemoteFailure
from unfold_india.storage.base import ObjectStore

logger = logging.getLogger(__name__)


class S3ObjectStore(ObjectStore):
    def __init__(
        self,
        region: str = "ap-south-1",
        endpoint_url: str | None = None,
        client=None,
    ) -> None:
        self._region = region
        self._endpoint_url = endpoint_url
        self._s3_client = client or boto3.client(
            "s3", region_name=region, endpoint_url=endpoint_url
        )

    def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        try:
            self._s3_client.put_object(
                Bucket=bucket,
                Key=path,
                Body=content,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error(f"S3 upload failed for {bucket}/{path}: {exc}")
            raise RemoteFailure("Failed to store object", {"path": path}) from exc

    def public_url(self, bucket: str, path: str) -> str:
        if self._endpoint_url:
            return f"{self._endpoint_url.rstrip('/')}/{bucket}/{path}"
        return f"https://{bucket}.s3.{self._region}.amazonaws.com/{path}"
