from __future__ import annotations

from abc import ABC, abstractmethod


class ObjectStore(ABC):
    """Interface for binary object storage grouped into buckets."""

    @abstractmethod
    def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        """Store ``content`` at ``bucket/path``. Raises RemoteFailure on error."""

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        """Return a durable public URL for ``bucket/path``."""
