"""
Filesystem object store.

Objects live under ``<root>/<bucket>/<path>`` and are served by the app's
``/media`` static mount, so the public URL is derived from the base URL.
"""

import logging
from pathlib import Path

from unfold_india.core.exceptions import RemoteFailure
from unfold_india.storage.base import ObjectStore

logger = logging.getLogger(__name__)

MEDIA_PREFIX = "/media"


class LocalObjectStore(ObjectStore):
    def __init__(self, root: str | Path, public_base_url: str) -> None:
        self._root = Path(root).resolve()
        self._public_base_url = public_base_url.rstrip("/")

    @property
    def root(self) -> Path:
        return self._root

    def _target(self, bucket: str, path: str) -> Path:
        target = (self._root / bucket / path).resolve()
        if self._root not in target.parents:
            raise ValueError(f"Object path escapes storage root: {bucket}/{path}")
        return target

    def upload(
        self,
        bucket: str,
        path: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> None:
        target = self._target(bucket, path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as exc:
            logger.error(f"Local upload failed for {bucket}/{path}: {exc}")
            raise RemoteFailure("Failed to store object", {"path": path}) from exc
        logger.info(f"Stored {len(content)} bytes at {bucket}/{path}")

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._public_base_url}{MEDIA_PREFIX}/{bucket}/{path}"
