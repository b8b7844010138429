from functools import lru_cache

from unfold_india.core.config import get_settings
from unfold_india.storage.base import ObjectStore
from unfold_india.storage.local import LocalObjectStore
from unfold_india.storage.s3 import S3ObjectStore


@lru_cache
def get_object_store() -> ObjectStore:
    settings = get_settings()
    if settings.storage_backend == "s3":
        return S3ObjectStore(
            region=settings.s3_region, endpoint_url=settings.s3_endpoint_url
        )
    return LocalObjectStore(settings.storage_root, settings.public_base_url)
