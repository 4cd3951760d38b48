"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.bucket_store import Bucket, IBucketStore

__all__ = [
    # Storage interfaces
    "Bucket",
    "IBucketStore",
]
