"""In-process bucket storage for tests and throwaway runs."""

from src.config import get_logger
from src.core.interfaces.bucket_store import IBucketStore

logger = get_logger(__name__)


class InMemoryBucketStore(IBucketStore):
    """Keeps bucket payloads in a dict. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._buckets: dict[str, str] = dict(initial or {})

    async def load(self, bucket: str) -> str | None:
        return self._buckets.get(bucket)

    async def save(self, bucket: str, payload: str) -> None:
        self._buckets[bucket] = payload
        logger.debug("bucket_saved", bucket=bucket, size=len(payload))

    async def delete(self, bucket: str) -> None:
        self._buckets.pop(bucket, None)

    def snapshot(self) -> dict[str, str]:
        """Copy of every stored payload."""
        return dict(self._buckets)
