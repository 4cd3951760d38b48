"""Abstract interface for key-value bucket storage."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum


class Bucket(str, Enum):
    """Named buckets the inventory is persisted under."""

    COMMODITIES = "commodities"
    MOVEMENTS = "movements"
    ALERTS = "alerts"


class IBucketStore(ABC):
    """
    Interface for opaque blob persistence keyed by bucket name.

    Each save replaces the whole payload atomically.
    """

    @abstractmethod
    async def load(self, bucket: str) -> str | None:
        """Return the stored payload, or None if the bucket was never saved."""
        pass

    @abstractmethod
    async def save(self, bucket: str, payload: str) -> None:
        """Replace the bucket's payload."""
        pass

    @abstractmethod
    async def delete(self, bucket: str) -> None:
        """Remove the bucket if present."""
        pass

    async def save_many(self, payloads: Mapping[str, str]) -> None:
        """
        Replace several buckets at once.

        Stores that can write them in one transaction override this.
        """
        for bucket, payload in payloads.items():
            await self.save(bucket, payload)
