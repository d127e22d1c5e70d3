"""Storage protocol for swappable backends.

The storage layer holds the registry's three collections:
- Sequence counter (highest issued id)
- Record store (id -> ContentRecord)
- Access matrix ((id, principal) -> bool)

Usage:
    storage = LocalStorage()
    registry = ContentRegistry(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from contentreg.core.identity import Principal, SequenceId
from contentreg.core.record import ContentRecord


class Storage(Protocol):
    """Abstract storage interface. Implementations handle actual data.

    Implementations are not required to be thread-safe; the registry
    serializes access.
    """

    @property
    def last_id(self) -> SequenceId:
        """Highest sequence id ever issued."""
        ...

    def peek_next_id(self) -> SequenceId:
        """Id the next registration would receive."""
        ...

    def get(self, sequence_id: SequenceId) -> ContentRecord | None:
        """Get record by id, None if absent."""
        ...

    def contains(self, sequence_id: SequenceId) -> bool:
        """Check if a record is active."""
        ...

    def record_ids(self) -> Iterator[SequenceId]:
        """Iterate ids of active records in ascending order."""
        ...

    def __len__(self) -> int:
        """Number of active records."""
        ...

    def insert(self, sequence_id: SequenceId, record: ContentRecord) -> bool:
        """Insert record. Returns False if id already present."""
        ...

    def update(self, sequence_id: SequenceId, record: ContentRecord) -> bool:
        """Replace record. Returns False if id absent."""
        ...

    def remove(self, sequence_id: SequenceId) -> bool:
        """Remove record. Returns False if id absent."""
        ...

    def grant(self, sequence_id: SequenceId, principal: Principal) -> None:
        """Set access grant to True. Idempotent."""
        ...

    def is_granted(self, sequence_id: SequenceId, principal: Principal) -> bool:
        """Read access grant, False if no entry."""
        ...

    def commit_registration(self, record: ContentRecord) -> bool:
        """Issue the next id, insert record under it and grant its proprietor.

        record.sequence_id must equal peek_next_id(). All three collections
        advance together or none do. Returns False if nothing was committed.
        """
        ...

    def snapshot(self) -> bytes:
        """Serialize entire storage state."""
        ...

    def restore(self, data: bytes) -> None:
        """Restore from snapshot."""
        ...
