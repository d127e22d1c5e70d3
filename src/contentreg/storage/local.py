"""Local in-memory storage implementation.

Simple dict-based storage suitable for single-process use and testing.

Usage:
    storage = LocalStorage()
    registry = ContentRegistry(storage=storage)
"""

from __future__ import annotations

import pickle  # nosec B403 - snapshots are only read back from trusted local files
from collections.abc import Iterator

from contentreg.core.identity import Principal, SequenceId
from contentreg.core.record import ContentRecord
from contentreg.storage.access import AccessMatrix
from contentreg.storage.counter import SequenceCounter

SNAPSHOT_VERSION = 1


class LocalStorage:
    """In-memory storage for the registry's three collections.

    Structure:
        _records[sequence_id] = ContentRecord
        _access[(sequence_id, principal)] = bool
        _counter.last_id = highest issued id

    Records are frozen dataclasses, so they are handed out by reference
    without copying.
    """

    def __init__(self) -> None:
        self._counter = SequenceCounter()
        self._records: dict[SequenceId, ContentRecord] = {}
        self._access = AccessMatrix()

    @property
    def last_id(self) -> SequenceId:
        """Highest sequence id ever issued."""
        return self._counter.last_id

    def peek_next_id(self) -> SequenceId:
        """Id the next registration would receive."""
        return self._counter.peek_next()

    def get(self, sequence_id: SequenceId) -> ContentRecord | None:
        """Get a record.

        Args:
            sequence_id: Record to look up.

        Returns:
            Stored record or None if absent.
        """
        return self._records.get(sequence_id)

    def contains(self, sequence_id: SequenceId) -> bool:
        """Check if a record is active."""
        return sequence_id in self._records

    def record_ids(self) -> Iterator[SequenceId]:
        """Iterate ids of active records in ascending order.

        Yields:
            SequenceId for each active record.
        """
        yield from sorted(self._records)

    def insert(self, sequence_id: SequenceId, record: ContentRecord) -> bool:
        """Insert a new record.

        Args:
            sequence_id: Key to store under. Must match record.sequence_id.
            record: Record to store.

        Returns:
            True if inserted, False if the id was already present.

        Raises:
            ValueError: If key and record.sequence_id disagree.
        """
        _check_key(sequence_id, record)
        if sequence_id in self._records:
            return False
        self._records[sequence_id] = record
        return True

    def update(self, sequence_id: SequenceId, record: ContentRecord) -> bool:
        """Replace an existing record.

        Returns:
            True if replaced, False if the id was absent.

        Raises:
            ValueError: If key and record.sequence_id disagree.
        """
        _check_key(sequence_id, record)
        if sequence_id not in self._records:
            return False
        self._records[sequence_id] = record
        return True

    def remove(self, sequence_id: SequenceId) -> bool:
        """Remove a record. The access matrix is left untouched.

        Returns:
            True if removed, False if the id was absent.
        """
        if sequence_id not in self._records:
            return False
        del self._records[sequence_id]
        return True

    def grant(self, sequence_id: SequenceId, principal: Principal) -> None:
        """Set access grant to True. Idempotent."""
        self._access.grant(sequence_id, principal)

    def is_granted(self, sequence_id: SequenceId, principal: Principal) -> bool:
        """Read access grant, False if no entry."""
        return self._access.is_granted(sequence_id, principal)

    def commit_registration(self, record: ContentRecord) -> bool:
        """Issue an id, store the record and grant its proprietor as one unit.

        Every precondition is checked before anything is written, so a
        rejected commit leaves counter, records and grants untouched.

        Args:
            record: Record built for peek_next_id().

        Returns:
            True if committed, False if the id is already occupied.

        Raises:
            ValueError: If record.sequence_id is not the next id.
        """
        expected = self._counter.peek_next()
        if record.sequence_id != expected:
            raise ValueError(
                f"Record carries sequence id {record.sequence_id}, next id is {expected}"
            )
        if expected in self._records:
            return False

        self._counter.next_id()
        self._records[expected] = record
        self._access.grant(expected, record.proprietor)
        return True

    def __len__(self) -> int:
        return len(self._records)

    def snapshot(self) -> bytes:
        """Pickle entire state for serialization.

        Returns:
            Pickled bytes of storage state.
        """
        return pickle.dumps(
            {
                "version": SNAPSHOT_VERSION,
                "last_id": self._counter.last_id,
                "records": self._records,
                "access": self._access.to_dict(),
            }
        )

    def restore(self, data: bytes) -> None:
        """Restore from pickle snapshot.

        Args:
            data: Pickled bytes from previous snapshot() call.

        Raises:
            ValueError: If the snapshot version is not supported, a record is
                stored under a key other than its sequence_id, or a record id
                exceeds the counter. Current state is kept in that case.
        """
        state = pickle.loads(data)  # nosec B301 - trusted local snapshot
        version = state.get("version")
        if version != SNAPSHOT_VERSION:
            raise ValueError(f"Unsupported snapshot version: {version!r}")

        counter = SequenceCounter(last_id=state["last_id"])
        records: dict[SequenceId, ContentRecord] = dict(state["records"])
        for sequence_id, record in records.items():
            _check_key(sequence_id, record)
        if records and max(records) > counter.last_id:
            raise ValueError(
                f"Snapshot holds record {max(records)} beyond last issued id {counter.last_id}"
            )

        self._counter = counter
        self._records = records
        self._access = AccessMatrix.from_dict(state["access"])


def _check_key(sequence_id: SequenceId, record: ContentRecord) -> None:
    if record.sequence_id != sequence_id:
        raise ValueError(
            f"Store key {sequence_id} does not match record sequence id {record.sequence_id}"
        )
