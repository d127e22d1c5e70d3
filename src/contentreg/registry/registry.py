"""ContentRegistry: register, modify, transfer and delete content records.

Usage:
    registry = ContentRegistry()
    alice = InvocationContext(acting_principal="alice", ordering_index=10)

    record_id = registry.register(alice, "doc.pdf", 1024, "desc", ["a", "b"]).unwrap()
    registry.transfer(alice, record_id, "bob")

    bob = InvocationContext(acting_principal="bob", ordering_index=11)
    registry.modify(bob, record_id, "doc-v2.pdf", 2048, "desc", ["a"])
    registry.delete(bob, record_id)
"""

from __future__ import annotations

import contextlib
import logging
import os
import threading
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from contentreg.config import RegistrySettings
from contentreg.core.errors import ErrorCode
from contentreg.core.identity import Principal, SequenceId
from contentreg.core.record import ContentRecord
from contentreg.core.validation import check_fields
from contentreg.registry.context import InvocationContext
from contentreg.registry.result import OperationResult
from contentreg.storage.local import LocalStorage
from contentreg.storage.protocol import Storage

logger = logging.getLogger(__name__)


class ContentRegistry:
    """Operation layer over a storage backend.

    Each public operation validates, authorizes against the stored
    proprietor, then commits at most one write. Failures are returned as
    OperationResult errors and never leave partial state behind.

    Operations are serialized by a single lock (see RegistrySettings.thread_safe),
    so within one call every read happens before any write.
    """

    def __init__(
        self,
        storage: Storage | None = None,
        settings: RegistrySettings | None = None,
    ):
        self._storage = storage or LocalStorage()
        self._settings = settings or RegistrySettings()
        if self._settings.autosave and self._settings.snapshot_path is None:
            raise ValueError("autosave requires settings.snapshot_path")
        self._lock: contextlib.AbstractContextManager[Any] = (
            threading.Lock() if self._settings.thread_safe else contextlib.nullcontext()
        )

    @property
    def settings(self) -> RegistrySettings:
        return self._settings

    @property
    def last_id(self) -> SequenceId:
        """Highest sequence id ever issued (0 if none)."""
        with self._lock:
            return self._storage.last_id

    def register(
        self,
        ctx: InvocationContext,
        name: str,
        size: int,
        description: str,
        labels: Sequence[str],
    ) -> OperationResult[SequenceId]:
        """Register a new content record owned by the caller.

        The counter, the record and the caller's access grant are committed
        together. On any failure none of them change.

        Args:
            ctx: Caller identity and current ordering index.
            name: Display name, 1-64 characters.
            size: Declared byte size, 1 <= size < 1e9.
            description: 1-128 characters.
            labels: 1-10 labels of 1-32 characters each.

        Returns:
            The new sequence id, or INVALID_NAME / INVALID_SIZE /
            INVALID_LABELS / ALREADY_EXISTS.
        """
        labels = _freeze_labels(labels)
        error = check_fields(name, size, description, labels)
        if error is not None:
            return self._reject("register", ctx, None, error)

        with self._lock:
            record = ContentRecord(
                sequence_id=self._storage.peek_next_id(),
                display_name=name,
                proprietor=ctx.acting_principal,
                byte_size=size,
                registration_height=ctx.ordering_index,
                description=description,
                classification_labels=labels,
            )
            if not self._commit(lambda: self._storage.commit_registration(record)):
                return self._reject("register", ctx, record.sequence_id, ErrorCode.ALREADY_EXISTS)

        logger.info(
            "Registered record %d for %s at height %d",
            record.sequence_id,
            ctx.acting_principal,
            ctx.ordering_index,
        )
        return OperationResult.success(record.sequence_id)

    def modify(
        self,
        ctx: InvocationContext,
        sequence_id: SequenceId,
        name: str,
        size: int,
        description: str,
        labels: Sequence[str],
    ) -> OperationResult[bool]:
        """Replace a record's name, size, description and labels.

        Checks run in order: existence, ownership, field validation.
        proprietor and registration_height are preserved.

        Returns:
            True, or NOT_FOUND / OWNERSHIP_MISMATCH / a validation error.
        """
        with self._lock:
            found = self._owned_record(ctx, sequence_id)
            if isinstance(found, ErrorCode):
                return self._reject("modify", ctx, sequence_id, found)
            labels = _freeze_labels(labels)
            error = check_fields(name, size, description, labels)
            if error is not None:
                return self._reject("modify", ctx, sequence_id, error)

            updated = found.with_metadata(name, size, description, labels)
            self._commit(lambda: self._storage.update(sequence_id, updated))

        logger.info("Modified record %d by %s", sequence_id, ctx.acting_principal)
        return OperationResult.success(True)

    def transfer(
        self,
        ctx: InvocationContext,
        sequence_id: SequenceId,
        new_proprietor: Principal,
    ) -> OperationResult[bool]:
        """Hand ownership of a record to another principal.

        Only proprietor changes. The access matrix is not touched, so the
        previous owner keeps whatever grant it had.

        Returns:
            True, or NOT_FOUND / OWNERSHIP_MISMATCH.
        """
        with self._lock:
            found = self._owned_record(ctx, sequence_id)
            if isinstance(found, ErrorCode):
                return self._reject("transfer", ctx, sequence_id, found)

            moved = found.with_proprietor(new_proprietor)
            self._commit(lambda: self._storage.update(sequence_id, moved))

        logger.info(
            "Transferred record %d from %s to %s",
            sequence_id,
            ctx.acting_principal,
            new_proprietor,
        )
        return OperationResult.success(True)

    def delete(self, ctx: InvocationContext, sequence_id: SequenceId) -> OperationResult[bool]:
        """Remove a record permanently.

        The id is never reissued and access grants for it are left in place.

        Returns:
            True, or NOT_FOUND / OWNERSHIP_MISMATCH.
        """
        with self._lock:
            found = self._owned_record(ctx, sequence_id)
            if isinstance(found, ErrorCode):
                return self._reject("delete", ctx, sequence_id, found)

            self._commit(lambda: self._storage.remove(sequence_id))

        logger.info("Deleted record %d by %s", sequence_id, ctx.acting_principal)
        return OperationResult.success(True)

    def get(self, sequence_id: SequenceId) -> OperationResult[ContentRecord]:
        """Look up a record by id. No access check is applied."""
        with self._lock:
            record = self._storage.get(sequence_id)
        if record is None:
            return OperationResult.failure(ErrorCode.NOT_FOUND)
        return OperationResult.success(record)

    def is_granted(self, sequence_id: SequenceId, principal: Principal) -> bool:
        """Read the access matrix. Not enforced by any operation."""
        with self._lock:
            return self._storage.is_granted(sequence_id, principal)

    def __contains__(self, sequence_id: object) -> bool:
        if not isinstance(sequence_id, int):
            return False
        with self._lock:
            return self._storage.contains(sequence_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)

    # Persistence

    def save(self, path: str | Path | None = None) -> Path:
        """Write a snapshot of all three collections to disk.

        Args:
            path: Target file. Defaults to settings.snapshot_path.

        Returns:
            The path written.

        The snapshot is written to a sibling ``.tmp`` file and moved into
        place, so an existing snapshot is never left half-written.

        Raises:
            ValueError: If no path is given and none is configured.
            OSError: If the snapshot cannot be written.
        """
        with self._lock:
            return self._save_unlocked(path)

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        settings: RegistrySettings | None = None,
    ) -> ContentRegistry:
        """Build a registry from a snapshot written by save().

        Args:
            path: Snapshot file. Defaults to settings.snapshot_path.
            settings: Settings for the new registry.

        Raises:
            ValueError: If no path is given and none is configured.
            FileNotFoundError: If the snapshot does not exist.
        """
        settings = settings or RegistrySettings()
        target = _resolve_path(path, settings)
        storage = LocalStorage()
        storage.restore(target.read_bytes())
        logger.info("Loaded registry snapshot from %s (last id %d)", target, storage.last_id)
        return cls(storage=storage, settings=settings)

    # Internals

    def _owned_record(
        self, ctx: InvocationContext, sequence_id: SequenceId
    ) -> ContentRecord | ErrorCode:
        """Fetch a record the caller owns, checking existence before ownership."""
        record = self._storage.get(sequence_id)
        if record is None:
            return ErrorCode.NOT_FOUND
        if record.proprietor != ctx.acting_principal:
            return ErrorCode.OWNERSHIP_MISMATCH
        return record

    def _reject(
        self,
        operation: str,
        ctx: InvocationContext,
        sequence_id: SequenceId | None,
        error: ErrorCode,
    ) -> OperationResult[Any]:
        if sequence_id is None:
            logger.debug("Rejected %s by %s: %s", operation, ctx.acting_principal, error.value)
        else:
            logger.debug(
                "Rejected %s of record %d by %s: %s",
                operation,
                sequence_id,
                ctx.acting_principal,
                error.value,
            )
        return OperationResult.failure(error)

    def _commit(self, write: Callable[[], bool]) -> bool:
        """Apply one storage write, then autosave if configured.

        If the autosave fails the storage is restored to its state before
        the write and the OSError propagates, so the operation has no effect.

        Returns:
            Whatever the write returned.
        """
        if not self._settings.autosave:
            return write()

        before = self._storage.snapshot()
        committed = write()
        if committed:
            try:
                self._save_unlocked(None)
            except OSError:
                self._storage.restore(before)
                logger.error("Autosave failed, rolled back in-memory commit")
                raise
        return committed

    def _save_unlocked(self, path: str | Path | None) -> Path:
        target = _resolve_path(path, self._settings)
        staging = target.with_name(f"{target.name}.tmp")
        try:
            staging.write_bytes(self._storage.snapshot())
            os.replace(staging, target)
        except OSError:
            staging.unlink(missing_ok=True)
            raise
        logger.info("Saved registry snapshot to %s (last id %d)", target, self._storage.last_id)
        return target


def _freeze_labels(labels: Any) -> Any:
    """Copy a label sequence into a tuple so validation and storage see the same labels.

    Bare strings and non-sequences are passed through for the validator to reject.
    """
    if isinstance(labels, Sequence) and not isinstance(labels, (str, bytes)):
        return tuple(labels)
    return labels


def _resolve_path(path: str | Path | None, settings: RegistrySettings) -> Path:
    if path is not None:
        return Path(path)
    if settings.snapshot_path is None:
        raise ValueError("No snapshot path given and settings.snapshot_path is not set")
    return Path(settings.snapshot_path)
