"""Content record and access grant models.

Usage:
    record = ContentRecord(
        sequence_id=1,
        display_name="doc.pdf",
        proprietor="alice",
        byte_size=1024,
        registration_height=7,
        description="quarterly report",
        classification_labels=("finance", "q3"),
    )
    moved = record.with_proprietor("bob")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from contentreg.core.identity import Principal, SequenceId


@dataclass(frozen=True, slots=True)
class ContentRecord:
    """Metadata for one registered piece of content.

    Records are immutable values. Operations that change a record build a
    new instance and write it back to storage, so a record read from the
    registry can never be mutated behind the store's back.

    Attributes:
        sequence_id: Registry key, equal to the store key the record lives under.
        display_name: Human readable name, 1-64 characters.
        proprietor: Current owner.
        byte_size: Declared size in bytes, 1 <= size < 1e9.
        registration_height: Ordering index at creation time. Never changes.
        description: Free text, 1-128 characters.
        classification_labels: Ordered tags, duplicates allowed.
    """

    sequence_id: SequenceId
    display_name: str
    proprietor: Principal
    byte_size: int
    registration_height: int
    description: str
    classification_labels: tuple[str, ...]

    def with_metadata(
        self,
        display_name: str,
        byte_size: int,
        description: str,
        classification_labels: Sequence[str],
    ) -> ContentRecord:
        """Return a copy with the four editable fields replaced.

        proprietor, sequence_id and registration_height are carried over.
        """
        return replace(
            self,
            display_name=display_name,
            byte_size=byte_size,
            description=description,
            classification_labels=tuple(classification_labels),
        )

    def with_proprietor(self, proprietor: Principal) -> ContentRecord:
        """Return a copy owned by another principal."""
        return replace(self, proprietor=proprietor)


@dataclass(frozen=True, slots=True)
class AccessGrant:
    """One (record, principal) entry of the access matrix."""

    sequence_id: SequenceId
    principal: Principal
    granted: bool = True
