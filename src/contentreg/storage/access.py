"""Access matrix: (record, principal) -> granted.

Only registration writes to the matrix today (the creator's own entry).
Entries are never revoked, so grants outlive both ownership transfers and
record deletion.
"""

from __future__ import annotations

from contentreg.core.identity import Principal, SequenceId
from contentreg.core.record import AccessGrant


class AccessMatrix:
    """Sparse boolean matrix keyed by (sequence_id, principal)."""

    def __init__(self) -> None:
        self._grants: dict[tuple[SequenceId, Principal], bool] = {}

    def grant(self, sequence_id: SequenceId, principal: Principal) -> AccessGrant:
        """Mark principal as granted on a record. Idempotent.

        Args:
            sequence_id: Record the grant applies to.
            principal: Identity being granted.

        Returns:
            The stored grant entry.
        """
        self._grants[(sequence_id, principal)] = True
        return AccessGrant(sequence_id=sequence_id, principal=principal, granted=True)

    def is_granted(self, sequence_id: SequenceId, principal: Principal) -> bool:
        """Look up a grant. Missing entries read as False."""
        return self._grants.get((sequence_id, principal), False)

    def __len__(self) -> int:
        return len(self._grants)

    def to_dict(self) -> dict[tuple[SequenceId, Principal], bool]:
        """Copy of the raw entries, for snapshots."""
        return dict(self._grants)

    @classmethod
    def from_dict(cls, entries: dict[tuple[SequenceId, Principal], bool]) -> AccessMatrix:
        """Rebuild a matrix from to_dict() output."""
        matrix = cls()
        matrix._grants = dict(entries)
        return matrix
