"""Sequence id allocation service.

SequenceCounter is a stateful service that issues record ids.
"""

from __future__ import annotations

from contentreg.core.identity import SequenceId


class SequenceCounter:
    """Issues monotonically increasing sequence ids.

    Unlike a recycling allocator there is no free list: an id handed out
    once is never handed out again, even after its record is deleted.

    Args:
        last_id: Highest id already issued (0 for a fresh registry).
    """

    def __init__(self, last_id: SequenceId = 0):
        """Initialize counter.

        Args:
            last_id: Highest id already issued (0 for a fresh registry).

        Raises:
            ValueError: If last_id is negative.
        """
        if last_id < 0:
            raise ValueError(f"Sequence counter cannot start below 0, got {last_id}")
        self._last_id = last_id

    @property
    def last_id(self) -> SequenceId:
        """Highest id issued so far (0 if none)."""
        return self._last_id

    def peek_next(self) -> SequenceId:
        """Return the id next_id() would issue, without issuing it."""
        return self._last_id + 1

    def next_id(self) -> SequenceId:
        """Issue the next id.

        Not synchronized on its own; the owning registry serializes callers.

        Returns:
            Newly issued SequenceId, exactly one above the previous.
        """
        self._last_id = self.peek_next()
        return self._last_id
