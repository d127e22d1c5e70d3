"""Invocation context supplied by the hosting environment."""

from __future__ import annotations

from dataclasses import dataclass

from contentreg.core.identity import Principal


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Ambient inputs of a single registry call.

    The registry trusts both values as given; authenticating the caller and
    advancing the ordering index are the host's job.

    Attributes:
        acting_principal: Identity issuing the call.
        ordering_index: Current external ordering index (e.g. block height),
            recorded as registration_height on new records.
    """

    acting_principal: Principal
    ordering_index: int = 0
