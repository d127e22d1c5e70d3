"""Identity functionality: sequence ids and principals."""

from contentreg.core.identity.models import FIRST_SEQUENCE_ID, Principal, SequenceId

__all__ = [
    "SequenceId",
    "Principal",
    "FIRST_SEQUENCE_ID",
]
