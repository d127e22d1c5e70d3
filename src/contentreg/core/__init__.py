"""Core functionalities: stateless models, validation and error codes.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state
    mutation. For stateful services, see storage/ and registry/.
"""

from contentreg.core.errors import ErrorCode, RegistryError
from contentreg.core.identity import FIRST_SEQUENCE_ID, Principal, SequenceId
from contentreg.core.record import AccessGrant, ContentRecord
from contentreg.core.validation import (
    check_fields,
    validate_description,
    validate_label,
    validate_label_set,
    validate_name,
    validate_size,
)

__all__ = [
    # Identity
    "SequenceId",
    "Principal",
    "FIRST_SEQUENCE_ID",
    # Records
    "ContentRecord",
    "AccessGrant",
    # Errors
    "ErrorCode",
    "RegistryError",
    # Validation
    "validate_label",
    "validate_label_set",
    "validate_name",
    "validate_description",
    "validate_size",
    "check_fields",
]
