"""Validation functionality: pure field checks for record metadata."""

from contentreg.core.validation.operations import (
    MAX_BYTE_SIZE,
    MAX_DESCRIPTION_LENGTH,
    MAX_LABEL_COUNT,
    MAX_LABEL_LENGTH,
    MAX_NAME_LENGTH,
    check_fields,
    validate_description,
    validate_label,
    validate_label_set,
    validate_name,
    validate_size,
)

__all__ = [
    "MAX_NAME_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_LABEL_LENGTH",
    "MAX_LABEL_COUNT",
    "MAX_BYTE_SIZE",
    "validate_label",
    "validate_label_set",
    "validate_name",
    "validate_description",
    "validate_size",
    "check_fields",
]
