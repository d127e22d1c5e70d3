"""Field validation for record metadata.

Pure predicates with no storage access. They never raise: anything that is
not a well-formed value (wrong type, out of bounds) is simply invalid.
Callers translate a False into an ErrorCode.

Usage:
    validate_label("finance")          # True
    validate_label_set(["a", "b"])     # True
    check_fields("doc.pdf", 1024, "desc", ["a"])  # None (all valid)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from contentreg.core.errors import ErrorCode

MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 128
MAX_LABEL_LENGTH = 32
MAX_LABEL_COUNT = 10
MAX_BYTE_SIZE = 1_000_000_000  # exclusive


def _text_within(value: Any, maximum: int) -> bool:
    return isinstance(value, str) and 1 <= len(value) <= maximum


def validate_label(tag: Any) -> bool:
    """Check a single classification label is 1-32 characters."""
    return _text_within(tag, MAX_LABEL_LENGTH)


def validate_label_set(tags: Any) -> bool:
    """Check a label sequence holds 1-10 valid labels.

    A bare string is rejected even though it is a sequence: "abc" is one
    label, not three.

    Args:
        tags: Ordered labels. Duplicates are allowed.

    Returns:
        True if count and every label are within bounds.
    """
    if isinstance(tags, (str, bytes)) or not isinstance(tags, Sequence):
        return False
    if not 1 <= len(tags) <= MAX_LABEL_COUNT:
        return False
    return all(validate_label(tag) for tag in tags)


def validate_name(name: Any) -> bool:
    """Check a display name is 1-64 characters."""
    return _text_within(name, MAX_NAME_LENGTH)


def validate_description(description: Any) -> bool:
    """Check a description is 1-128 characters."""
    return _text_within(description, MAX_DESCRIPTION_LENGTH)


def validate_size(size: Any) -> bool:
    """Check a byte size satisfies 1 <= size < 1e9. Booleans are not sizes."""
    if isinstance(size, bool) or not isinstance(size, int):
        return False
    return 1 <= size < MAX_BYTE_SIZE


def check_fields(
    name: Any,
    size: Any,
    description: Any,
    labels: Sequence[str] | Any,
) -> ErrorCode | None:
    """Run every metadata check shared by register and modify.

    Checks run in field order (name, size, description, labels) and the
    first failure wins.

    Returns:
        The ErrorCode of the first failing field, or None if all pass.
    """
    if not validate_name(name):
        return ErrorCode.INVALID_NAME
    if not validate_size(size):
        return ErrorCode.INVALID_SIZE
    if not validate_description(description):
        return ErrorCode.INVALID_NAME
    if not validate_label_set(labels):
        return ErrorCode.INVALID_LABELS
    return None
