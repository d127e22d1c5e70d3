"""Error taxonomy shared by every registry operation.

Errors are returned inside an OperationResult rather than raised.
RegistryError exists for callers that prefer exceptions and opt in via
OperationResult.unwrap().
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Failure kinds returned by registry operations."""

    NOT_FOUND = "not-found-failure"
    ALREADY_EXISTS = "already-exists-failure"
    INVALID_NAME = "invalid-name-failure"  # name or description length
    INVALID_SIZE = "invalid-size-failure"
    INVALID_LABELS = "invalid-labels-failure"
    OWNERSHIP_MISMATCH = "ownership-mismatch-failure"

    # Reserved: no current operation returns these.
    UNAUTHORIZED = "unauthorized-failure"
    CONTROLLER_PERMISSION = "controller-permission-failure"
    VIEW_ACCESS_DENIED = "view-access-denied-failure"


class RegistryError(Exception):
    """Raised when a failed OperationResult is unwrapped."""

    def __init__(self, code: ErrorCode, message: str | None = None):
        self.code = code
        super().__init__(message or code.value)
