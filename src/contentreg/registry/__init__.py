"""Registry operation layer.

Architecture Note:
    registry/ is a stateful service layer that coordinates validation,
    authorization and storage commits. Unlike core/ (stateless
    functionalities), registry/ owns the lock that serializes operations.
"""

from contentreg.registry.context import InvocationContext
from contentreg.registry.registry import ContentRegistry
from contentreg.registry.result import OperationResult

__all__ = [
    "ContentRegistry",
    "InvocationContext",
    "OperationResult",
]
