"""contentreg: content-registration registry.

Assigns sequential ids to registered content records, tracks ownership and
keeps an access matrix of which principals may view each record.

Usage:
    from contentreg import ContentRegistry, InvocationContext

    registry = ContentRegistry()
    alice = InvocationContext(acting_principal="alice", ordering_index=1)

    result = registry.register(alice, "doc.pdf", 1024, "quarterly report", ["finance"])
    record_id = result.unwrap()

    registry.transfer(alice, record_id, "bob")
    registry.get(record_id).value.proprietor  # "bob"
"""

__version__ = "0.1.0"

# Core primitives
from contentreg.core import (
    AccessGrant,
    ContentRecord,
    ErrorCode,
    Principal,
    RegistryError,
    SequenceId,
    validate_label,
    validate_label_set,
)

# Configuration
from contentreg.config import RegistrySettings

# Registry
from contentreg.registry import ContentRegistry, InvocationContext, OperationResult

# Storage
from contentreg.storage import LocalStorage, Storage

__all__ = [
    # Version
    "__version__",
    # Core
    "SequenceId",
    "Principal",
    "ContentRecord",
    "AccessGrant",
    "ErrorCode",
    "RegistryError",
    "validate_label",
    "validate_label_set",
    # Registry
    "ContentRegistry",
    "InvocationContext",
    "OperationResult",
    # Config
    "RegistrySettings",
    # Storage
    "Storage",
    "LocalStorage",
]
