"""Record models: content metadata and access grants."""

from contentreg.core.record.models import AccessGrant, ContentRecord

__all__ = [
    "ContentRecord",
    "AccessGrant",
]
