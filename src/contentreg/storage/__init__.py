"""Storage backends."""

from contentreg.storage.access import AccessMatrix
from contentreg.storage.counter import SequenceCounter
from contentreg.storage.local import LocalStorage
from contentreg.storage.protocol import Storage

__all__ = [
    "Storage",
    "LocalStorage",
    "SequenceCounter",
    "AccessMatrix",
]
