"""Configuration module using Pydantic Settings.

Usage:
    from contentreg.config import RegistrySettings

    settings = RegistrySettings(snapshot_path="registry.snap")
"""

from contentreg.config.settings import RegistrySettings

__all__ = [
    "RegistrySettings",
]
