"""Configuration settings using Pydantic Settings.

Provides typed registry configuration with environment variable support.

Usage:
    from contentreg.config import RegistrySettings

    # Load from environment variables (CONTENTREG_*)
    settings = RegistrySettings()

    # Or override with explicit values
    settings = RegistrySettings(snapshot_path="registry.snap", autosave=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a ContentRegistry.

    Attributes:
        thread_safe: Serialize operations behind a single process-wide lock.
        snapshot_path: File used by save()/load() when no path is given.
        autosave: Write a snapshot after every committed mutation.
            Requires snapshot_path.

    Environment Variables:
        CONTENTREG_THREAD_SAFE
        CONTENTREG_SNAPSHOT_PATH
        CONTENTREG_AUTOSAVE
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENTREG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    thread_safe: bool = True
    snapshot_path: str | None = None
    autosave: bool = False
