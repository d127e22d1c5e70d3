"""Tests for RegistrySettings."""

from contentreg import RegistrySettings


def test_defaults():
    settings = RegistrySettings(_env_file=None)

    assert settings.thread_safe is True
    assert settings.snapshot_path is None
    assert settings.autosave is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CONTENTREG_THREAD_SAFE", "false")
    monkeypatch.setenv("CONTENTREG_SNAPSHOT_PATH", "/tmp/registry.snap")
    monkeypatch.setenv("CONTENTREG_AUTOSAVE", "true")

    settings = RegistrySettings(_env_file=None)

    assert settings.thread_safe is False
    assert settings.snapshot_path == "/tmp/registry.snap"
    assert settings.autosave is True


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("CONTENTREG_AUTOSAVE", "true")

    settings = RegistrySettings(_env_file=None, autosave=False)

    assert settings.autosave is False


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CONTENTREG_SNAPSHOT_PATH=from-file.snap\nUNRELATED=1\n")

    settings = RegistrySettings(_env_file=env_file)

    assert settings.snapshot_path == "from-file.snap"
