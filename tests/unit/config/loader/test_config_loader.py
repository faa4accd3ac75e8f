"""Tests for the combined file and environment configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from notify_relay.config.exceptions import ConfigLoadError, ConfigValidationError, suggest_config_fix
from notify_relay.config.loader.config_loader import ConfigLoader
from notify_relay.config.loader.env_loader import EnvLoader


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults are used when no file exists and no overrides are set."""
        monkeypatch.chdir(tmp_path)
        loader = ConfigLoader(env_loader=EnvLoader(environ={}))

        config = loader.load()

        assert config.queue.max_retries == 5
        assert config.store.backend == "memory"

    def test_discovers_default_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test notify-relay.yaml in the working directory is picked up."""
        monkeypatch.chdir(tmp_path)
        _ = (tmp_path / "notify-relay.yaml").write_text("queue:\n  max_retries: 1\n", encoding="utf-8")

        config = ConfigLoader(env_loader=EnvLoader(environ={})).load()

        assert config.queue.max_retries == 1

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        """Test environment values win over file values, untouched keys survive."""
        path = tmp_path / "relay.yaml"
        _ = path.write_text("queue:\n  max_retries: 1\n  retry_delay: 0.2\n", encoding="utf-8")
        env = EnvLoader(environ={"NOTIFY_RELAY_QUEUE__MAX_RETRIES": "4"})

        config = ConfigLoader(env_loader=env).load(path)

        assert config.queue.max_retries == 4
        assert config.queue.retry_delay == 0.2

    def test_invalid_max_retries_in_file_falls_back(self, tmp_path: Path) -> None:
        """Test an invalid retry budget in the file falls back to five."""
        path = tmp_path / "relay.yaml"
        _ = path.write_text("queue:\n  max_retries: lots\n", encoding="utf-8")

        config = ConfigLoader(env_loader=EnvLoader(environ={})).load(path)

        assert config.queue.max_retries == 5

    def test_validation_error_wrapped(self, tmp_path: Path) -> None:
        """Test invalid configuration raises ConfigValidationError with field details."""
        path = tmp_path / "relay.yaml"
        _ = path.write_text("store:\n  backend: sqlite\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            _ = ConfigLoader(env_loader=EnvLoader(environ={})).load(path)

        errors = exc_info.value.context["validation_errors"]
        assert errors[0]["field"] == "store.backend"
        suggestion = suggest_config_fix(exc_info.value)
        assert suggestion is not None
        assert "store.backend" in suggestion

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        """Test an explicit path that does not exist is an error."""
        with pytest.raises(ConfigLoadError) as exc_info:
            _ = ConfigLoader(env_loader=EnvLoader(environ={})).load(tmp_path / "absent.yaml")

        suggestion = suggest_config_fix(exc_info.value)
        assert suggestion is not None
        assert "absent.yaml" in suggestion
