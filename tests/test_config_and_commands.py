"""Tests for configuration loading and the external command runner."""

import inspect
import json
import sys
from pathlib import Path

import pytest

from devenv_setup import system_utils
from devenv_setup.config import DEFAULT_CONFIG
from devenv_setup.config_loader import load_configuration, merge_config
from devenv_setup.errors import ExternalCommandFailure

# Captured before any fixture swaps in the command recorder.
REAL_RUN_COMMAND = system_utils.run_command


class TestConfigLoader:
    def test_defaults_without_file(self, tmp_path: Path):
        config = load_configuration(str(tmp_path / "setup_config.json"))

        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_overrides_are_deep_merged(self, tmp_path: Path):
        config_file = tmp_path / "setup_config.json"
        config_file.write_text(json.dumps({"fonts": {"source_dir": "/srv/fonts"}}))

        config = load_configuration(str(config_file))

        assert config["fonts"]["source_dir"] == "/srv/fonts"
        assert config["fonts"]["install_dir"] == DEFAULT_CONFIG["fonts"]["install_dir"]
        assert DEFAULT_CONFIG["fonts"]["source_dir"] == "./fonts"

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_invalid_file_falls_back_to_defaults(self, tmp_path: Path, content: str):
        config_file = tmp_path / "setup_config.json"
        config_file.write_text(content)

        assert load_configuration(str(config_file)) == DEFAULT_CONFIG

    def test_merge_does_not_mutate_inputs(self):
        base = {"a": {"b": [1]}}
        merged = merge_config(base, {"a": {"c": 2}})

        merged["a"]["b"].append(2)
        assert base == {"a": {"b": [1]}}


class TestRunCommand:
    def test_success_returns_output(self):
        process = system_utils.run_command(
            [sys.executable, "-c", "print('hello')"], capture_output=True
        )
        assert process.stdout.strip() == "hello"

    def test_non_zero_exit_raises_with_status(self):
        with pytest.raises(ExternalCommandFailure) as excinfo:
            system_utils.run_command(
                [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"],
                capture_output=True,
            )
        assert excinfo.value.returncode == 3
        assert "boom" in str(excinfo.value)

    def test_missing_executable_raises(self):
        with pytest.raises(ExternalCommandFailure) as excinfo:
            system_utils.run_command(["definitely-not-a-real-command-xyz"])
        assert excinfo.value.returncode == system_utils.COMMAND_NOT_FOUND_STATUS

    def test_stand_in_matches_real_signature(self, fake_system):
        real = inspect.signature(REAL_RUN_COMMAND).parameters
        fake = inspect.signature(fake_system.run_command).parameters

        assert list(fake) == list(real) == ["command", "capture_output", "display_command"]


class TestPrivileged:
    def test_sudo_only_when_not_root(self, monkeypatch):
        monkeypatch.setattr(system_utils.os, "geteuid", lambda: 1000)
        assert system_utils._privileged(["apt-get", "update"]) == ["sudo", "apt-get", "update"]

        monkeypatch.setattr(system_utils.os, "geteuid", lambda: 0)
        assert system_utils._privileged(["apt-get", "update"]) == ["apt-get", "update"]
