"""Shared fixtures: an isolated configuration and a recorder standing in for external commands."""

import subprocess
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from devenv_setup import system_utils
from devenv_setup.config_loader import load_configuration, merge_config
from devenv_setup.errors import ExternalCommandFailure


class FakeSystem:
    """
    Records every command instead of running it.

    `available` is the set of executables command_exists() reports as present.
    `fail_on` maps a command substring to the exit status it should fail with.
    """

    def __init__(self):
        self.commands: List = []
        self.available: Set[str] = set()
        self.fail_on: Dict[str, int] = {}
        self.default_shell = "/bin/bash"
        self.stdout_for: Dict[str, str] = {"--version": "zsh 5.9 (x86_64-debian-linux-gnu)", "curl": "echo installer"}
        self.on_command: Optional[Callable[[List[str]], None]] = None

    @staticmethod
    def as_text(command) -> str:
        return command if isinstance(command, str) else " ".join(str(part) for part in command)

    def run_command(self, command, capture_output=False, display_command=None):
        self.commands.append(command)
        text = display_command or self.as_text(command)
        for needle, status in self.fail_on.items():
            if needle in text:
                raise ExternalCommandFailure(text, status, stderr="simulated failure")
        if self.on_command:
            self.on_command(command)
        stdout = ""
        for needle, output in self.stdout_for.items():
            if needle in text:
                stdout = output
                break
        return subprocess.CompletedProcess(args=command, returncode=0, stdout=stdout, stderr="")

    def command_exists(self, name: str) -> bool:
        return name in self.available

    def resolve_executable(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.available else None

    def get_default_shell(self) -> str:
        return self.default_shell

    def ran(self, needle: str) -> bool:
        return any(needle in self.as_text(command) for command in self.commands)

    def count(self, needle: str) -> int:
        return sum(1 for command in self.commands if needle in self.as_text(command))


@pytest.fixture
def fake_system(monkeypatch) -> FakeSystem:
    fake = FakeSystem()
    monkeypatch.setattr(system_utils, "run_command", fake.run_command)
    monkeypatch.setattr(system_utils, "command_exists", fake.command_exists)
    monkeypatch.setattr(system_utils, "resolve_executable", fake.resolve_executable)
    monkeypatch.setattr(system_utils, "get_default_shell", fake.get_default_shell)
    return fake


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def app_config(tmp_path: Path, home_dir: Path) -> Dict:
    """Default configuration with every path redirected under tmp_path."""
    overrides = {
        "fonts": {
            "source_dir": str(tmp_path / "fonts"),
            "install_dir": str(home_dir / ".local" / "share" / "fonts"),
        },
        "oh_my_zsh": {
            "install_dir": str(home_dir / ".oh-my-zsh"),
            "zshrc_path": str(home_dir / ".zshrc"),
        },
        "pyenv": {
            "root_dir": str(home_dir / ".pyenv"),
            "zshrc_path": str(home_dir / ".zshrc"),
        },
        "menu": {"invalid_choice_pause": 0},
    }
    return merge_config(load_configuration(None), overrides)


@pytest.fixture
def sample_zshrc() -> str:
    """Trimmed-down Oh My Zsh template."""
    return """# Path to your oh-my-zsh installation.
export ZSH="$HOME/.oh-my-zsh"

# See https://github.com/ohmyzsh/ohmyzsh/wiki/Themes
ZSH_THEME="robbyrussell"

plugins=(git)

source $ZSH/oh-my-zsh.sh
"""
