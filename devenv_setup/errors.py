# Debian-DevEnv-Setup/devenv_setup/errors.py

from pathlib import Path
from typing import List, Optional, Union


class SetupError(Exception):
    """Base class for every failure raised by the setup tool."""


class SourceMissing(SetupError):
    """The font source directory does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Source font directory '{path}' not found.")


class ExternalCommandFailure(SetupError):
    """
    An external command (apt-get, curl pipeline, git, fc-cache, chsh...) exited
    with a non-zero status or could not be started at all.

    This is never recovered: it travels up to the entry point, which exits
    with `returncode`.
    """

    def __init__(
        self,
        command: Union[str, List[str]],
        returncode: int,
        stderr: Optional[str] = None
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self._build_message())

    @property
    def command_str(self) -> str:
        if isinstance(self.command, list):
            return " ".join(str(part) for part in self.command)
        return self.command

    def _build_message(self) -> str:
        message = f"Command '{self.command_str}' failed with exit status {self.returncode}."
        if self.stderr and self.stderr.strip():
            message += f"\n{self.stderr.strip()}"
        return message
