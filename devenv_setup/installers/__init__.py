# Debian-DevEnv-Setup/devenv_setup/installers/__init__.py

from enum import Enum


class Outcome(str, Enum):
    """What an installer did on this run."""
    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    NOTHING_TO_DO = "nothing_to_do"
