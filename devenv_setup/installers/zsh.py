# Debian-DevEnv-Setup/devenv_setup/installers/zsh.py

from typing import Dict

from rich.markup import escape

from devenv_setup import console_output as con
from devenv_setup import system_utils
from devenv_setup.installers import Outcome
from devenv_setup.logger_utils import app_logger


def install_shell(app_config: Dict) -> Outcome:
    """Makes sure the zsh executable is available, installing it with apt-get if not."""
    zsh_config = app_config["zsh"]
    executable = zsh_config["executable"]

    if system_utils.command_exists(executable):
        version = system_utils.get_command_version(executable)
        con.print_info(f"Zsh is already installed. Version: {escape(version)}")
        app_logger.info(f"{executable} already on PATH ({version}).")
        return Outcome.ALREADY_INSTALLED

    con.print_info("Zsh not found. Installing...")
    system_utils.apt_update()
    system_utils.apt_install([zsh_config["package"]])

    con.print_success("Zsh installation complete.")
    app_logger.info("Zsh installed.")
    return Outcome.INSTALLED


def run(app_config: Dict) -> bool:
    con.print_header("Installing Zsh")
    install_shell(app_config)
    return True
