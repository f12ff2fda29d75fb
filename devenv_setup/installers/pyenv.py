# Debian-DevEnv-Setup/devenv_setup/installers/pyenv.py

from pathlib import Path
from typing import Dict

from rich.markup import escape

from devenv_setup import console_output as con
from devenv_setup import rc_files
from devenv_setup import system_utils
from devenv_setup.config import expand_path
from devenv_setup.installers import Outcome
from devenv_setup.logger_utils import app_logger


def configure_zshrc(pyenv_config: Dict) -> bool:
    """
    Adds the pyenv init lines to ~/.zshrc. The pyenv installer only takes care
    of bash, so zsh users need this. Skipped when the file does not exist or
    already mentions the marker. Returns True if the file changed.
    """
    zshrc_path: Path = expand_path(pyenv_config["zshrc_path"])
    if not zshrc_path.is_file():
        app_logger.info(f"{zshrc_path} not found, pyenv configuration not added.")
        return False

    added = rc_files.append_lines_if_marker_absent(
        zshrc_path, pyenv_config["marker"], pyenv_config["init_lines"]
    )
    if added:
        con.print_success("Configuration added to .zshrc")
    else:
        app_logger.info(f"pyenv configuration already present in {zshrc_path}.")
    return added


def install_language_version_manager(app_config: Dict) -> Outcome:
    pyenv_config = app_config["pyenv"]
    pyenv_root = expand_path(pyenv_config["root_dir"])

    if pyenv_root.is_dir():
        con.print_info(f"pyenv appears to be already installed in {escape(str(pyenv_root))}. Skipping.")
        app_logger.info(f"{pyenv_root} exists, skipping pyenv.")
        return Outcome.ALREADY_INSTALLED

    con.print_info("Installing pyenv dependencies for building Python...")
    system_utils.apt_update()
    system_utils.apt_install(pyenv_config["build_dependencies"])

    con.print_info("Running pyenv installer script...")
    system_utils.run_remote_script(pyenv_config["install_script_url"], interpreter="bash")

    con.console.line()
    con.print_success("pyenv installation script finished.")
    con.print_info("Adding pyenv configuration to shell startup files...")
    configure_zshrc(pyenv_config)

    con.print_info("Please restart your terminal or run 'source ~/.bashrc' or 'source ~/.zshrc'")
    con.print_info("for the changes to take effect.", icon=False)
    return Outcome.INSTALLED


def run(app_config: Dict) -> bool:
    con.print_header("Installing pyenv")
    install_language_version_manager(app_config)
    return True
