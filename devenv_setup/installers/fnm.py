# Debian-DevEnv-Setup/devenv_setup/installers/fnm.py

from typing import Dict

from devenv_setup import console_output as con
from devenv_setup import system_utils
from devenv_setup.installers import Outcome
from devenv_setup.logger_utils import app_logger


def install_runtime_manager(app_config: Dict) -> Outcome:
    """
    Installs FNM through its official install script unless `fnm` is already
    on PATH. The installer edits the shell startup files itself; the current
    process environment is left alone.
    """
    fnm_config = app_config["fnm"]

    if system_utils.command_exists(fnm_config["executable"]):
        con.print_info("FNM is already installed and available in your PATH.")
        app_logger.info("fnm already on PATH.")
        return Outcome.ALREADY_INSTALLED

    con.print_info("Installing FNM...")
    system_utils.run_remote_script(fnm_config["install_script_url"], interpreter="bash")
    app_logger.info("FNM install script finished.")

    con.console.line()
    con.print_success("FNM installation script has completed.")
    con.print_info("Please restart your terminal or run 'source ~/.bashrc' or 'source ~/.zshrc'")
    con.print_info("for the changes to take effect and to start using the 'fnm' command.", icon=False)
    return Outcome.INSTALLED


def run(app_config: Dict) -> bool:
    con.print_header("Installing FNM (Fast Node Manager)")
    install_runtime_manager(app_config)
    return True
