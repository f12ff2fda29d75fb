# Debian-DevEnv-Setup/devenv_setup/installers/oh_my_zsh.py

import os
from pathlib import Path
from typing import Dict

from rich.markup import escape

from devenv_setup import console_output as con
from devenv_setup import rc_files
from devenv_setup import system_utils
from devenv_setup.config import THEME_LINE_STRATEGIES, expand_path
from devenv_setup.errors import ExternalCommandFailure
from devenv_setup.installers import Outcome
from devenv_setup.installers.zsh import install_shell
from devenv_setup.logger_utils import app_logger


def ensure_git():
    """Oh My Zsh and the theme clone both need git."""
    if system_utils.command_exists("git"):
        app_logger.info("git already on PATH.")
        return
    con.print_info("Git not found. Installing git...")
    system_utils.apt_update()
    system_utils.apt_install(["git"])


def install_oh_my_zsh(omz_config: Dict) -> Outcome:
    omz_dir = expand_path(omz_config["install_dir"])
    if omz_dir.is_dir():
        con.print_info("Oh My Zsh is already installed.")
        return Outcome.ALREADY_INSTALLED

    con.print_info("Installing Oh My Zsh...")
    # --unattended: the installer must neither chsh nor exec into a zsh session.
    system_utils.run_remote_script(
        omz_config["install_script_url"],
        interpreter="sh",
        script_args=["--unattended"],
    )
    app_logger.info(f"Oh My Zsh installed in {omz_dir}.")
    return Outcome.INSTALLED


def theme_dir(omz_config: Dict) -> Path:
    return expand_path(omz_config["install_dir"]) / "custom" / "themes" / omz_config["theme_name"]


def install_theme(omz_config: Dict) -> Outcome:
    target_dir = theme_dir(omz_config)
    if target_dir.is_dir():
        con.print_info("Powerlevel10k theme is already installed.")
        return Outcome.ALREADY_INSTALLED

    con.print_info("Installing Powerlevel10k theme...")
    system_utils.git_clone_shallow(omz_config["theme_repo_url"], target_dir)
    app_logger.info(f"Theme cloned into {target_dir}.")
    return Outcome.INSTALLED


def select_theme(omz_config: Dict) -> Outcome:
    """
    Points the ZSH_THEME line of ~/.zshrc at the installed theme.

    With the default "replace" strategy only existing ZSH_THEME= lines are
    rewritten; a file without one is left exactly as it is and a warning is
    shown. "upsert" appends the line in that case.
    """
    zshrc_path = expand_path(omz_config["zshrc_path"])
    key = omz_config["theme_key"]
    theme_line = f'{key}="{omz_config["theme_value"]}"'
    strategy = omz_config.get("theme_line_strategy", "replace")
    if strategy not in THEME_LINE_STRATEGIES:
        raise ValueError(
            f"Unknown theme_line_strategy '{strategy}', expected one of {', '.join(THEME_LINE_STRATEGIES)}."
        )

    if rc_files.has_exact_line(zshrc_path, theme_line):
        con.print_info("Powerlevel10k theme is already set in .zshrc.")
        return Outcome.ALREADY_INSTALLED

    if not zshrc_path.is_file():
        con.print_warning(f"{escape(str(zshrc_path))} not found. Add '{escape(theme_line)}' to it manually.")
        app_logger.warning(f"{zshrc_path} missing, theme line not written.")
        return Outcome.NOTHING_TO_DO

    con.print_info("Setting Powerlevel10k theme in .zshrc...")
    if strategy == "upsert":
        result = rc_files.upsert_keyed_line(zshrc_path, key, theme_line)
        app_logger.info(f"Theme line {result} in {zshrc_path}.")
        return Outcome.INSTALLED

    if rc_files.replace_keyed_line(zshrc_path, key, theme_line) == 0:
        con.print_warning(
            f"No line starting with '{key}=' in {escape(str(zshrc_path))}; the file was left unchanged. "
            f"Add '{escape(theme_line)}' manually or set theme_line_strategy to \"upsert\"."
        )
        app_logger.warning(f"No {key}= line in {zshrc_path}, nothing replaced.")
        return Outcome.NOTHING_TO_DO
    app_logger.info(f"Theme line replaced in {zshrc_path}.")
    return Outcome.INSTALLED


def ensure_default_shell(zsh_config: Dict) -> Outcome:
    shell_name = zsh_config["executable"]
    current_shell = system_utils.get_default_shell()
    if os.path.basename(current_shell) == shell_name:
        con.print_info("Default shell is already Zsh.")
        return Outcome.ALREADY_INSTALLED

    zsh_path = system_utils.resolve_executable(shell_name)
    if not zsh_path:
        # install_shell() ran just before, so this only happens if PATH is odd.
        raise ExternalCommandFailure(
            ["chsh", "-s", shell_name],
            system_utils.COMMAND_NOT_FOUND_STATUS,
            stderr=f"'{shell_name}' is not on PATH, cannot make it the default shell.",
        )

    con.print_info("Changing default shell to Zsh...")
    system_utils.set_default_shell(zsh_path)
    con.print_success("Shell changed to Zsh. Please log out and log back in for the change to take effect.")
    return Outcome.INSTALLED


def install_framework_and_theme(app_config: Dict) -> Outcome:
    """
    Runs every step in order: git, zsh, Oh My Zsh, Powerlevel10k, the
    ZSH_THEME line and the default shell. Each step skips itself when its
    target state already holds. Reports INSTALLED if any step changed something.
    """
    omz_config = app_config["oh_my_zsh"]

    ensure_git()
    outcomes = [
        install_shell(app_config),
        install_oh_my_zsh(omz_config),
        install_theme(omz_config),
        select_theme(omz_config),
        ensure_default_shell(app_config["zsh"]),
    ]

    con.print_success("Oh My Zsh and Powerlevel10k setup complete!")
    con.print_info("Run 'p10k configure' in your new Zsh terminal to customize your prompt.")

    if Outcome.INSTALLED in outcomes:
        return Outcome.INSTALLED
    return Outcome.ALREADY_INSTALLED


def run(app_config: Dict) -> bool:
    con.print_header("Installing Oh My Zsh + Powerlevel10k")
    install_framework_and_theme(app_config)
    return True
