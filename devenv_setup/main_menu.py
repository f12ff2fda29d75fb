# Debian-DevEnv-Setup/devenv_setup/main_menu.py

import time
from typing import Callable, Dict

from rich.markup import escape

from devenv_setup import console_output as con
from devenv_setup.installers import fnm, fonts, oh_my_zsh, pyenv, zsh
from devenv_setup.logger_utils import app_logger

EXIT_CHOICE = "6"

MENU_OPTIONS: Dict[str, Dict] = {
    "1": {"name": "Install Custom Fonts", "handler": fonts.run},
    "2": {"name": "Install Zsh", "handler": zsh.run},
    "3": {"name": "Install Oh My Zsh + Powerlevel10k", "handler": oh_my_zsh.run},
    "4": {"name": "Install FNM (Fast Node Manager)", "handler": fnm.run},
    "5": {"name": "Install pyenv", "handler": pyenv.run},
    EXIT_CHOICE: {"name": "Exit Script", "handler": None},
}


def display_main_menu():
    """Clears the terminal and lists the numbered options."""
    con.clear_screen()
    con.print_header("Interactive Setup Menu")
    con.console.print("Please select an option by entering its number:")
    con.console.line()
    for number, option in MENU_OPTIONS.items():
        con.console.print(f"   [bold cyan]\\[{number}][/] {option['name']}")
    con.console.line()


def main_menu_handler(
    app_config: Dict,
    sleep: Callable[[float], None] = time.sleep
) -> int:
    """
    Runs the menu loop until the user picks Exit, then returns 0.

    Installer exceptions are not caught here: a failed external
    command ends the program.
    """
    pause = app_config.get("menu", {}).get("invalid_choice_pause", 2)
    prompt = f"Enter your choice [1-{EXIT_CHOICE}]"

    while True:
        display_main_menu()
        choice = con.ask_question(prompt).strip()

        if choice == EXIT_CHOICE:
            con.print_info("Exiting setup script. Goodbye!")
            app_logger.info("User chose to exit.")
            break

        option = MENU_OPTIONS.get(choice)
        if option is None:
            con.print_error(f"Invalid option '{escape(choice)}'. Please try again.")
            app_logger.info(f"Invalid menu choice: {choice!r}")
            sleep(pause)
            continue

        app_logger.info(f"Menu choice {choice}: {option['name']}")
        success = option["handler"](app_config)
        if not success:
            app_logger.warning(f"'{option['name']}' did not complete.")

        con.wait_for_enter()

    con.print_header("Setup script finished!")
    return 0
