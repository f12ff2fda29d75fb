# Debian-DevEnv-Setup/devenv_setup/main.py

import sys
from pathlib import Path

from rich.markup import escape

from devenv_setup import console_output as con
from devenv_setup.config import CONFIG_FILE_NAME
from devenv_setup.config_loader import load_configuration
from devenv_setup.errors import ExternalCommandFailure
from devenv_setup.logger_utils import app_logger, setup_logger
from devenv_setup.main_menu import main_menu_handler

# Conventional status for a run interrupted with Ctrl+C.
INTERRUPTED_EXIT_CODE = 130


def main() -> int:
    """Entry point of the interactive setup tool. Returns the process exit status."""
    try:
        setup_logger()
        app_logger.info("Debian DevEnv Setup started.")
        app_config = load_configuration(str(Path.cwd() / CONFIG_FILE_NAME))
        return main_menu_handler(app_config)
    except ExternalCommandFailure as e:
        app_logger.critical(f"Fatal command failure: {e}", exc_info=True)
        con.print_error(escape(str(e)))
        con.print_error("Setup aborted. Check the log file for details.", icon=False)
        return e.returncode or 1
    except (KeyboardInterrupt, EOFError):
        con.console.line()
        con.print_info("Operation cancelled by user. Exiting.")
        app_logger.warning("Interrupted by user.")
        return INTERRUPTED_EXIT_CODE
    except Exception as e:
        app_logger.critical(f"An unexpected critical error occurred: {e}", exc_info=True)
        con.console.print_exception()
        con.print_error(f"An unexpected critical error occurred: {escape(str(e))}")
        return 1
    finally:
        app_logger.info("Debian DevEnv Setup finished.")


if __name__ == "__main__":
    sys.exit(main())
