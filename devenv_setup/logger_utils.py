# Debian-DevEnv-Setup/devenv_setup/logger_utils.py
import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "DevEnvSetup"
LOG_FILENAME = "devenv_setup.log"
DEFAULT_LOG_DIR = Path.home() / ".config" / "devenv-setup"


def setup_logger(
    logger_name: str = LOGGER_NAME,
    log_level: int = logging.INFO,
    log_to_file: bool = True,
    log_file_path: Optional[Path] = None
) -> logging.Logger:
    """
    Configures and returns the application logger.

    User-facing messages go through console_output, so the only handler this
    adds is the log file. When the file cannot be opened a note goes to stderr
    and the logger is left with a NullHandler.

    Args:
        logger_name (str): The name for the logger instance.
        log_level (int): The level for the logger and the file handler.
        log_to_file (bool): Whether to enable logging to a file.
        log_file_path (Optional[Path]): Path to the log file. Defaults to
                                        ~/.config/devenv-setup/devenv_setup.log.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    # Calling this twice must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        effective_log_file_path = log_file_path or (DEFAULT_LOG_DIR / LOG_FILENAME)
        try:
            effective_log_file_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(effective_log_file_path, mode='a', encoding='utf-8')
        except OSError as e:
            # console_output is not used here so logging stays importable on its own.
            sys.stderr.write(
                f"ERROR [logger_utils]: Could not open log file {effective_log_file_path}. "
                f"File logging disabled. Error: {e}\n"
            )
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"
            ))
            logger.addHandler(file_handler)
            logger.info(f"File logging initialized to: {effective_log_file_path}")

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


# Importing modules log through this instance. Until main() calls setup_logger()
# it only carries a NullHandler, so importing the package writes no files.
app_logger = logging.getLogger(LOGGER_NAME)
app_logger.addHandler(logging.NullHandler())
