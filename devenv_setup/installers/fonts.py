# Debian-DevEnv-Setup/devenv_setup/installers/fonts.py

import shutil
from pathlib import Path
from typing import Dict, List, Sequence

from rich.markup import escape

from devenv_setup import console_output as con
from devenv_setup import system_utils
from devenv_setup.config import expand_path
from devenv_setup.errors import SourceMissing
from devenv_setup.installers import Outcome
from devenv_setup.logger_utils import app_logger


def find_font_files(source_dir: Path, extensions: Sequence[str]) -> List[Path]:
    """
    Lists every regular file below `source_dir` whose name ends with one of
    `extensions`. Matching is case-sensitive, as the files are found on disk.
    """
    suffixes = tuple(extensions)
    return sorted(
        path for path in source_dir.rglob("*")
        if path.is_file() and path.name.endswith(suffixes)
    )


def install_fonts(app_config: Dict) -> Outcome:
    """
    Copies the bundled fonts into the user font directory and rebuilds the
    font cache. Raises SourceMissing when the source directory is absent.
    """
    fonts_config = app_config["fonts"]
    source_dir = expand_path(fonts_config["source_dir"])
    install_dir = expand_path(fonts_config["install_dir"])

    if not source_dir.is_dir():
        raise SourceMissing(source_dir)

    font_files = find_font_files(source_dir, fonts_config["extensions"])
    if not font_files:
        con.print_info(f"No .ttf or .otf files found in '{escape(str(source_dir))}'. Nothing to install.")
        app_logger.info(f"No font files under {source_dir}.")
        return Outcome.NOTHING_TO_DO

    con.print_info(f"Found {len(font_files)} font(s) to install.")
    app_logger.info(f"Installing {len(font_files)} font(s) from {source_dir} into {install_dir}.")

    con.print_info(f"Creating font directory: {escape(str(install_dir))}")
    install_dir.mkdir(parents=True, exist_ok=True)

    con.print_info("Copying fonts...")
    for font_file in font_files:
        target = install_dir / font_file.name
        shutil.copy2(font_file, target)
        con.print_sub_step(f"'{escape(str(font_file))}' -> '{escape(str(target))}'")
        app_logger.info(f"Copied {font_file} to {target}")

    con.print_info("Updating font cache...")
    system_utils.run_command(["fc-cache", "-f", "-v"])

    con.print_success("Font installation complete!")
    return Outcome.INSTALLED


def run(app_config: Dict) -> bool:
    con.print_header("Installing Custom Fonts")
    try:
        install_fonts(app_config)
    except SourceMissing as e:
        con.print_error(f"{escape(str(e))} Skipping font installation.")
        app_logger.warning(f"Font installation skipped: {e}")
        return False
    return True
