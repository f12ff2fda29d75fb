# Debian-DevEnv-Setup/devenv_setup/system_utils.py

import os
import pwd
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from rich.markup import escape

from devenv_setup import console_output as con
from devenv_setup.errors import ExternalCommandFailure
from devenv_setup.logger_utils import app_logger

# Exit status a shell reports for a command it cannot find.
COMMAND_NOT_FOUND_STATUS = 127


def run_command(
    command: Union[str, List[str]],
    capture_output: bool = False,
    display_command: Optional[str] = None
) -> subprocess.CompletedProcess:
    """
    Runs one external command synchronously and waits for it to finish.

    Output is streamed to the terminal unless `capture_output` is set. There is
    no timeout. A non-zero exit status, or an executable that cannot be found,
    raises ExternalCommandFailure; callers are not expected to catch it.

    `display_command` replaces the command in log and console output, for
    commands whose argv embeds a whole downloaded script.
    """
    if isinstance(command, list):
        command = [str(part) for part in command]
        display_command_str = display_command or subprocess.list2cmdline(command)
    else:
        display_command_str = display_command or command

    app_logger.info(f"Executing: {display_command_str}")
    con.print_sub_step(f"[dim]Executing: {escape(display_command_str)}[/]")

    try:
        process = subprocess.run(
            command,
            check=False,
            capture_output=capture_output,
            text=True
        )
    except FileNotFoundError as e:
        app_logger.error(f"Command executable not found: '{display_command_str}'")
        raise ExternalCommandFailure(
            display_command_str, COMMAND_NOT_FOUND_STATUS, stderr=f"Executable not found: {e.filename}"
        ) from e

    if capture_output and process.stdout and process.stdout.strip():
        app_logger.debug(f"CMD STDOUT for '{display_command_str}':\n{process.stdout.strip()}")
    if capture_output and process.stderr and process.stderr.strip():
        # Some tools write progress to stderr even on success.
        app_logger.warning(f"CMD STDERR for '{display_command_str}':\n{process.stderr.strip()}")

    if process.returncode != 0:
        app_logger.error(f"Command '{display_command_str}' returned non-zero exit status {process.returncode}.")
        raise ExternalCommandFailure(display_command_str, process.returncode, stderr=process.stderr)

    return process


def command_exists(name: str) -> bool:
    """Checks whether `name` resolves to an executable on the search path."""
    return shutil.which(name) is not None


def resolve_executable(name: str) -> Optional[str]:
    return shutil.which(name)


def get_command_version(name: str) -> str:
    """Returns the first line printed by `<name> --version`."""
    process = run_command([name, "--version"], capture_output=True)
    output = (process.stdout or "").strip()
    return output.splitlines()[0] if output else ""


def _privileged(command: List[str]) -> List[str]:
    """Prefixes `sudo` unless the process already runs as root."""
    if os.geteuid() == 0:
        return command
    return ["sudo"] + command


# --- Package management (apt-get) ---

def apt_update():
    """Refreshes the package index."""
    app_logger.info("Refreshing apt package index.")
    run_command(_privileged(["apt-get", "update"]))


def apt_install(packages: Sequence[str]):
    """Installs `packages` non-interactively with apt-get."""
    if not packages:
        app_logger.info("apt_install called with an empty package list, nothing to do.")
        return
    app_logger.info(f"Installing apt packages: {', '.join(packages)}")
    run_command(_privileged(["apt-get", "install", "-y", *packages]))


# --- Network installers & version control ---

def fetch_remote_script(url: str, curl_flags: Sequence[str] = ("-fsSL",)) -> str:
    """Downloads an install script and returns its text."""
    process = run_command(["curl", *curl_flags, url], capture_output=True)
    return process.stdout or ""


def run_remote_script(
    url: str,
    interpreter: str = "bash",
    script_args: Sequence[str] = (),
    curl_flags: Sequence[str] = ("-fsSL",)
) -> subprocess.CompletedProcess:
    """
    Fetches the script at `url` and runs it with `interpreter`.

    The download and the execution are two separate commands; a failed
    download raises before anything runs.
    """
    script = fetch_remote_script(url, curl_flags=curl_flags)
    display = f"{interpreter} <script from {url}>"
    if script_args:
        display += " " + " ".join(script_args)
    return run_command(
        [interpreter, "-c", script, interpreter, *script_args],
        display_command=display
    )


def git_clone_shallow(repo_url: str, destination: Path):
    """Clones only the most recent revision of `repo_url` into `destination`."""
    run_command(["git", "clone", "--depth=1", repo_url, str(destination)])


# --- Default shell ---

def get_default_shell() -> str:
    """
    Returns the login shell recorded for the current user.
    Falls back to $SHELL when the user has no passwd entry (some containers).
    """
    try:
        return pwd.getpwuid(os.getuid()).pw_shell
    except KeyError:
        app_logger.warning("No passwd entry for the current uid, falling back to $SHELL.")
        return os.environ.get("SHELL", "")


def set_default_shell(shell_path: str):
    """
    Changes the user's login shell with chsh. The change applies to new
    login sessions only; the running process keeps its environment.
    """
    app_logger.info(f"Changing default shell to {shell_path}.")
    run_command(["chsh", "-s", shell_path])
