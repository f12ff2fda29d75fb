# Debian-DevEnv-Setup/devenv_setup/config.py

from pathlib import Path
from typing import Any, Dict, Union

# --- Constants ---
CONFIG_FILE_NAME = "setup_config.json"

OH_MY_ZSH_INSTALL_URL = "https://raw.github.com/ohmyzsh/ohmyzsh/master/tools/install.sh"
POWERLEVEL10K_REPO_URL = "https://github.com/romkatv/powerlevel10k.git"
FNM_INSTALL_URL = "https://fnm.vercel.app/install"
PYENV_INSTALL_URL = "https://pyenv.run"

# Native packages needed to compile CPython from source with pyenv.
PYENV_BUILD_DEPENDENCIES = [
    "make", "build-essential", "libssl-dev", "zlib1g-dev",
    "libbz2-dev", "libreadline-dev", "libsqlite3-dev", "wget", "curl", "llvm",
    "libncursesw5-dev", "xz-utils", "tk-dev", "libxml2-dev", "libxmlsec1-dev",
    "libffi-dev", "liblzma-dev",
]

PYENV_INIT_LINES = [
    'export PYENV_ROOT="$HOME/.pyenv"',
    'command -v pyenv >/dev/null || export PATH="$PYENV_ROOT/bin:$PATH"',
    'eval "$(pyenv init -)"',
]

THEME_LINE_STRATEGIES = ("replace", "upsert")

# Every key can be overridden from setup_config.json; see config_loader.
DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "fonts": {
        "source_dir": "./fonts",
        "install_dir": "~/.local/share/fonts",
        "extensions": [".ttf", ".otf"],
    },
    "zsh": {
        "executable": "zsh",
        "package": "zsh",
    },
    "oh_my_zsh": {
        "install_dir": "~/.oh-my-zsh",
        "install_script_url": OH_MY_ZSH_INSTALL_URL,
        "theme_name": "powerlevel10k",
        "theme_repo_url": POWERLEVEL10K_REPO_URL,
        "theme_key": "ZSH_THEME",
        "theme_value": "powerlevel10k/powerlevel10k",
        "zshrc_path": "~/.zshrc",
        "theme_line_strategy": "replace",
    },
    "fnm": {
        "executable": "fnm",
        "install_script_url": FNM_INSTALL_URL,
    },
    "pyenv": {
        "root_dir": "~/.pyenv",
        "install_script_url": PYENV_INSTALL_URL,
        "build_dependencies": PYENV_BUILD_DEPENDENCIES,
        "zshrc_path": "~/.zshrc",
        "marker": "PYENV_ROOT",
        "init_lines": PYENV_INIT_LINES,
    },
    "menu": {
        "invalid_choice_pause": 2,
    },
}


def expand_path(value: Union[str, Path]) -> Path:
    """Turns a configured path (which may start with ~) into a Path."""
    return Path(value).expanduser()
