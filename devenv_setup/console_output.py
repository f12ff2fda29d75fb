# Debian-DevEnv-Setup/devenv_setup/console_output.py

from typing import Any, Optional
from rich import box
from rich.console import Console
from rich.text import Text
from rich.style import Style
from rich.prompt import Prompt
from rich.padding import Padding
from rich.panel import Panel

# Styling comes from explicit markup only.
console = Console(highlight=False)

# Banner width used by print_header, independent of the terminal size.
HEADER_WIDTH = 70

PROMPT_STYLE = Style(color="magenta")

# --- Output Functions ---

def print_header(text: str):
    """
    Prints a fixed-width bordered banner announcing a section, e.g.
    print_header("Installing Zsh").
    """
    console.line()
    console.print(
        Panel(
            Text(text, style="bold cyan"),
            box=box.DOUBLE,
            border_style="cyan",
            width=HEADER_WIDTH,
        )
    )

def print_info(message: Any, icon: bool = True):
    """Prints an informational message using Rich markup."""
    prefix = "[bold blue]ℹ️ INFO:[/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_warning(message: Any, icon: bool = True):
    """Prints a warning message using Rich markup."""
    prefix = "[bold yellow]⚠️ WARNING:[/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_error(message: Any, icon: bool = True):
    """Prints an error message using Rich markup."""
    prefix = "[bold red]❌ ERROR:[/] " if icon else ""
    console.print(f"{prefix}[bold red]{message}[/]")

def print_success(message: Any, icon: bool = True):
    """Prints a success message using Rich markup."""
    prefix = "[bold green]✅ SUCCESS:[/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_sub_step(message: str, indent: int = 2):
    """Prints an indented sub-step line with a leading marker."""
    console.print(Padding(f"[bright_blue]❯[/] {message}", (0, 0, 0, indent)))

def clear_screen():
    console.clear()

# --- Input Functions ---

def ask_question(prompt_message: str, default: Optional[str] = None) -> str:
    """
    Asks a free-form question and returns the raw answer.

    No `choices` are passed to Rich: validation is left to the caller so an
    invalid answer can be reported the caller's own way.
    """
    rich_prompt = Text.assemble(
        ("❓ ", "default"),
        (prompt_message, PROMPT_STYLE),
    )
    return Prompt.ask(rich_prompt, default=default, console=console)

def wait_for_enter(prompt_message: str = "Press [Enter] to return to the menu..."):
    """Blocks until the user presses Enter."""
    console.line()
    console.input(Text(prompt_message, style="dim white"))
