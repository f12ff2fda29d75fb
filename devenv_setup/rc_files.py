# Debian-DevEnv-Setup/devenv_setup/rc_files.py
"""
Line-level edits on shell startup files such as ~/.zshrc.

A "keyed" line is one that starts with `<KEY>=`, e.g. `ZSH_THEME="robbyrussell"`.
All writers keep the file's existing line endings untouched.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from devenv_setup.logger_utils import app_logger


def _read_lines(rc_path: Path) -> List[str]:
    # newline="" keeps \r\n endings as they are on disk; surrogateescape
    # round-trips bytes that are not valid UTF-8.
    with open(rc_path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read().splitlines(keepends=True)


def _write_lines(rc_path: Path, lines: Sequence[str]):
    with open(rc_path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write("".join(lines))


def _line_body(line: str) -> str:
    return line.rstrip("\r\n")


def _line_ending(line: str) -> str:
    return line[len(_line_body(line)):]


def parse_keyed_lines(lines: Sequence[str]) -> List[Tuple[Optional[str], str]]:
    """Pairs each raw line with its key, or None when it is not a KEY=... line."""
    parsed = []
    for line in lines:
        body = _line_body(line)
        key = None
        if "=" in body:
            candidate = body.split("=", 1)[0]
            if candidate and not candidate[0].isspace() and not candidate.startswith("#"):
                key = candidate
        parsed.append((key, line))
    return parsed


def has_exact_line(rc_path: Path, expected_line: str) -> bool:
    """True if some line of the file equals `expected_line` (ignoring the line ending)."""
    if not rc_path.is_file():
        return False
    return any(_line_body(line) == expected_line for line in _read_lines(rc_path))


def replace_keyed_line(rc_path: Path, key: str, new_line: str) -> int:
    """
    Rewrites every line beginning with `<key>=` to `new_line`, like
    `sed -i 's|^KEY=.*|NEW|'`. Returns how many lines were rewritten.

    When no line carries the key the file is not touched at all.
    """
    prefix = f"{key}="
    lines = _read_lines(rc_path)
    replaced = 0
    for index, line in enumerate(lines):
        if line.startswith(prefix):
            lines[index] = new_line + _line_ending(line)
            replaced += 1
    if replaced:
        _write_lines(rc_path, lines)
    app_logger.debug(f"replace_keyed_line({rc_path}, {key}): {replaced} line(s) rewritten.")
    return replaced


def upsert_keyed_line(rc_path: Path, key: str, new_line: str) -> str:
    """
    Guarantees exactly one `<key>=` line, set to `new_line`.

    The first keyed line is replaced in place and any later duplicates are
    dropped; if the key is absent the line is appended. A missing file is
    created. Returns "replaced", "appended" or "unchanged".
    """
    lines = _read_lines(rc_path) if rc_path.is_file() else []
    result_lines: List[str] = []
    found = False
    for line_key, line in parse_keyed_lines(lines):
        if line_key != key:
            result_lines.append(line)
            continue
        if not found:
            result_lines.append(new_line + (_line_ending(line) or "\n"))
            found = True

    if not found:
        if result_lines and not result_lines[-1].endswith("\n"):
            result_lines[-1] += "\n"
        result_lines.append(new_line + "\n")

    if result_lines == lines:
        return "unchanged"
    _write_lines(rc_path, result_lines)
    return "replaced" if found else "appended"


def append_lines_if_marker_absent(rc_path: Path, marker: str, new_lines: Sequence[str]) -> bool:
    """
    Appends `new_lines` to the file unless `marker` already occurs anywhere
    in it. Returns True if the file was modified.
    """
    content = "".join(_read_lines(rc_path))
    if marker in content:
        return False

    block = "".join(f"{line}\n" for line in new_lines)
    if content and not content.endswith("\n"):
        block = "\n" + block
    with open(rc_path, "a", encoding="utf-8", errors="surrogateescape") as f:
        f.write(block)
    app_logger.info(f"Appended {len(new_lines)} line(s) to {rc_path}.")
    return True
