"""Shared utility functions for nuxt-starter.

Provides async command execution, JSON I/O, template-tree copying and
Rich-based console output.
"""

from __future__ import annotations

import asyncio
import json
import os
import shutil
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console(highlight=False)

# Brand colour used by the selectors and the next-steps panel (#eb1438).
PRIMARY = "#eb1438"

_verbose = False

# Template files that npm would otherwise strip or rename on publish.
RENAMED_FILES: dict[str, str] = {
    "_gitignore": ".gitignore",
}

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously with stdin closed.

    Args:
        cmd: Argument list; the first element is the executable.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams so the user sees the tool's own output).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple. If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )
    stdout_bytes, stderr_bytes = await process.communicate()

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse the JSON document at *path*.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    return json.loads(Path(path).read_text(encoding="utf-8"))


async def save_json(data: dict[str, Any], path: str | Path) -> None:
    """Save *data* as JSON with a two-space indent.

    The write runs in a worker thread so the event loop is never blocked.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def _copy_tree_sync(src: Path, dest: Path) -> list[Path]:
    written: list[Path] = []
    for entry in sorted(src.rglob("*")):
        rel = entry.relative_to(src)
        target = dest / rel.parent / RENAMED_FILES.get(rel.name, rel.name)
        if entry.is_dir():
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(entry, target)
            written.append(target)
    return written


async def copy_tree(src: str | Path, dest: str | Path) -> list[Path]:
    """Recursively copy the template at *src* into *dest*.

    Existing directories are merged; files listed in ``RENAMED_FILES`` are
    written under their real name (``_gitignore`` -> ``.gitignore``).

    Returns:
        The list of files written, in sorted source order.

    Raises:
        FileNotFoundError: If *src* is not a directory.
    """
    src_path = Path(src)
    if not src_path.is_dir():
        raise FileNotFoundError(f"Template directory not found: {src_path}")
    return await asyncio.to_thread(_copy_tree_sync, src_path, Path(dest))


def list_visible_entries(path: str | Path) -> list[str]:
    """Return the names of the non-hidden entries in *path*."""
    return sorted(p.name for p in Path(path).iterdir() if not p.name.startswith("."))


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def set_verbose(enabled: bool) -> None:
    """Enable or disable :func:`print_debug` output."""
    global _verbose
    _verbose = enabled


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    console.print(message)


def print_debug(message: str) -> None:
    """Print a dim diagnostic line when verbose output is enabled."""
    if _verbose:
        console.print(f"[dim]{message}[/dim]")


def print_next_steps(commands: list[str]) -> None:
    """Print the boxed "Next steps" panel listing *commands*."""
    body = Text()
    body.append("\n")
    for command in commands:
        body.append("   › ", style=PRIMARY)
        body.append(f"{command}\n")

    console.print()
    console.print(
        Panel(
            body,
            title="Next steps",
            title_align="left",
            box=box.ROUNDED,
            expand=False,
            padding=(0, 2),
        )
    )
    console.print()
