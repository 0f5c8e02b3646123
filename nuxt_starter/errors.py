"""Exceptions raised by the scaffold workflow."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Raised when a scaffold step fails irrecoverably."""


class TerminalError(ScaffoldError):
    """Raised when the terminal cannot be put into raw input mode."""


class InstallError(ScaffoldError):
    """Raised when the dependency install command fails."""

    def __init__(self, command: list[str], message: str, returncode: int | None = None) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(f"`{' '.join(command)}` {message}")
