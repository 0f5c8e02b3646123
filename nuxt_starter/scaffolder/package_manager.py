"""Package manager detection and command lines."""

from __future__ import annotations

import os
from collections.abc import Mapping

# Order matters: the first matching user-agent prefix wins.
KNOWN_MANAGERS: tuple[str, ...] = ("bun", "pnpm", "yarn", "npm")
DEFAULT_MANAGER = "npm"


def detect_package_manager(env: Mapping[str, str] | None = None) -> str:
    """Guess the package manager that launched us.

    npm, pnpm, yarn and bun all set ``npm_config_user_agent`` (for example
    ``pnpm/9.1.0 npm/? node/v20.11.0 linux x64``) when running a package
    binary. Falls back to ``npm``.
    """
    env = os.environ if env is None else env
    user_agent = env.get("npm_config_user_agent", "")
    for manager in KNOWN_MANAGERS:
        if user_agent.startswith(manager):
            return manager
    return DEFAULT_MANAGER


def install_command(manager: str) -> list[str]:
    """Argument list that installs dependencies with *manager*."""
    if manager == "yarn":
        return ["yarn"]
    if manager in KNOWN_MANAGERS:
        return [manager, "install"]
    return [DEFAULT_MANAGER, "install"]


def dev_command(manager: str) -> str:
    """Shell command that starts the Nuxt dev server with *manager*."""
    if manager == "yarn":
        return "yarn dev"
    if manager in KNOWN_MANAGERS:
        return f"{manager} run dev"
    return f"{DEFAULT_MANAGER} run dev"
