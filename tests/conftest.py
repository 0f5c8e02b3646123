"""Shared pytest fixtures for the nuxt-starter test suite.

Provides reusable fixtures for:
- Scripted key streams and an in-memory Rich console for the selectors
- A mocked registry client with canned versions
- Settings pointing at a temporary target directory
"""

from __future__ import annotations

import io
import os
from collections.abc import AsyncIterator, Callable, Iterable
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from nuxt_starter.config import DEFAULT_TEMPLATE_DIR, Settings
from nuxt_starter.registry import LATEST, RegistryClient
from nuxt_starter.selector import Key


# ---------------------------------------------------------------------------
# Selector helpers
# ---------------------------------------------------------------------------

async def _scripted(keys: Iterable[Key]) -> AsyncIterator[Key]:
    for key in keys:
        yield key


@pytest.fixture
def key_stream() -> Callable[..., AsyncIterator[Key]]:
    """Factory for an async key stream replaying the given keys in order."""

    def _make(*keys: Key) -> AsyncIterator[Key]:
        return _scripted(keys)

    return _make


@pytest.fixture
def render_console() -> Console:
    """A terminal-like console that renders into memory."""
    return Console(file=io.StringIO(), force_terminal=True, width=100, color_system="truecolor")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

SAMPLE_VERSIONS: dict[str, str] = {
    "nuxt": "4.1.2",
    "tailwindcss": "4.1.13",
    "@tailwindcss/vite": "4.1.13",
    "@nuxt/ui": "4.0.0",
    "@nuxt/icon": "2.0.0",
    "@nuxtjs/color-mode": "3.5.2",
    "@nuxt/image": "1.11.0",
    "@nuxtjs/i18n": "10.1.0",
    "@nuxtjs/supabase": "1.6.1",
}


@pytest.fixture
def mock_registry() -> AsyncMock:
    """Registry client returning ``SAMPLE_VERSIONS`` (``"latest"`` for unknown names)."""
    registry = AsyncMock(spec=RegistryClient)

    async def _latest(package: str) -> str:
        return SAMPLE_VERSIONS.get(package, LATEST)

    registry.latest_version = AsyncMock(side_effect=_latest)
    return registry


# ---------------------------------------------------------------------------
# Paths & settings
# ---------------------------------------------------------------------------

@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Path for a project that does not exist yet."""
    return tmp_path / "my-nuxt-app"


@pytest.fixture
def settings(target_dir: Path) -> Settings:
    """Settings scaffolding into ``target_dir`` from the bundled template, no install."""
    return Settings(target=str(target_dir), template_dir=DEFAULT_TEMPLATE_DIR, install=False)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every NUXT_STARTER_* variable and the npm user agent."""
    for name in list(os.environ):
        if name.startswith("NUXT_STARTER_") or name == "npm_config_user_agent":
            monkeypatch.delenv(name, raising=False)
