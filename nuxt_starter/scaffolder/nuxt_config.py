"""Text patches for the generated ``nuxt.config.ts`` and stylesheet."""

from __future__ import annotations

import re
from collections.abc import Sequence

from nuxt_starter.catalog import MODULE_CONFIG_BLOCKS
from nuxt_starter.errors import ScaffoldError

from .templates import TemplateRenderer

CONFIG_OPENER_RE = re.compile(r"export default defineNuxtConfig\(\{")
_TAILWIND_IMPORT_RE = re.compile(r"^import tailwindcss from ['\"]@tailwindcss/vite['\"];?\n+", re.MULTILINE)
_TAILWIND_VITE_RE = re.compile(
    r"\n[ \t]*vite:\s*\{\s*plugins:\s*\[\s*tailwindcss\(\)\s*\],?\s*\},?"
)
_TAILWIND_CSS_IMPORT_RE = re.compile(r"^@import ['\"]tailwindcss['\"];?[ \t]*$", re.MULTILINE)

NUXT_UI_CSS_IMPORT = '@import "@nuxt/ui";'


def render_modules_block(modules: Sequence[str], renderer: TemplateRenderer | None = None) -> str:
    """Render the ``modules: [...]`` entry plus any module-specific blocks."""
    renderer = renderer or TemplateRenderer()
    blocks = [MODULE_CONFIG_BLOCKS[m] for m in modules if m in MODULE_CONFIG_BLOCKS]
    rendered = renderer.render("modules_block.ts.j2", {"modules": list(modules), "blocks": blocks})
    return rendered.rstrip("\n")


def insert_modules(
    source: str,
    modules: Sequence[str],
    renderer: TemplateRenderer | None = None,
) -> str:
    """Insert the modules block right after ``export default defineNuxtConfig({``.

    Returns *source* unchanged when *modules* is empty.

    Raises:
        ScaffoldError: If the config has no ``defineNuxtConfig({`` opener.
    """
    if not modules:
        return source
    if not CONFIG_OPENER_RE.search(source):
        raise ScaffoldError("nuxt.config.ts has no `export default defineNuxtConfig({` to patch")
    block = render_modules_block(modules, renderer)
    return CONFIG_OPENER_RE.sub(
        lambda match: f"{match.group(0)}\n  {block}", source, count=1
    )


def strip_tailwind_vite(source: str) -> str:
    """Remove the ``@tailwindcss/vite`` import and its ``vite.plugins`` entry.

    @nuxt/ui wires Tailwind itself, so the standalone plugin must go.
    """
    source = _TAILWIND_IMPORT_RE.sub("", source, count=1)
    return _TAILWIND_VITE_RE.sub("", source, count=1)


def add_nuxt_ui_css(source: str) -> str:
    """Add ``@import "@nuxt/ui";`` after the Tailwind import (or at the top)."""
    if NUXT_UI_CSS_IMPORT in source:
        return source
    match = _TAILWIND_CSS_IMPORT_RE.search(source)
    if match is None:
        return f"{NUXT_UI_CSS_IMPORT}\n{source}"
    return f"{source[: match.end()]}\n{NUXT_UI_CSS_IMPORT}{source[match.end():]}"
