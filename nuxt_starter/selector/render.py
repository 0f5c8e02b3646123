"""Rich renderables for the selector frames.

Each function builds the complete frame for one state; the selector loop
hands it to ``rich.live.Live`` which erases the previous frame and draws
the new one in place.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.style import Style
from rich.text import Text

from nuxt_starter.catalog import Option
from nuxt_starter.utils import PRIMARY

from .state import MultiSelectState, SingleSelectState

PRIMARY_STYLE = Style(color=PRIMARY)
DIM_STYLE = Style(dim=True)
UNDERLINE_STYLE = Style(underline=True)

SINGLE_HINT = "↑/↓ to navigate, Enter to confirm"
MULTI_HINT = "↑/↓ to navigate, Space to toggle, Enter to confirm"


def render_single(
    options: Sequence[Option],
    state: SingleSelectState,
    title: str = "Select UI framework:",
) -> Text:
    """Radio list: the cursor row gets the ``›`` marker, a filled radio and the primary colour."""
    text = Text("\n")
    text.append("◆", style=PRIMARY_STYLE)
    text.append(f" {title}\n\n")

    for index, option in enumerate(options):
        current = index == state.cursor
        style = PRIMARY_STYLE if current else None
        text.append("  ")
        text.append("›" if current else " ", style=style)
        text.append(" ")
        text.append("●" if current else "○", style=style)
        text.append(" ")
        text.append(option.label, style=style)
        text.append(f" - {option.description}\n", style=DIM_STYLE)

    text.append("\n")
    text.append(SINGLE_HINT, style=DIM_STYLE)
    return text


def label_style(chosen: bool, current: bool) -> Style | None:
    """Style for a checkbox label.

    Chosen labels use the primary colour and the cursor row is underlined;
    a chosen row under the cursor gets both.
    """
    style = Style()
    if chosen:
        style += PRIMARY_STYLE
    if current:
        style += UNDERLINE_STYLE
    return style or None


def render_multi(
    options: Sequence[Option],
    state: MultiSelectState,
    title: str = "Pick the modules to install:",
    status: str = "Modules loaded",
) -> Text:
    """Checkbox list with a filled ``◼`` for chosen rows and ``◻`` otherwise."""
    text = Text("\n")
    text.append("◇", style=PRIMARY_STYLE)
    text.append(f" {status}\n\n")
    text.append("◆", style=PRIMARY_STYLE)
    text.append(f" {title}\n")

    for index, option in enumerate(options):
        chosen = state.chosen[index]
        text.append("│", style=PRIMARY_STYLE)
        text.append(" ")
        text.append("◼" if chosen else "◻", style=PRIMARY_STYLE if chosen else None)
        text.append(" ")
        text.append(option.label, style=label_style(chosen, index == state.cursor))
        text.append(f" - {option.description}\n", style=DIM_STYLE)

    text.append("\n")
    text.append(MULTI_HINT, style=DIM_STYLE)
    return text
