"""The selector loop and the two public selector coroutines."""

from __future__ import annotations

from collections.abc import AsyncIterable, Callable, Sequence
from functools import partial
from typing import TypeVar

from rich.console import Console
from rich.live import Live
from rich.text import Text

from nuxt_starter.catalog import Option
from nuxt_starter.errors import TerminalError
from nuxt_starter.utils import console as default_console

from .keys import Key
from .render import render_multi, render_single
from .state import (
    MultiSelectState,
    SingleSelectState,
    chosen_items,
    step_multi,
    step_single,
)
from .terminal import terminal_session

S = TypeVar("S")

# Exit status used when the user interrupts a selector with Ctrl+C.
INTERRUPT_EXIT_CODE = 0


async def run_selector(
    initial: S,
    step: Callable[[S, Key], S],
    render: Callable[[S], Text],
    keys: AsyncIterable[Key],
    console: Console,
) -> S:
    """Drive one selector until the user confirms.

    The initial frame is drawn on entry. Each key is applied with *step* and
    the frame is redrawn only when the state actually changed.

    Returns:
        The state at the moment of confirmation.

    Raises:
        SystemExit: On an interrupt key.
        TerminalError: If the key stream ends before a confirmation.
    """
    state = initial
    with Live(render(state), console=console, auto_refresh=False, transient=False) as live:
        async for key in keys:
            if key is Key.INTERRUPT:
                raise SystemExit(INTERRUPT_EXIT_CODE)
            if key is Key.CONFIRM:
                return state
            new_state = step(state, key)
            if new_state != state:
                state = new_state
                live.update(render(state), refresh=True)
    raise TerminalError("input closed before a selection was confirmed")


async def _drive(
    initial: S,
    step: Callable[[S, Key], S],
    render: Callable[[S], Text],
    keys: AsyncIterable[Key] | None,
    console: Console | None,
) -> S:
    console = console or default_console
    if keys is not None:
        return await run_selector(initial, step, render, keys, console)
    with terminal_session() as reader:
        return await run_selector(initial, step, render, reader, console)


async def select_single(
    options: Sequence[Option],
    *,
    title: str = "Select UI framework:",
    keys: AsyncIterable[Key] | None = None,
    console: Console | None = None,
) -> str:
    """Let the user pick exactly one option with the arrow keys.

    Args:
        options: Non-empty, ordered options.
        title: Prompt shown above the list.
        keys: Key stream to read from; defaults to the real terminal.
        console: Console to render into; defaults to the shared console.

    Returns:
        The identifier of the option under the cursor at confirmation.
    """
    if not options:
        raise ValueError("select_single needs at least one option")
    final = await _drive(
        SingleSelectState(size=len(options)),
        step_single,
        partial(render_single, options, title=title),
        keys,
        console,
    )
    return options[final.cursor].id


async def select_multiple(
    options: Sequence[Option],
    *,
    title: str = "Pick the modules to install:",
    keys: AsyncIterable[Key] | None = None,
    console: Console | None = None,
) -> list[Option]:
    """Let the user tick any subset of *options*.

    Returns:
        The chosen options in declaration order; empty if none were ticked.
    """
    if not options:
        raise ValueError("select_multiple needs at least one option")
    final = await _drive(
        MultiSelectState.initial(len(options)),
        step_multi,
        partial(render_multi, options, title=title),
        keys,
        console,
    )
    return chosen_items(options, final)
