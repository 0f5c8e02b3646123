"""Selection state and pure key-transition functions.

Both selectors keep an immutable state value and advance it with
``step(state, key) -> state``. Confirm and interrupt never change the state;
the selector loop acts on them directly. The single-select cursor wraps at
both ends while the multi-select cursor clamps.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from .keys import Key

T = TypeVar("T")


@dataclass(frozen=True)
class SingleSelectState:
    """Radio-list state: the cursor is the selection."""

    size: int
    cursor: int = 0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("a selector needs at least one option")
        if not 0 <= self.cursor < self.size:
            raise ValueError(f"cursor {self.cursor} out of range for {self.size} options")


@dataclass(frozen=True)
class MultiSelectState:
    """Checkbox-list state: a cursor plus one chosen flag per option."""

    chosen: tuple[bool, ...]
    cursor: int = 0

    def __post_init__(self) -> None:
        if not self.chosen:
            raise ValueError("a selector needs at least one option")
        if not 0 <= self.cursor < len(self.chosen):
            raise ValueError(f"cursor {self.cursor} out of range for {len(self.chosen)} options")

    @classmethod
    def initial(cls, size: int) -> "MultiSelectState":
        """Cursor on the first option, nothing chosen."""
        return cls(chosen=(False,) * size)

    @property
    def size(self) -> int:
        return len(self.chosen)


def step_single(state: SingleSelectState, key: Key) -> SingleSelectState:
    """Apply one key to a radio list. Up/down wrap around."""
    if key is Key.UP:
        return SingleSelectState(state.size, (state.cursor - 1 + state.size) % state.size)
    if key is Key.DOWN:
        return SingleSelectState(state.size, (state.cursor + 1) % state.size)
    return state


def step_multi(state: MultiSelectState, key: Key) -> MultiSelectState:
    """Apply one key to a checkbox list. Up/down clamp at the ends."""
    if key is Key.UP:
        return MultiSelectState(state.chosen, max(0, state.cursor - 1))
    if key is Key.DOWN:
        return MultiSelectState(state.chosen, min(state.size - 1, state.cursor + 1))
    if key is Key.TOGGLE:
        flags = list(state.chosen)
        flags[state.cursor] = not flags[state.cursor]
        return MultiSelectState(tuple(flags), state.cursor)
    return state


def chosen_items(items: Sequence[T], state: MultiSelectState) -> list[T]:
    """Items whose flag is set, in declaration order."""
    return [item for item, chosen in zip(items, state.chosen) if chosen]
