"""Interactive terminal selectors.

Two blocking, single-key-driven list prompts:

* ``select_single`` -- radio list, cursor wraps, returns one identifier.
* ``select_multiple`` -- checkbox list, cursor clamps, returns the chosen
  options in declaration order.

Quick usage::

    from nuxt_starter.catalog import AVAILABLE_MODULES, UI_FRAMEWORKS
    from nuxt_starter.selector import select_multiple, select_single

    framework = await select_single(UI_FRAMEWORKS)
    modules = await select_multiple(AVAILABLE_MODULES)
"""

from nuxt_starter.selector.keys import Key, KeyLexer, decode_keys
from nuxt_starter.selector.session import run_selector, select_multiple, select_single
from nuxt_starter.selector.state import (
    MultiSelectState,
    SingleSelectState,
    chosen_items,
    step_multi,
    step_single,
)

__all__ = [
    "Key",
    "KeyLexer",
    "MultiSelectState",
    "SingleSelectState",
    "chosen_items",
    "decode_keys",
    "run_selector",
    "select_multiple",
    "select_single",
    "step_multi",
    "step_single",
]
