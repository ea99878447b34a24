"""
Submit button mixin
-------------------
{{#input-submit}}{{/input-submit}}                 — "buttons.next"
{{#input-submit}}continue{{/input-submit}}         — "buttons.continue"
{{#input-submit}}continue save-btn{{/input-submit}} — with id="save-btn"
"""

from __future__ import annotations

from .engine import INPUT_SUBMIT
from .params import split_words

DEFAULT_BUTTON = "next"


def register(registry) -> None:

    @registry.register("input-submit")
    def input_submit(ctx, text, render=None):
        words = split_words(text)
        value = words[0] if words else DEFAULT_BUTTON
        button_id = words[1] if len(words) > 1 else None

        view = {
            "value": ctx.translator.t(f"buttons.{value}"),
            "id": button_id,
        }
        return ctx.registry.engine.render_partial(INPUT_SUBMIT, view)
