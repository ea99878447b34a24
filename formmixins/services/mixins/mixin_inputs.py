"""
Text input mixins
-----------------
{{#input-text}}name{{/input-text}}               — text input
{{#input-text-compound}}name{{/input-text-compound}} — input in a compound group
{{#input-text-code}}code{{/input-text-code}}     — short code input
{{#input-number}}age{{/input-number}}            — numeric keypad pattern
{{#input-phone}}phone{{/input-phone}}            — phone number, 18 chars max
{{#textarea}}details{{/textarea}}                — textarea
{{#input-date}}dob{{/input-date}}                — day, month and year inputs

The date mixin renders ``<key>-day`` (unless the field is ``inexact``),
``<key>-month`` and ``<key>-year``, all described by ``<key>-hint``.
"""

from __future__ import annotations

from .builders import input_text
from .engine import INPUT_TEXT_GROUP, TEXTAREA_GROUP
from .params import extract_key

_DATE_PARTS = (
    ("day", {"min": 1, "max": 31, "maxlength": 2}),
    ("month", {"min": 1, "max": 12, "maxlength": 2}),
    ("year", {"maxlength": 4}),
)


def register(registry) -> None:

    registry.add("input-text", INPUT_TEXT_GROUP, input_text)
    registry.add("input-text-compound", INPUT_TEXT_GROUP, input_text, {"compound": True})
    registry.add("input-text-code", INPUT_TEXT_GROUP, input_text, {"className": "input-code"})
    registry.add("input-number", INPUT_TEXT_GROUP, input_text, {"pattern": "[0-9]*"})
    registry.add("input-phone", INPUT_TEXT_GROUP, input_text, {"maxlength": 18})
    registry.add("textarea", TEXTAREA_GROUP, input_text)

    @registry.register("input-date")
    def input_date(ctx, text, render=None):
        key = extract_key(text, render)
        exact = not ctx.fields.inexact(key)

        parts = []
        for part, limits in _DATE_PARTS:
            if part == "day" and not exact:
                continue
            view = input_text(ctx, f"{key}-{part}", {
                "pattern": "[0-9]*",
                "hintId": f"{key}-hint",
                "date": True,
                **limits,
            })
            parts.append(ctx.registry.engine.render_partial(INPUT_TEXT_GROUP, view))
        return "\n".join(parts)
