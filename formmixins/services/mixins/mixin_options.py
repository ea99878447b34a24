"""
Option group mixins
-------------------
{{#radio-group}}contact{{/radio-group}}   — radio buttons, one per option
{{#select}}country{{/select}}             — select box

``select`` renders through the text input builder with the option group
merged in, so it carries both the input label and the option list.
"""

from __future__ import annotations

from .builders import input_text, option_group
from .engine import RADIO_GROUP, SELECT


def register(registry) -> None:
    registry.add("radio-group", RADIO_GROUP, option_group)
    registry.add("select", SELECT, input_text, option_group)
