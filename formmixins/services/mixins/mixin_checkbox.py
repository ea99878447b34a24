"""
Checkbox mixins
---------------
{{#checkbox}}terms{{/checkbox}}
{{#checkbox-compound}}terms{{/checkbox-compound}}
{{#checkbox-required}}terms{{/checkbox-required}}   — marked invalid on error
"""

from __future__ import annotations

from .builders import checkbox
from .engine import CHECKBOX


def register(registry) -> None:
    registry.add("checkbox", CHECKBOX, checkbox)
    registry.add("checkbox-compound", CHECKBOX, checkbox, {"compound": True})
    registry.add("checkbox-required", CHECKBOX, checkbox, {"required": True})
