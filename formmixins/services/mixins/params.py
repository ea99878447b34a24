"""
Mixin argument parsing
======================
A mixin is invoked as a mustache lambda section and only ever sees the
literal, unparsed section text:

  {{#input-text}}email{{/input-text}}           → "email"
  {{#input-text}}{{toggle}}{{/input-text}}      → "{{toggle}}" (scope reference)
  {{#input-submit}}continue submit{{/input-submit}} → "continue submit"
  {{#selected}}contact=email{{/selected}}       → "contact=email"
  {{#date}}{{dob}}|D MMM YYYY{{/date}}          → "{{dob}}|D MMM YYYY"

Scope references are resolved through the ``render`` callable the renderer
hands to every lambda.

Ambiguity: a key written as ``{{x}}`` is always looked up in scope first, so a
field literally named ``{{x}}`` cannot be addressed while ``x`` is in scope.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

# Matches a whole-text {{x}} reference; the renderer may re-emit it as {{ x}}
_PLACEHOLDER = re.compile(r'^\{\{\s*([^{}]+?)\s*\}\}$')

Render = Callable[..., str]


def extract_key(text: Optional[str], render: Optional[Render] = None) -> str:
    """
    Return the field key a mixin was invoked with.

    ``{{x}}`` is replaced by the value of ``x`` in the current scope when that
    value is non-empty; anything else is taken literally.
    """
    key = (text or "").strip()
    match = _PLACEHOLDER.match(key)
    if not match:
        return key
    if render is not None:
        resolved = render("{{& %s}}" % match.group(1))
        if resolved:
            return resolved.strip()
    # the renderer re-emits {{x}} as {{ x}}; fall back to the written form
    return "{{%s}}" % match.group(1)


def split_words(text: Optional[str]) -> list[str]:
    return (text or "").split()


def split_assignment(text: Optional[str]) -> tuple[str, Optional[str]]:
    """``"field=value"`` → ``("field", "value")``; no ``=`` → ``(text, None)``."""
    name, sep, value = (text or "").partition("=")
    return name.strip(), (value.strip() if sep else None)


def split_pipe(text: Optional[str]) -> tuple[str, Optional[str]]:
    """``"value|format"`` → ``("value", "format")``."""
    value, sep, fmt = (text or "").partition("|")
    return value, (fmt or None) if sep else None
