#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Translation resolver.

Resolves field and button labels through a host-supplied translate function.
Every lookup is relative to the shared translations prefix, so with a prefix
of ``"apply."`` the label of field ``name`` is looked up as
``"apply.fields.name.label"``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from formmixins.services.fields import FieldAccessor


TranslateFn = Callable[[str], Optional[str]]


def identity(key: str) -> str:
    return key


# -----------------------------------------------------------------------------

class Translator:
    """Hard and soft translation bound to one translate function."""

    def __init__(
        self,
        translate: Optional[TranslateFn] = None,
        prefix: str = "",
        fields: Optional["FieldAccessor"] = None,
    ) -> None:
        self._translate = translate or identity
        if prefix and not prefix.endswith("."):
            prefix += "."
        self.prefix = prefix
        self._fields = fields

    def t(self, key: str) -> str:
        """Translate *key*; falls back to the prefixed key."""
        key = self.prefix + key
        translated = self._translate(key)
        return key if translated is None else str(translated)

    def t_soft(self, key: str) -> Optional[str]:
        """Like t() but returns None when no translation exists."""
        key = self.prefix + key
        translated = self._translate(key)
        if translated is None or translated == key:
            return None
        return str(translated)

    def translation_key(self, field_key: str, prop: str) -> str:
        """Schema override for *prop*, else ``fields.<key>.<prop>``."""
        override = self._fields.get(field_key, prop) if self._fields is not None else None
        if override and isinstance(override, str):
            return override
        return f"fields.{field_key}.{prop}"
