"""
Field descriptor accessor: read-only queries over a parsed field schema.

Every accessor tolerates keys that are absent from the schema; templates use
ad hoc keys (for example to highlight another field's error) that never
appear in it.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from formmixins.schemas import ClassName, FieldSpec, LegendSpec, OptionSpec

# validator types that bound an input's length, in priority order
_LENGTH_VALIDATORS = ("maxlength", "exactlength")


def class_name_string(name: ClassName | None) -> str:
    if isinstance(name, (list, tuple)):
        return " ".join(name)
    return name or ""


class FieldAccessor:
    def __init__(self, fields: Mapping[str, FieldSpec]) -> None:
        self._fields = dict(fields)

    def __contains__(self, key: str) -> bool:
        return key in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def spec(self, key: str) -> Optional[FieldSpec]:
        return self._fields.get(key)

    def get(self, key: str, prop: str, default: Any = None) -> Any:
        spec = self._fields.get(key)
        return spec.get(prop, default) if spec is not None else default

    # ------------------------------------------------------------------ rules

    def maxlength(self, key: str) -> Any:
        spec = self._fields.get(key)
        if spec is None:
            return None
        for name in _LENGTH_VALIDATORS:
            for validator in spec.validators:
                if validator.type == name:
                    return validator.first_argument()
        return None

    def required(self, key: str) -> bool:
        spec = self._fields.get(key)
        if spec is None:
            return False
        if spec.required is not None:
            return spec.required
        return any(v.type == "required" for v in spec.validators)

    # ----------------------------------------------------------- presentation

    def type(self, key: str) -> str:
        spec = self._fields.get(key)
        return spec.type if spec is not None and spec.type else "text"

    def class_names(self, key: str, prop: str = "className") -> str:
        return class_name_string(self.get(key, prop))

    def legend(self, key: str) -> Optional[LegendSpec]:
        return self.get(key, "legend")

    def options(self, key: str) -> list[OptionSpec]:
        return self.get(key, "options", [])

    def toggle(self, key: str) -> Optional[str]:
        return self.get(key, "toggle")

    def attributes(self, key: str) -> Any:
        return self.get(key, "attributes")

    def inexact(self, key: str) -> bool:
        return self.get(key, "inexact") is True
