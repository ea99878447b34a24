"""
Pydantic v2 models for the declarative field schema.

A field schema maps a field key to a record such as::

    {
        "email": {
            "type": "email",
            "validate": ["required", {"type": "maxlength", "arguments": [254]}],
            "className": ["form-control", "form-control-3-4"],
        },
        "contact": {
            "legend": {"value": "fields.contact.legend", "className": "visuallyhidden"},
            "options": ["email", {"value": "phone", "toggle": "phone-number",
                                  "child": "input-text"}],
        },
    }
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from formmixins.core.errors import ConstructionError


# camelCase schema property → model attribute
_ALIASES = {
    "validate": "validators",
    "className": "class_name",
    "labelClassName": "label_class_name",
}

ClassName = Union[str, list[str]]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Field parts
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ValidatorSpec(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    arguments: Any = None

    @model_validator(mode="before")
    @classmethod
    def from_name(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"type": data}
        return data

    def first_argument(self) -> Any:
        if isinstance(self.arguments, (list, tuple)):
            return self.arguments[0] if self.arguments else None
        return self.arguments


# -----------------------------------------------------------------------------

class OptionSpec(BaseModel):
    model_config = ConfigDict(extra="allow")

    value: Any = None
    label: Optional[str] = None
    toggle: Optional[str] = None
    child: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def from_literal(cls, data: Any) -> Any:
        # a bare option is both its own label and value
        if isinstance(data, str):
            return {"value": data, "label": data}
        return data


# -----------------------------------------------------------------------------

class LegendSpec(BaseModel):
    value: Optional[str] = None
    class_name: Optional[ClassName] = Field(None, alias="className")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def from_literal(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        return data


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Field
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class FieldSpec(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str = "text"
    validators: list[ValidatorSpec] = Field(default_factory=list, alias="validate")
    required: Optional[bool] = None
    class_name: Optional[ClassName] = Field(None, alias="className")
    label_class_name: Optional[ClassName] = Field(None, alias="labelClassName")
    label: Optional[str] = None
    hint: Optional[str] = None
    legend: Optional[LegendSpec] = None
    options: list[OptionSpec] = Field(default_factory=list)
    toggle: Optional[str] = None
    child: Optional[str] = None
    attributes: Any = None
    inexact: bool = False

    @field_validator("validators", mode="before")
    @classmethod
    def listify_validators(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (str, Mapping)):
            v = [v]
        return [item for item in v if isinstance(item, str) or
                (isinstance(item, Mapping) and "type" in item)]

    @field_validator("options", mode="before")
    @classmethod
    def coerce_options(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            v = [v]
        options = []
        for item in v:
            if item is None:
                continue
            if isinstance(item, Mapping):
                options.append({k: (str(val) if k in ("label", "toggle", "child") and val is not None else val)
                                for k, val in item.items()})
            else:
                options.append(str(item))
        return options

    def get(self, prop: str, default: Any = None) -> Any:
        """Read a schema property by its schema (camelCase) name."""
        name = _ALIASES.get(prop, prop)
        if name in type(self).model_fields:
            value = getattr(self, name)
        else:
            value = (self.model_extra or {}).get(prop)
        return default if value is None else value


# -----------------------------------------------------------------------------

def parse_fields(fields: Mapping[str, Any] | None) -> dict[str, FieldSpec]:
    """Validate a raw field schema; non-mapping records become empty fields."""
    parsed: dict[str, FieldSpec] = {}
    for key, record in (fields or {}).items():
        if isinstance(record, FieldSpec):
            parsed[key] = record
            continue
        if not isinstance(record, Mapping):
            record = {}
        try:
            parsed[key] = FieldSpec.model_validate(record)
        except ValidationError as exc:
            raise ConstructionError(
                f"Invalid schema for field '{key}'",
                details={"field": key, "errors": exc.errors(include_url=False)},
            ) from exc
    return parsed
