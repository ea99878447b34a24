"""
View-model builders
-------------------
One builder per field archetype. Each takes ``(ctx, key, overrides)`` and
returns a fresh dict consumed by the mixin's backing partial:

  input_text    — text-like inputs, textareas, selects and date parts
  option_group  — radio groups and select options
  checkbox      — single checkboxes

Builders never raise for keys missing from the schema; they fall back to
empty values instead.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Mapping, Optional

from formmixins.schemas import OptionSpec
from formmixins.services.fields import class_name_string

from .context import MixinContext, as_string
from .params import Render, extract_key

ERROR_CLASS = "validation-error"

_OPTION_KEYS = ("label", "value", "selected", "toggle", "child")


def _merge(view: dict[str, Any], overrides: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Apply caller overrides; None never replaces a computed value."""
    for name, value in (overrides or {}).items():
        if value is not None:
            view[name] = value
    return view


# ── text-like inputs ──────────────────────────────────────────────────────────

def input_text(ctx: MixinContext, key: str, overrides: Optional[Mapping[str, Any]] = None) -> dict:
    fields, tr = ctx.fields, ctx.translator
    hint = tr.t_soft(tr.translation_key(key, "hint"))

    view = {
        "id": key,
        "className": fields.class_names(key),
        "type": fields.type(key),
        "value": ctx.value(key),
        "label": tr.t(tr.translation_key(key, "label")),
        "labelClassName": fields.class_names(key, "labelClassName") or "form-label-bold",
        "hint": hint,
        "hintId": f"{key}-hint" if hint else None,
        "error": ctx.error(key),
        "maxlength": fields.maxlength(key),
        "required": fields.required(key),
        "pattern": None,
        "date": False,
        "attributes": fields.attributes(key),
    }
    return _merge(view, overrides)


# ── option groups ─────────────────────────────────────────────────────────────

def error_class(ctx: MixinContext, text: str = "", render: Optional[Render] = None) -> str:
    """Lambda: error class for the field named by *text* (may be ``{{x}}``)."""
    key = extract_key(text, render)
    return ERROR_CLASS if ctx.error(key) else ""


def option_fields(option: Mapping[str, Any]) -> dict[str, Any]:
    """The plain data of an option view, without its lambdas."""
    return {name: option.get(name) for name in _OPTION_KEYS}


def _option(ctx: MixinContext, key: str, spec: OptionSpec) -> dict[str, Any]:
    selected = False
    if ctx.has_value(key):
        selected = as_string(ctx.value(key)) == as_string(spec.value)

    option = {
        "label": ctx.translator.t(spec.label) if spec.label else "",
        "value": spec.value,
        "selected": selected,
        "toggle": spec.toggle,
        "child": spec.child,
    }
    option["getErrorClass"] = partial(error_class, ctx)
    option["renderChild"] = partial(ctx.registry.engine.render_child, ctx, option_fields(option))
    return option


def option_group(ctx: MixinContext, key: str, overrides: Optional[Mapping[str, Any]] = None) -> dict:
    fields, tr = ctx.fields, ctx.translator

    legend_value = f"fields.{key}.legend"
    legend_class = None
    legend = fields.legend(key)
    if legend is not None:
        if legend.class_name:
            legend_class = class_name_string(legend.class_name)
        if legend.value is not None:
            legend_value = legend.value

    view = {
        "key": key,
        "error": ctx.error(key),
        "legend": tr.t(legend_value),
        "legendClassName": legend_class,
        "hint": tr.t_soft(tr.translation_key(key, "hint")),
        "options": [_option(ctx, key, spec) for spec in fields.options(key)],
        "className": fields.class_names(key),
    }
    return _merge(view, overrides)


# ── checkboxes ────────────────────────────────────────────────────────────────

def checkbox(ctx: MixinContext, key: str, overrides: Optional[Mapping[str, Any]] = None) -> dict:
    tr = ctx.translator
    view = dict(overrides or {})
    required = bool(view.get("required") or False)
    error = ctx.error(key)

    selected = False
    if ctx.has_value(key):
        selected = as_string(ctx.value(key)) == "true"

    view.update({
        "key": key,
        "toggle": ctx.fields.toggle(key),
        "required": required,
        "error": error,
        "invalid": bool(error) and required,
        "label": tr.t(tr.translation_key(key, "label")),
        "selected": selected,
        "className": ctx.fields.class_names(key) or "block-label",
    })
    return view
