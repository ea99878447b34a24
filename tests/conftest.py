#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
One field schema and one translation table shared by every test module.
The registry is built from the bundled partials; each test binds its own
request context.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import os

import pytest

# ── Env vars must be set before importing formmixins ─────────────────────────
os.environ["FORM_MIXINS_SHARED_TRANSLATIONS_KEY"] = ""

from formmixins import MixinRegistry, Settings


FIELDS = {
    "name": {
        "validate": ["required", {"type": "maxlength", "arguments": [50]}],
        "className": ["input-large", "name-input"],
    },
    "code": {"validate": [{"type": "exactlength", "arguments": 6}]},
    "both": {
        "validate": [
            {"type": "exactlength", "arguments": [4]},
            {"type": "maxlength", "arguments": [10, "ignored"]},
        ],
    },
    "optional-note": {"required": False, "validate": ["required"]},
    "forced": {"required": True},
    "email": {
        "type": "email",
        "label": "custom.email.label",
        "hint": "custom.email.hint",
        "labelClassName": "visually-hidden",
    },
    "contact": {
        "legend": {"value": "custom.contact.legend", "className": ["form-label", "bold"]},
        "options": [
            "email",
            {"value": "phone", "label": "fields.contact.options.phone",
             "toggle": "phone-number", "child": "input-text"},
            {"value": "post", "toggle": "address", "child": "partials/address"},
            {"value": "other", "toggle": "other-details",
             "child": '<p class="other">{{toggle}}</p>'},
        ],
    },
    "phone-number": {"validate": [{"type": "maxlength", "arguments": 20}]},
    "country": {"options": ["uk", "fr"]},
    "numbers": {"options": [{"value": 1, "label": "one"}, {"value": "2", "label": "two"}]},
    "terms": {"toggle": "terms-panel", "label": "custom.terms"},
    "dob": {},
    "approx": {"inexact": True},
    "loop": {"options": [{"value": "again", "toggle": "loop", "child": "radio-group"}]},
    "selfish": {"options": [{"value": "x", "child": "{{#renderChild}}{{/renderChild}}"}]},
}

TRANSLATIONS = {
    "fields.name.label": "Full name",
    "fields.name.hint": "As it appears on your passport",
    "fields.contact.options.phone": "Phone",
    "custom.email.label": "Email address",
    "buttons.next": "Continue",
    "buttons.save": "Save and return",
    "apply.buttons.next": "Next step",
}


def translate(key: str) -> str:
    return TRANSLATIONS.get(key, key)


# ── Registry shared by the module; it is never mutated per request ───────────
@pytest.fixture(scope="module")
def registry() -> MixinRegistry:
    return MixinRegistry(FIELDS, Settings())


@pytest.fixture
def ctx(registry):
    """A request context with no submitted values and no errors."""
    return registry.context(translate=translate)


# -----------------------------------------------------------------------------
