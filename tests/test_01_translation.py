#!/usr/bin/env python
# -----------------------------------------------------------------------------
"""
Translation & configuration tests
=================================
  - Settings defaults, prefix termination, camelCase options
  - Translator: hard, soft, translation-key precedence
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import pytest
from pydantic import ValidationError

from formmixins import Settings
from formmixins.schemas import parse_fields
from formmixins.services.fields import FieldAccessor
from formmixins.services.translation import Translator, identity

from tests.conftest import FIELDS, translate


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 1. Settings
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.view_engine == "html"
        assert s.shared_translations_key == ""
        assert s.max_render_depth == 10
        assert (s.views_directory / "partials" / "forms" / "input-text-group.html").exists()

    def test_prefix_gets_separator(self):
        assert Settings(shared_translations_key="apply").shared_translations_key == "apply."

    def test_prefix_separator_not_doubled(self):
        assert Settings(shared_translations_key="apply.").shared_translations_key == "apply."

    def test_from_options(self):
        s = Settings.from_options({
            "sharedTranslationsKey": "pages.apply",
            "viewEngine": ".html",
            "maxRenderDepth": 3,
        })
        assert s.shared_translations_key == "pages.apply."
        assert s.view_engine == "html"
        assert s.max_render_depth == 3

    def test_from_options_ignores_none(self):
        assert Settings.from_options({"viewEngine": None}).view_engine == "html"

    @pytest.mark.parametrize("depth", [0, 51, 500])
    def test_render_depth_bounded(self, depth):
        with pytest.raises(ValidationError):
            Settings(max_render_depth=depth)

    def test_from_options_skips_translate(self):
        s = Settings.from_options({"translate": str.upper, "viewEngine": "html"})
        assert not hasattr(s, "translate")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FORM_MIXINS_CURRENCY_SYMBOL", "€")
        assert Settings().currency_symbol == "€"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 2. Translator
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestTranslator:
    def setup_method(self):
        self.fields = FieldAccessor(parse_fields(FIELDS))
        self.tr = Translator(translate, "", self.fields)

    def test_hard_translation(self):
        assert self.tr.t("fields.name.label") == "Full name"

    def test_hard_falls_back_to_key(self):
        assert self.tr.t("fields.nothing.label") == "fields.nothing.label"

    def test_soft_translation_found(self):
        assert self.tr.t_soft("fields.name.hint") == "As it appears on your passport"

    def test_soft_translation_missing_is_none(self):
        assert self.tr.t_soft("fields.nothing.hint") is None

    def test_soft_none_only_when_identical(self):
        tr = Translator(lambda key: key.upper())
        assert tr.t_soft("abc") == "ABC"
        assert Translator(lambda key: "abc").t_soft("abc") is None

    def test_translate_returning_none(self):
        tr = Translator(lambda key: None)
        assert tr.t("buttons.next") == "buttons.next"
        assert tr.t_soft("buttons.next") is None

    def test_default_is_identity(self):
        assert Translator().t("anything") == "anything"
        assert identity("x") == "x"

    def test_prefix_applied(self):
        seen = []

        def spy(key):
            seen.append(key)
            return translate(key)

        tr = Translator(spy, "apply")
        assert tr.prefix == "apply."
        assert tr.t("buttons.next") == "Next step"
        assert seen == ["apply.buttons.next"]

    def test_soft_prefix_fallback_is_none(self):
        tr = Translator(translate, "apply.")
        assert tr.t_soft("buttons.back") is None
        assert tr.t("buttons.back") == "apply.buttons.back"


class TestTranslationKey:
    def setup_method(self):
        self.tr = Translator(translate, "", FieldAccessor(parse_fields(FIELDS)))

    def test_schema_override_wins(self):
        assert self.tr.translation_key("email", "label") == "custom.email.label"
        assert self.tr.translation_key("email", "hint") == "custom.email.hint"

    def test_synthesised_key(self):
        assert self.tr.translation_key("name", "label") == "fields.name.label"

    def test_unknown_field(self):
        assert self.tr.translation_key("ghost", "hint") == "fields.ghost.hint"

    def test_no_schema(self):
        assert Translator().translation_key("name", "label") == "fields.name.label"

    def test_non_string_property_ignored(self):
        # legend is a structured value, never a translation key
        assert self.tr.translation_key("contact", "legend") == "fields.contact.legend"
