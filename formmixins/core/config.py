#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Mixin configuration.

All values can be overridden via FORM_MIXINS_* environment variables or a
.env file.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_BUNDLED_VIEWS = Path(__file__).resolve().parent.parent / "templates"

# camelCase option names accepted by Settings.from_options()
_OPTION_NAMES = {
    "viewsDirectory": "views_directory",
    "viewEngine": "view_engine",
    "sharedTranslationsKey": "shared_translations_key",
    "currencySymbol": "currency_symbol",
    "defaultDateFormat": "default_date_format",
    "maxRenderDepth": "max_render_depth",
}


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="FORM_MIXINS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Templates ──────────────────────────────────────────────────────────

    views_directory: Path = _BUNDLED_VIEWS
    view_engine: str = "html"         # partial file extension

    # ── Translation ────────────────────────────────────────────────────────

    shared_translations_key: str = ""

    # ── Helpers ────────────────────────────────────────────────────────────

    currency_symbol: str = "£"
    default_date_format: str = "D MMMM YYYY"

    # ── Rendering ──────────────────────────────────────────────────────────

    max_render_depth: int = Field(10, ge=1, le=50)   # nested child templates per render

    @field_validator("shared_translations_key")
    @classmethod
    def terminate_prefix(cls, v: str) -> str:
        if v and not v.endswith("."):
            return v + "."
        return v

    @field_validator("view_engine")
    @classmethod
    def strip_extension_dot(cls, v: str) -> str:
        return v.lstrip(".") or "html"

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> "Settings":
        """Build settings from a camelCase options mapping.

        ``translate`` is not a setting; MixinRegistry.from_options() takes it.
        """
        kwargs = {}
        for name, value in (options or {}).items():
            if value is None or name == "translate":
                continue
            kwargs[_OPTION_NAMES.get(name, name)] = value
        return cls(**kwargs)


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
