"""
formmixins: form field mixins for mustache templates.

Build one registry per field schema and render pages with it::

    registry = MixinRegistry(fields, Settings.from_options({"sharedTranslationsKey": "apply"}))
    html = registry.render(page, values=session_values, errors=errors)
"""

from formmixins.core.config import Settings, get_settings
from formmixins.core.errors import (
    ConstructionError,
    FormMixinsError,
    PartialNotFoundError,
    RecursionLimitError,
)
from formmixins.services.mixins import MixinContext, MixinEngine, MixinRegistry, RenderState

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "FormMixinsError",
    "ConstructionError",
    "PartialNotFoundError",
    "RecursionLimitError",
    "MixinContext",
    "MixinEngine",
    "MixinRegistry",
    "RenderState",
]
