"""
MixinContext holds everything a mixin needs to render for one request.

A context pairs the process-wide registry with request-scoped state. It is
passed explicitly through every mixin call; child template renders receive a
copy one level deeper, which is what bounds recursion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from formmixins.core.errors import RecursionLimitError
from formmixins.services.fields import FieldAccessor
from formmixins.services.translation import Translator

if TYPE_CHECKING:
    from formmixins.core.config import Settings
    from .registry import MixinRegistry

logger = logging.getLogger(__name__)


def as_string(value: Any) -> str:
    """Stringify a submitted value; booleans render as 'true'/'false'."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# -----------------------------------------------------------------------------

@dataclass
class RenderState:
    """Submitted values and validation errors for the current request."""
    values: Mapping[str, Any] = field(default_factory=dict)
    errors: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.values = dict(self.values or {})
        self.errors = dict(self.errors or {})


# -----------------------------------------------------------------------------

@dataclass
class MixinContext:
    registry: "MixinRegistry"
    translator: Translator
    state: RenderState = field(default_factory=RenderState)
    base_url: Optional[str] = None
    partials: Mapping[str, str] = field(default_factory=dict)
    data: Mapping[str, Any] = field(default_factory=dict)
    depth: int = 0

    @property
    def fields(self) -> FieldAccessor:
        return self.registry.fields

    @property
    def settings(self) -> "Settings":
        return self.registry.settings

    # ---------------------------------------------------------------- state

    def value(self, key: str) -> Any:
        return self.state.values.get(key)

    def has_value(self, key: str) -> bool:
        return self.state.values.get(key) is not None

    def error(self, key: str) -> Any:
        return self.state.errors.get(key)

    # ------------------------------------------------------------ recursion

    def descend(self, child: str | None = None) -> "MixinContext":
        """Return a copy of this context for a nested child render."""
        limit = self.settings.max_render_depth
        if self.depth >= limit:
            logger.error("Child template nesting limit (%d) reached at %r", limit, child)
            raise RecursionLimitError(limit, child)
        return replace(self, depth=self.depth + 1)

    # ---------------------------------------------------------------- scope

    def mixins(self) -> dict[str, Callable[..., str]]:
        """Mixins and helpers bound to this context, keyed by name."""
        return self.registry.bind(self)

    def scope(self) -> dict[str, Any]:
        """Top-level template scope: bound mixins, request state and data."""
        scope: dict[str, Any] = dict(self.mixins())
        scope["values"] = self.state.values
        scope["errors"] = self.state.errors
        scope.update(self.data)
        return scope
