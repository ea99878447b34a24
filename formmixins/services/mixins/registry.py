"""
MixinRegistry: the table of named mixins and helpers for one field schema.

A registry is built once per (fields, settings) pair and shared by every
request. Construction reads all backing partials; a missing partial fails
construction. Per request, ``bind(ctx)`` turns each entry into a chevron
lambda ``(text, render=None) -> str`` bound to that request's context.

Generic mixins pair a partial with a builder::

    registry.add("input-number", INPUT_TEXT_GROUP, input_text, {"pattern": "[0-9]*"})

Mixins and helpers without a 1:1 partial register a handler::

    @registry.register("input-submit")
    def input_submit(ctx, text, render=None):
        return ...
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

from formmixins.core.config import Settings, get_settings
from formmixins.core.errors import ConstructionError, PartialNotFoundError, RecursionLimitError
from formmixins.schemas import parse_fields
from formmixins.services.fields import FieldAccessor
from formmixins.services.translation import TranslateFn, Translator

from .builtins import register_all_builtins
from .context import MixinContext, RenderState
from .engine import PARTIALS, MixinEngine
from .params import Render, extract_key

logger = logging.getLogger(__name__)


Builder = Callable[..., dict]
Handler = Callable[..., str]
Options = Union[Mapping[str, Any], Callable[[MixinContext, str], Mapping[str, Any]], None]


@dataclass(frozen=True)
class MixinDefinition:
    name: str
    partial: Optional[str] = None
    builder: Optional[Builder] = None
    options: Options = None
    handler: Optional[Handler] = None


class MixinRegistry:
    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        settings: Settings | None = None,
        translate: TranslateFn | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.fields = FieldAccessor(parse_fields(fields))
        self._translate = translate
        self._partials = MappingProxyType(self._compile_partials())
        self.engine = MixinEngine(self._partials, self.settings.view_engine)

        self._definitions: dict[str, MixinDefinition] = {}
        self._sealed = False
        register_all_builtins(self)
        self._sealed = True
        logger.debug("Mixin registry ready: %d fields, %d mixins",
                     len(self.fields), len(self._definitions))

    @classmethod
    def from_options(
        cls,
        fields: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> "MixinRegistry":
        """
        Build a registry from a camelCase options mapping::

            MixinRegistry.from_options(fields, {
                "viewsDirectory": "views",
                "sharedTranslationsKey": "apply",
                "translate": catalogue.gettext,
            })

        ``translate`` becomes the fallback for requests that bring none.
        """
        options = dict(options or {})
        translate = options.pop("translate", None)
        return cls(fields, Settings.from_options(options), translate)

    # ---------------------------------------------------------------- partials

    def _compile_partials(self) -> dict[str, str]:
        compiled = {}
        views = Path(self.settings.views_directory)
        for name in PARTIALS:
            path = views / f"{name}.{self.settings.view_engine}"
            try:
                compiled[name] = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise PartialNotFoundError(name, path) from exc
        return compiled

    @property
    def partials(self) -> Mapping[str, str]:
        return self._partials

    # ---------------------------------------------------------------- register

    def _add(self, definition: MixinDefinition) -> None:
        if self._sealed:
            raise ConstructionError(f"Registry is sealed; cannot add '{definition.name}'")
        if definition.name in self._definitions:
            raise ConstructionError(f"Mixin '{definition.name}' is already registered")
        self._definitions[definition.name] = definition
        logger.debug("Registered mixin: %s", definition.name)

    def add(self, name: str, partial: str, builder: Builder, options: Options = None) -> None:
        """Register a mixin rendering *partial* with the output of *builder*."""
        if partial not in self._partials:
            raise ConstructionError(
                f"Mixin '{name}' references unknown partial '{partial}'",
                details={"mixin": name, "partial": partial},
            )
        self._add(MixinDefinition(name=name, partial=partial, builder=builder, options=options))

    def register(self, name: str):
        """Decorator registering a handler ``fn(ctx, text, render=None) -> str``."""
        def decorator(fn: Handler) -> Handler:
            self._add(MixinDefinition(name=name, handler=fn))
            return fn
        return decorator

    # ------------------------------------------------------------------ lookup

    def has(self, name: str) -> bool:
        return name in self._definitions

    def registered_names(self) -> list[str]:
        return sorted(self._definitions)

    # --------------------------------------------------------------- requests

    def context(
        self,
        values: Mapping[str, Any] | None = None,
        errors: Mapping[str, Any] | None = None,
        translate: TranslateFn | None = None,
        base_url: str | None = None,
        partials: Mapping[str, str] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> MixinContext:
        """Bind request state; the request's translate wins over the registry's."""
        translator = Translator(
            translate or self._translate,
            self.settings.shared_translations_key,
            self.fields,
        )
        return MixinContext(
            registry=self,
            translator=translator,
            state=RenderState(values or {}, errors or {}),
            base_url=base_url,
            partials=dict(partials or {}),
            data=dict(data or {}),
        )

    def render(self, template: str, data: Mapping[str, Any] | None = None, **state: Any) -> str:
        """Shortcut: ``engine.render(template, self.context(**state), data)``."""
        return self.engine.render(template, self.context(**state), data)

    def bind(self, ctx: MixinContext) -> dict[str, Callable[..., str]]:
        return {name: self._bind(definition, ctx) for name, definition in self._definitions.items()}

    def _bind(self, definition: MixinDefinition, ctx: MixinContext) -> Callable[..., str]:
        name = definition.name

        def mixin(text: str = "", render: Optional[Render] = None) -> str:
            try:
                if definition.handler is not None:
                    return definition.handler(ctx, text, render)
                return self._render(definition, ctx, text, render)
            except RecursionLimitError:
                raise
            except RecursionError as exc:
                raise RecursionLimitError(ctx.settings.max_render_depth, name) from exc
            except Exception as exc:
                logger.exception("Mixin %s raised an error", name)
                return (f'<span class="mixin-error">'
                        f'[Mixin {html.escape(name)} error: {html.escape(str(exc))}]</span>')

        mixin.__name__ = f"mixin_{name.replace('-', '_')}"
        return mixin

    def _render(self, definition: MixinDefinition, ctx: MixinContext, text: str,
                render: Optional[Render]) -> str:
        key = extract_key(text, render)
        if callable(definition.options):
            options = definition.options(ctx, key)
        else:
            options = dict(definition.options or {})
        view = definition.builder(ctx, key, options)
        return self.engine.render_partial(definition.partial, view)
