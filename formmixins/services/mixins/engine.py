"""
MixinEngine
===========
Renders page templates, backing partials and option-group child templates
with chevron.

Mixins are exposed to chevron as lambdas, so
``{{#input-text}}email{{/input-text}}`` calls the bound ``input-text`` mixin
with the literal text ``"email"``. The rendered markup is inserted as is.

Option-group children are the one recursion point: a child template may
invoke further mixins, which may render options with children of their own.
Each child render descends one level in the MixinContext; nesting beyond
``Settings.max_render_depth`` raises RecursionLimitError.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from functools import lru_cache, partial
from typing import Any, Mapping, Optional

import chevron

from .builders import error_class
from .context import MixinContext
from .params import Render

logger = logging.getLogger(__name__)

# ── backing partials, read once per registry ─────────────────────────────────
INPUT_TEXT_GROUP = "partials/forms/input-text-group"
INPUT_SUBMIT = "partials/forms/input-submit"
RADIO_GROUP = "partials/forms/radio-group"
SELECT = "partials/forms/select"
CHECKBOX = "partials/forms/checkbox"
TEXTAREA_GROUP = "partials/forms/textarea-group"
PANEL = "partials/mixins/panel"

PARTIALS = (
    INPUT_TEXT_GROUP,
    INPUT_SUBMIT,
    RADIO_GROUP,
    SELECT,
    CHECKBOX,
    TEXTAREA_GROUP,
    PANEL,
)

# child: "partials/<name>" names a host partial instead of a mixin or raw text
_PARTIAL_REF = re.compile(r'^partials/(.+)', re.IGNORECASE)


@lru_cache(maxsize=128)
def load_template(path: str) -> str:
    """Read a child partial from disk; OSError propagates uncached."""
    with open(path, encoding="utf-8") as fh:
        return fh.read()


class MixinEngine:
    """
    Render templates with mixins in scope.

    Usage::

        engine = registry.engine
        html = engine.render(page_template, registry.context(values=values))
    """

    def __init__(self, partials: Mapping[str, str], view_engine: str = "html") -> None:
        self._partials = partials
        self._view_engine = view_engine

    # ----------------------------------------------------------------- public

    def render(self, template: str, ctx: MixinContext, data: Mapping[str, Any] | None = None) -> str:
        """Render a page *template* with the context's mixins and helpers."""
        if not template:
            return ""
        if data:
            ctx = replace(ctx, data={**ctx.data, **data})
        return chevron.render(template, ctx.scope())

    def render_partial(self, name: str, view: Mapping[str, Any]) -> str:
        return chevron.render(self._partials[name], view)

    # ------------------------------------------------------------ child views

    def render_child(
        self,
        ctx: MixinContext,
        option: Mapping[str, Any],
        text: str = "",
        render: Optional[Render] = None,
    ) -> str:
        """
        Lambda: render the child template of an option, or nothing.

        The child is rendered with the page scope, the option's own fields
        and a ``renderMixin`` lambda, all bound one level deeper than *ctx*.
        """
        child = option.get("child")
        if not child:
            return ""

        child_ctx = ctx.descend(child)
        template = self.child_template(ctx, child)
        if not template:
            return ""

        scope = child_ctx.scope()
        scope.update(option)
        scope["getErrorClass"] = partial(error_class, child_ctx)
        scope["renderChild"] = partial(self.render_child, child_ctx, option)
        scope["renderMixin"] = partial(self.render_mixin, child_ctx, option)
        return chevron.render(template, scope)

    def render_mixin(
        self,
        ctx: MixinContext,
        option: Mapping[str, Any],
        text: str = "",
        render: Optional[Render] = None,
    ) -> str:
        """Lambda: invoke the mixin named by the option's child with its toggle."""
        child = option.get("child")
        mixin = ctx.mixins().get(child) if child else None
        if mixin is None:
            return ""
        return mixin(option.get("toggle") or "")

    def child_template(self, ctx: MixinContext, child: str) -> Optional[str]:
        """
        Resolve a child reference to template text:

        ``partials/<name>`` → the host partial ``ctx.partials["partials-<name>"]``
        a mixin name        → the panel partial, which calls ``renderMixin``
        anything else       → the child string is the template
        """
        match = _PARTIAL_REF.match(child)
        if match:
            path = ctx.partials.get(f"partials-{match.group(1)}")
            if not path:
                logger.warning("No partial registered for child %r", child)
                return None
            try:
                return load_template(f"{path}.{self._view_engine}")
            except OSError:
                logger.warning("Child partial not readable: %s.%s", path, self._view_engine)
                return None
        if ctx.registry.has(child):
            return self._partials[PANEL]
        return child
