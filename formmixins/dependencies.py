#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
FastAPI integration.

Binds a shared MixinRegistry to each request. Upstream middleware or
dependencies may set, on ``request.state``:

  translate : locale-aware ``translate(key) -> str``
  values    : submitted values for the current step
  errors    : validation errors for the current step
  partials  : ``{"partials-<name>": "<path without extension>"}``
  base_url  : base path for the ``url`` helper (defaults to the ASGI root_path)
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse

from formmixins.services.mixins import MixinContext, MixinRegistry


# ── dependencies ──────────────────────────────────────────────────────────────

def mixin_context_dependency(registry: MixinRegistry) -> Callable[[Request], MixinContext]:
    """
    Return a dependency producing a request-bound MixinContext.

    Usage::

        get_mixins = mixin_context_dependency(registry)

        @router.get("/details")
        def details(ctx: MixinContext = Depends(get_mixins)):
            return render_response(ctx, DETAILS_TEMPLATE)
    """
    def get_mixin_context(request: Request) -> MixinContext:
        state = request.state
        base_url = getattr(state, "base_url", None) or request.scope.get("root_path") or None
        return registry.context(
            values=getattr(state, "values", None),
            errors=getattr(state, "errors", None),
            translate=getattr(state, "translate", None),
            base_url=base_url,
            partials=getattr(state, "partials", None),
        )

    return get_mixin_context


# ── responses ─────────────────────────────────────────────────────────────────

def render_response(
    ctx: MixinContext,
    template: str,
    data: Optional[Mapping[str, Any]] = None,
    status_code: int = 200,
) -> HTMLResponse:
    html = ctx.registry.engine.render(template, ctx, data)
    return HTMLResponse(content=html, status_code=status_code)
