"""
Mixin subsystem: public API.
"""

from .context import MixinContext, RenderState
from .engine import MixinEngine
from .registry import MixinDefinition, MixinRegistry
from .builtins import register_all_builtins

__all__ = [
    "MixinContext",
    "RenderState",
    "MixinEngine",
    "MixinDefinition",
    "MixinRegistry",
    "register_all_builtins",
]
