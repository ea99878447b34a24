"""
Built-in mixin registrations.
Called once by every MixinRegistry while it is being constructed.
"""

from . import (
    helpers,
    mixin_checkbox,
    mixin_inputs,
    mixin_options,
    mixin_submit,
)


def register_all_builtins(registry) -> None:
    """Register every built-in mixin and helper with *registry*."""
    mixin_inputs.register(registry)
    mixin_options.register(registry)
    mixin_checkbox.register(registry)
    mixin_submit.register(registry)
    helpers.register(registry)
