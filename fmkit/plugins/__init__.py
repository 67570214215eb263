"""fmkit plugin infrastructure based on pluggy."""

from __future__ import annotations

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE, hookimpl, hookspec
from .manager import (
    PluginRegistrationError,
    get_plugin_manager,
    reset_plugin_manager_cache,
    run_will_save_hooks,
)

__all__ = [
    "ENTRY_POINT_GROUP",
    "PLUGIN_NAMESPACE",
    "PluginRegistrationError",
    "get_plugin_manager",
    "hookimpl",
    "hookspec",
    "reset_plugin_manager_cache",
    "run_will_save_hooks",
]
