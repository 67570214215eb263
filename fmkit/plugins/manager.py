"""Helpers for creating and working with the fmkit plugin manager."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache

import pluggy

from fmkit.config import FmkitConfig
from fmkit.editor import EditorHost, SaveEvent

from ._markers import ENTRY_POINT_GROUP, PLUGIN_NAMESPACE
from .spec import FmkitHookSpec

logger = logging.getLogger(__name__)


class PluginRegistrationError(RuntimeError):
    """Raised when a plugin fails validation or registration."""


def create_plugin_manager(*, load_entry_points: bool = True) -> pluggy.PluginManager:
    """Instantiate a pluggy ``PluginManager`` configured for fmkit."""

    manager = pluggy.PluginManager(PLUGIN_NAMESPACE)
    manager.add_hookspecs(FmkitHookSpec)

    if load_entry_points:
        load_plugin_entry_points(manager)

    return manager


def register_modules(
    manager: pluggy.PluginManager,
    modules: Sequence[object],
) -> None:
    """Register in-process plugin modules with the manager."""

    for module in modules:
        try:
            manager.register(module)
        except (pluggy.PluginValidationError, ValueError) as exc:
            raise PluginRegistrationError(str(exc)) from exc


def load_plugin_entry_points(
    manager: pluggy.PluginManager,
    *,
    group: str = ENTRY_POINT_GROUP,
) -> None:
    """Load plugin entry points via ``importlib.metadata`` integration."""

    count = manager.load_setuptools_entrypoints(group)
    if count:
        logger.debug("Loaded %d plugin(s) from entry points", count)


def run_will_save_hooks(
    manager: pluggy.PluginManager,
    event: SaveEvent,
    host: EditorHost,
    config: FmkitConfig,
) -> list[Exception]:
    """Execute ``will_save`` on each plugin in turn, collecting exceptions.

    A failing plugin does not prevent the others from running.
    """

    hook_impls = list(manager.hook.will_save.get_hookimpls())
    if not hook_impls:
        return []

    plugins_in_order = [impl.plugin for impl in hook_impls]
    errors: list[Exception] = []

    for plugin in plugins_in_order:
        others = [p for p in plugins_in_order if p is not plugin]
        subset = manager.subset_hook_caller("will_save", others)
        try:
            subset(event=event, host=host, config=config)
        except Exception as exc:
            logger.warning(
                "will_save hook of %s failed",
                manager.get_name(plugin),
                exc_info=True,
            )
            errors.append(exc)

    return errors


def iter_plugin_modules() -> tuple[object, ...]:
    """Return plugin modules bundled with fmkit."""

    return _builtin_plugin_modules()


@lru_cache(maxsize=1)
def _builtin_plugin_modules() -> tuple[object, ...]:
    from .builtin import BUILTIN_PLUGINS

    return BUILTIN_PLUGINS


@lru_cache(maxsize=1)
def _build_plugin_manager() -> pluggy.PluginManager:
    manager = create_plugin_manager()
    register_modules(manager, iter_plugin_modules())
    return manager


def get_plugin_manager() -> pluggy.PluginManager:
    """Return the cached plugin manager instance."""

    return _build_plugin_manager()


def reset_plugin_manager_cache() -> None:
    """Clear cached plugin manager so future calls rebuild state."""

    _build_plugin_manager.cache_clear()
    _builtin_plugin_modules.cache_clear()


__all__ = [
    "PluginRegistrationError",
    "create_plugin_manager",
    "get_plugin_manager",
    "iter_plugin_modules",
    "load_plugin_entry_points",
    "register_modules",
    "reset_plugin_manager_cache",
    "run_will_save_hooks",
]
