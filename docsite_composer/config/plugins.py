"""Plugin registry builders."""

from __future__ import annotations

import typing as typ

from .helpers import (
    _child_path,
    _CycleGuard,
    _freeze,
    _reject_unknown_keys,
    _require_mapping,
    _require_sequence,
    _require_text,
)
from .models import PluginRegistration, ValidationError

_PLUGIN_KEYS = frozenset({"name", "options"})


def register_plugin(
    registry: tuple[PluginRegistration, ...],
    plugin_id: str,
    options: typ.Mapping[str, typ.Any] | None = None,
    *,
    path: str = "plugins",
) -> tuple[PluginRegistration, ...]:
    """Return ``registry`` with a new registration appended.

    The same plugin may be registered more than once. Options are deep-copied
    into read-only mappings and tuples but never inspected; their meaning
    belongs to the plugin itself.

    Examples
    --------
    >>> registry = register_plugin((), "search")
    >>> registry = register_plugin(registry, "search", {"locale": "fr"})
    >>> [plugin.name for plugin in registry]
    ['search', 'search']
    """
    name = _require_text(plugin_id, _child_path(path, "name"))
    options_path = _child_path(path, "options")
    opts = _require_mapping({} if options is None else options, options_path)
    registration = PluginRegistration(
        name=name.strip(), options=_freeze(opts, options_path, guard=_CycleGuard())
    )
    return (*registry, registration)


def _build_plugin_registry(
    entries: object, *, path: str = "plugins"
) -> tuple[PluginRegistration, ...]:
    """Compose the declared plugin list, keeping declaration order."""
    registry: tuple[PluginRegistration, ...] = ()
    if entries is None:
        return registry
    for index, entry in enumerate(_require_sequence(entries, path)):
        entry_path = _child_path(path, index)
        match entry:
            case str() as name:
                registry = register_plugin(registry, name, path=entry_path)
            case {"name": name, **rest}:
                _reject_unknown_keys(rest, _PLUGIN_KEYS, entry_path)
                registry = register_plugin(
                    registry, name, rest.get("options"), path=entry_path
                )
            case _:
                msg = "plugin entries must be a name or a mapping with 'name'"
                raise ValidationError(entry_path, msg)
    return registry


__all__ = ["register_plugin"]
