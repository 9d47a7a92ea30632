"""Theme configuration builder."""

from __future__ import annotations

import types
import typing as typ

from .._constants import DEFAULT_THEME_NAME, THEME_STRING_FIELDS
from .helpers import _child_path, _CycleGuard, _freeze, _optional_str, _require_mapping
from .models import ThemeConfig, ValidationError
from .navigation import compose_navbar, compose_sidebar_tree

_STRUCTURED_KEYS = frozenset({"name", "contributors", "navbar", "sidebar"})


def _build_theme_config(payload: object, *, path: str = "theme") -> ThemeConfig:
    """Build a ThemeConfig from the raw ``theme`` mapping.

    Logo and repository fields are opaque strings checked only for
    non-emptiness. Keys the composer does not know are kept in ``extra`` for
    the theme to interpret.
    """
    data = _require_mapping({} if payload is None else payload, path)
    strings = {
        attr: _optional_str(data.get(key), _child_path(path, key))
        for key, attr in THEME_STRING_FIELDS.items()
    }
    contributors = data.get("contributors", True)
    if not isinstance(contributors, bool):
        msg = f"expected a boolean, got {type(contributors).__name__}"
        raise ValidationError(_child_path(path, "contributors"), msg)
    name = _optional_str(data.get("name"), _child_path(path, "name"))
    guard = _CycleGuard()
    extra = {
        key: _freeze(value, _child_path(path, key), guard=guard)
        for key, value in data.items()
        if key not in _STRUCTURED_KEYS and key not in THEME_STRING_FIELDS
    }
    return ThemeConfig(
        name=(name or DEFAULT_THEME_NAME).strip(),
        contributors=contributors,
        navbar=compose_navbar(data.get("navbar"), path=_child_path(path, "navbar")),
        sidebar=compose_sidebar_tree(
            data.get("sidebar"), path=_child_path(path, "sidebar")
        ),
        extra=types.MappingProxyType(extra),
        **typ.cast("dict[str, typ.Any]", strings),
    )


__all__ = ["_build_theme_config"]
