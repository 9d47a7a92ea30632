"""Convert a composed :class:`SiteConfig` back into its raw mapping form."""

from __future__ import annotations

import collections.abc as cabc
import copy
import typing as typ

from .._constants import THEME_STRING_FIELDS
from .models import (
    HeadDirective,
    NavLink,
    NavMenu,
    NavShorthand,
    SidebarGroup,
    SiteConfig,
    ThemeConfig,
)


def to_raw(site: SiteConfig) -> dict[str, typ.Any]:
    """Return plain dicts, lists and scalars that compose back to ``site``.

    Optional theme strings are omitted when unset, so the output reads like a
    hand-written configuration file.

    Examples
    --------
    >>> from docsite_composer.config import compose
    >>> site = compose({"title": "Docs"})
    >>> compose(to_raw(site)) == site
    True
    """
    return {
        "lang": site.metadata.lang,
        "title": site.metadata.title,
        "description": site.metadata.description,
        "head": [_head_to_raw(directive) for directive in site.metadata.head],
        "plugins": [
            {"name": plugin.name, "options": _thaw(plugin.options)}
            for plugin in site.plugins
        ],
        "theme": _theme_to_raw(site.theme),
    }


def _thaw(value: typ.Any) -> typ.Any:
    """Turn read-only option values back into plain dicts and lists."""
    match value:
        case cabc.Mapping():
            return {key: _thaw(item) for key, item in value.items()}
        case tuple():
            return [_thaw(item) for item in value]
        case _:
            return copy.deepcopy(value)


def _head_to_raw(directive: HeadDirective) -> list[typ.Any]:
    raw: list[typ.Any] = [directive.tag, dict(directive.attrs)]
    if directive.content is not None:
        raw.append(directive.content)
    return raw


def _theme_to_raw(theme: ThemeConfig) -> dict[str, typ.Any]:
    raw: dict[str, typ.Any] = {"name": theme.name}
    for key, attr in THEME_STRING_FIELDS.items():
        value = getattr(theme, attr)
        if value is not None:
            raw[key] = value
    raw["contributors"] = theme.contributors
    raw.update(_thaw(theme.extra))
    raw["navbar"] = [_nav_to_raw(entry) for entry in theme.navbar]
    raw["sidebar"] = {
        prefix: [_nav_to_raw(group) for group in groups]
        for prefix, groups in theme.sidebar.items()
    }
    return raw


def _nav_to_raw(entry: NavLink | NavShorthand | NavMenu | SidebarGroup) -> typ.Any:
    match entry:
        case NavShorthand(path=path):
            return path
        case NavLink(text=text, link=link):
            return {"text": text, "link": link}
        case NavMenu(text=text, children=children):
            return {"text": text, "children": [_nav_to_raw(item) for item in children]}
        case SidebarGroup(title=title, children=children):
            return {
                "title": title,
                "children": [_nav_to_raw(item) for item in children],
            }
    msg = f"Unsupported navigation node: {entry!r}"
    raise TypeError(msg)


__all__ = ["to_raw"]
