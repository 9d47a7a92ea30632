"""Navbar and sidebar builders.

Both trees accept the same leaf forms: a bare string (a page shorthand that
the renderer resolves to a title and path) or a ``{text, link}`` mapping. The
navbar allows one dropdown level below its top entries; sidebar groups nest
without limit, but a raw group that contains itself is rejected.
"""

from __future__ import annotations

import types
import typing as typ

from .._constants import NAVBAR_MAX_DEPTH
from .helpers import (
    _child_path,
    _CycleGuard,
    _key_path,
    _require_link,
    _require_mapping,
    _require_sequence,
    _require_text,
    normalize_prefix,
)
from .models import (
    NavEntry,
    NavLink,
    NavMenu,
    NavShorthand,
    SidebarGroup,
    SidebarItem,
    SidebarTree,
    ValidationError,
)


def compose_navbar(
    raw_entries: object, *, path: str = "theme.navbar"
) -> tuple[NavEntry, ...]:
    """Compose top navigation entries in declared order.

    Raises
    ------
    ValidationError
        If an entry has blank ``text``, lacks both ``link`` and ``children``,
        or opens a dropdown below the first sub-level.

    Examples
    --------
    >>> compose_navbar([{"text": "Guide", "link": "/guide/"}, "/plugins/"])
    (NavLink(text='Guide', link='/guide/'), NavShorthand(path='/plugins/'))
    """
    if raw_entries is None:
        return ()
    entries = _require_sequence(raw_entries, path)
    return tuple(
        _build_nav_entry(entry, _child_path(path, index), depth=0)
        for index, entry in enumerate(entries)
    )


def _build_nav_entry(entry: object, path: str, *, depth: int) -> NavEntry:
    match entry:
        case str():
            return _build_shorthand(entry, path)
        case {"children": children, **rest}:
            if depth >= NAVBAR_MAX_DEPTH:
                msg = (
                    f"navbar entries may nest at most {NAVBAR_MAX_DEPTH} "
                    "level below the top"
                )
                raise ValidationError(path, msg)
            if "link" in rest:
                msg = "navbar entries take either 'link' or 'children', not both"
                raise ValidationError(path, msg)
            text = _require_text(rest.get("text"), _child_path(path, "text"))
            children_path = _child_path(path, "children")
            items = _require_sequence(children, children_path)
            if not items:
                raise ValidationError(children_path, "must list at least one entry")
            return NavMenu(
                text=text,
                children=tuple(
                    typ.cast(
                        "NavLink | NavShorthand",
                        _build_nav_entry(
                            child, _child_path(children_path, index), depth=depth + 1
                        ),
                    )
                    for index, child in enumerate(items)
                ),
            )
        case {"link": _}:
            return _build_leaf(entry, path)
        case {}:
            raise ValidationError(path, "navbar entries need a 'link' or 'children'")
        case _:
            msg = f"expected a string or mapping, got {type(entry).__name__}"
            raise ValidationError(path, msg)


def _build_leaf(entry: typ.Mapping[str, typ.Any], path: str) -> NavLink:
    return NavLink(
        text=_require_text(entry.get("text"), _child_path(path, "text")),
        link=_require_link(entry.get("link"), _child_path(path, "link")),
    )


def _build_shorthand(value: str, path: str) -> NavShorthand:
    return NavShorthand(path=_require_text(value, path).strip())


def compose_sidebar_tree(
    raw_map: object, *, path: str = "theme.sidebar"
) -> SidebarTree:
    """Compose per-section sidebars keyed by normalized path prefix.

    Parameters
    ----------
    raw_map : Mapping
        Raw prefix to group-list mapping, for example
        ``{"/guide/": [{"title": "Guide", "children": ["registry"]}]}``.
    path : str, optional
        Error path of ``raw_map`` inside the enclosing document.

    Returns
    -------
    SidebarTree
        Read-only mapping in declaration order. Keys carry one leading and
        one trailing slash.

    Raises
    ------
    ValidationError
        If two prefixes normalize to the same key, a group lacks ``title`` or
        ``children``, a child has the wrong shape, or the raw structure
        contains itself.
    """
    if raw_map is None:
        return types.MappingProxyType({})
    mapping = _require_mapping(raw_map, path)
    guard = _CycleGuard()
    tree: dict[str, tuple[SidebarGroup, ...]] = {}
    origins: dict[str, str] = {}
    for raw_prefix, groups in mapping.items():
        prefix_path = _key_path(path, str(raw_prefix))
        prefix = normalize_prefix(
            _require_text(raw_prefix, prefix_path, allow_empty=True)
        )
        if prefix in tree:
            msg = (
                f"prefix {raw_prefix!r} collides with {origins[prefix]!r} "
                f"(both mount at {prefix!r})"
            )
            raise ValidationError(prefix_path, msg)
        origins[prefix] = raw_prefix
        with guard.visit(groups, prefix_path):
            tree[prefix] = tuple(
                _build_sidebar_group(
                    group, _child_path(prefix_path, index), guard=guard
                )
                for index, group in enumerate(_require_sequence(groups, prefix_path))
            )
    return types.MappingProxyType(tree)


def _build_sidebar_group(
    entry: object, path: str, *, guard: _CycleGuard
) -> SidebarGroup:
    match entry:
        case {"title": title, "children": children}:
            pass
        case {"children": _}:
            raise ValidationError(path, "sidebar groups require a 'title'")
        case {"title": _}:
            raise ValidationError(path, "sidebar groups require 'children'")
        case _:
            msg = "sidebar groups must be a mapping with 'title' and 'children'"
            raise ValidationError(path, msg)
    children_path = _child_path(path, "children")
    with guard.visit(entry, path), guard.visit(children, children_path):
        items = _require_sequence(children, children_path)
        return SidebarGroup(
            title=_require_text(title, _child_path(path, "title"), allow_empty=True),
            children=tuple(
                _build_sidebar_item(
                    child, _child_path(children_path, index), guard=guard
                )
                for index, child in enumerate(items)
            ),
        )


def _build_sidebar_item(
    entry: object, path: str, *, guard: _CycleGuard
) -> SidebarItem:
    match entry:
        case str():
            return _build_shorthand(entry, path)
        case {"children": _}:
            return _build_sidebar_group(entry, path, guard=guard)
        case {"link": _}:
            return _build_leaf(entry, path)
        case {}:
            msg = "sidebar entries need 'text' and 'link', or 'title' and 'children'"
            raise ValidationError(path, msg)
        case _:
            msg = f"expected a string or mapping, got {type(entry).__name__}"
            raise ValidationError(path, msg)


__all__ = ["compose_navbar", "compose_sidebar_tree"]
