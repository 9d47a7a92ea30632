"""Compose raw configuration fragments into an immutable :class:`SiteConfig`."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .._constants import APPEND_ON_MERGE
from ..logging import get_logger
from .helpers import _child_path, _CycleGuard, _is_sequence, _require_mapping
from .metadata import compose_metadata
from .models import SiteConfig, ValidationError
from .plugins import _build_plugin_registry
from .theme import _build_theme_config

logger = get_logger(__name__)


def compose(raw_site: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Validate and normalize a raw site mapping.

    Parameters
    ----------
    raw_site : Mapping
        Site-level mapping with optional ``lang``, ``title``,
        ``description``, ``head``, ``plugins`` and ``theme`` keys.

    Returns
    -------
    SiteConfig
        Fully composed configuration. Plugins keep their declared order and
        the theme holds the composed navbar and sidebar tree.

    Raises
    ------
    ValidationError
        If any fragment is malformed. Nothing is returned in that case, so
        callers never see a partially composed site.

    Examples
    --------
    >>> site = compose({"title": "Docs", "plugins": ["search"]})
    >>> site.metadata.title, [plugin.name for plugin in site.plugins]
    ('Docs', ['search'])
    """
    data = _require_mapping(raw_site, "<root>")
    site = SiteConfig(
        metadata=compose_metadata(data),
        plugins=_build_plugin_registry(data.get("plugins")),
        theme=_build_theme_config(data.get("theme")),
    )
    logger.debug(
        "site_composed",
        title=site.metadata.title,
        plugins=len(site.plugins),
        navbar_entries=len(site.theme.navbar),
        sidebar_prefixes=list(site.theme.sidebar),
    )
    return site


def merge_fragments(*fragments: typ.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
    """Deep-merge raw fragments in order, returning a new mapping.

    Nested mappings merge key by key and later scalars win. ``head`` and
    ``plugins`` lists accumulate across fragments; any other list is
    replaced by the later fragment. The inputs are left untouched.

    Examples
    --------
    >>> merge_fragments(
    ...     {"title": "Docs", "plugins": ["search"]},
    ...     {"title": "BeeORM", "plugins": ["analytics"]},
    ... )
    {'title': 'BeeORM', 'plugins': ['search', 'analytics']}
    """
    merged: dict[str, typ.Any] = {}
    guard = _CycleGuard()
    for index, fragment in enumerate(fragments):
        source = _require_mapping(fragment, f"<fragment {index}>")
        _merge_into(merged, source, "", guard=guard)
    logger.debug("fragments_merged", fragments=len(fragments), keys=list(merged))
    return merged


def _merge_into(
    target: dict[str, typ.Any],
    source: typ.Mapping[str, typ.Any],
    path: str,
    *,
    guard: _CycleGuard,
) -> None:
    with guard.visit(source, path or "<root>"):
        for key, value in source.items():
            _merge_value(target, key, value, path, guard=guard)


def _merge_value(
    target: dict[str, typ.Any],
    key: str,
    value: object,
    path: str,
    *,
    guard: _CycleGuard,
) -> None:
    key_path = _child_path(path, str(key))
    current = target.get(key)
    appends = key in APPEND_ON_MERGE and not path
    match value:
        case None if appends:
            target.setdefault(key, [])
        case _ if appends:
            if not _is_sequence(value):
                msg = f"expected a list, got {type(value).__name__}"
                raise ValidationError(key_path, msg)
            target[key] = [*(current or []), *typ.cast("list[typ.Any]", value)]
        case cabc.Mapping() if isinstance(current, dict):
            _merge_into(current, value, key_path, guard=guard)
        case cabc.Mapping():
            nested: dict[str, typ.Any] = {}
            _merge_into(nested, value, key_path, guard=guard)
            target[key] = nested
        case _ if _is_sequence(value):
            target[key] = list(typ.cast("list[typ.Any]", value))
        case _:
            target[key] = value


__all__ = ["compose", "merge_fragments"]
