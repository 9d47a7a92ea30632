"""Validate, normalize and merge documentation-site configuration.

This subpackage turns raw configuration fragments (typically parsed from a
``site.yaml`` file) into an immutable :class:`SiteConfig`: site metadata, an
ordered plugin registry, and a theme holding the navbar and per-section
sidebars. The primary entry point is :func:`compose`; :func:`load_site_config`
reads and merges files first. Rendering, search and link-shorthand resolution
stay with the external site builder.

Examples
--------
>>> from docsite_composer.config import compose
>>> site = compose(
...     {
...         "theme": {
...             "sidebar": {
...                 "/guide": [{"title": "Guide", "children": ["registry"]}],
...             },
...         },
...     }
... )
>>> list(site.theme.sidebar)
['/guide/']
"""

from .composer import compose, merge_fragments
from .loader import load_fragment, load_site_config
from .metadata import compose_metadata
from .models import (
    HeadDirective,
    NavEntry,
    NavLink,
    NavMenu,
    NavShorthand,
    PluginRegistration,
    SidebarGroup,
    SidebarItem,
    SidebarTree,
    SiteConfig,
    SiteConfigError,
    SiteMetadata,
    ThemeConfig,
    ValidationError,
)
from .navigation import compose_navbar, compose_sidebar_tree
from .plugins import register_plugin
from .serialize import to_raw

__all__ = [
    "HeadDirective",
    "NavEntry",
    "NavLink",
    "NavMenu",
    "NavShorthand",
    "PluginRegistration",
    "SidebarGroup",
    "SidebarItem",
    "SidebarTree",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "ThemeConfig",
    "ValidationError",
    "compose",
    "compose_metadata",
    "compose_navbar",
    "compose_sidebar_tree",
    "load_fragment",
    "load_site_config",
    "merge_fragments",
    "register_plugin",
    "to_raw",
]
