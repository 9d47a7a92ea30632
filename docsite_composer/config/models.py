"""Typed dataclasses describing a composed documentation-site configuration."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from .._constants import DEFAULT_LANG, DEFAULT_THEME_NAME


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class ValidationError(SiteConfigError):
    """Raised when a raw fragment has the wrong shape.

    ``path`` locates the offending fragment using attribute and index
    notation, for example ``theme.sidebar["/guide/"][0].children[2]``.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path or "<root>"
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


def _frozen_map(
    value: typ.Mapping[str, typ.Any] | None = None,
) -> typ.Mapping[str, typ.Any]:
    return types.MappingProxyType(dict(value or {}))


@dc.dataclass(frozen=True, slots=True)
class HeadDirective:
    """A tag injected into the ``<head>`` of every generated page."""

    tag: str
    attrs: typ.Mapping[str, str | bool] = dc.field(default_factory=_frozen_map)
    content: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SiteMetadata:
    """Language, title, description and head tags of the site."""

    lang: str = DEFAULT_LANG
    title: str = ""
    description: str = ""
    head: tuple[HeadDirective, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class PluginRegistration:
    """A plugin enabled for the build, with options owned by the plugin."""

    name: str
    options: typ.Mapping[str, typ.Any] = dc.field(default_factory=_frozen_map)


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """Leaf navigation entry pointing at a root-relative page."""

    text: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class NavShorthand:
    """Bare page reference resolved to a :class:`NavLink` by the renderer."""

    path: str


@dc.dataclass(frozen=True, slots=True)
class NavMenu:
    """Navbar dropdown holding one level of leaf entries."""

    text: str
    children: tuple[NavLink | NavShorthand, ...]


NavEntry = NavLink | NavShorthand | NavMenu


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """Titled sidebar section; children may nest further groups."""

    title: str
    children: tuple[SidebarItem, ...] = ()


SidebarItem = NavLink | NavShorthand | SidebarGroup
SidebarTree = typ.Mapping[str, tuple[SidebarGroup, ...]]


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Theme options, navbar and sidebar handed to the renderer."""

    name: str = DEFAULT_THEME_NAME
    logo: str | None = None
    logo_dark: str | None = None
    repo: str | None = None
    docs_repo: str | None = None
    docs_branch: str | None = None
    docs_dir: str | None = None
    contributors: bool = True
    navbar: tuple[NavEntry, ...] = ()
    sidebar: SidebarTree = dc.field(default_factory=_frozen_map)
    extra: typ.Mapping[str, typ.Any] = dc.field(default_factory=_frozen_map)


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Root of the composed configuration tree."""

    metadata: SiteMetadata = dc.field(default_factory=SiteMetadata)
    plugins: tuple[PluginRegistration, ...] = ()
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)

    def sidebar_for(self, page_path: str) -> tuple[SidebarGroup, ...]:
        """Return the sidebar mounted on the longest prefix of ``page_path``."""
        candidate = page_path if page_path.startswith("/") else f"/{page_path}"
        matches = [
            prefix
            for prefix in self.theme.sidebar
            if candidate.startswith(prefix) or f"{candidate}/" == prefix
        ]
        if not matches:
            return ()
        return self.theme.sidebar[max(matches, key=len)]


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
]
