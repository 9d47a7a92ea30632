"""Load site configuration files into a composed :class:`SiteConfig`."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..logging import get_logger
from .composer import compose, merge_fragments
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def load_fragment(path: Path) -> dict[str, typ.Any]:
    """Read one YAML or JSON configuration fragment.

    Parameters
    ----------
    path : Path
        Filesystem path to a ``.yaml``, ``.yml`` or ``.json`` file. YAML 1.2
        is a superset of JSON, so one loader covers both.

    Returns
    -------
    dict
        The top-level mapping, or an empty dict for an empty document.

    Raises
    ------
    FileNotFoundError
        If no file exists at ``path``.
    SiteConfigError
        If the document cannot be parsed or is not a mapping.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Could not parse '{path}': {exc}"
        raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level structure of '{path}' must be a mapping."
        raise SiteConfigError(msg)
    logger.debug("fragment_loaded", path=str(path), keys=list(loaded))
    return loaded


def load_site_config(*paths: Path) -> SiteConfig:
    """Load, merge and compose one or more configuration fragments.

    Later files override earlier ones following :func:`merge_fragments`.

    Examples
    --------
    >>> from pathlib import Path
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> site.theme.sidebar["/guide/"][0].title  # doctest: +SKIP
    'Guide'
    """
    if not paths:
        msg = "At least one configuration file is required."
        raise SiteConfigError(msg)
    fragments = [load_fragment(path) for path in paths]
    return compose(merge_fragments(*fragments))


__all__ = ["load_fragment", "load_site_config"]
