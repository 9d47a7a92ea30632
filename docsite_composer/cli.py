"""Cyclopts CLI entrypoint for checking and normalizing site configuration.

The ``site`` console script defined here loads one or more configuration
fragments, merges them in order, and composes the result. ``site check``
reports a short summary or the first validation error; ``site dump`` prints
the normalized configuration so it can be diffed or handed to the external
site builder.

Examples
--------
Validate the default configuration:

>>> from docsite_composer.cli import main
>>> main()  # doctest: +SKIP

Merge an override file and print JSON:

>>> from docsite_composer.cli import app
>>> app(
...     ["dump", "config/site.yaml", "config/local.yaml", "--format", "json"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter
from ruamel.yaml import YAML

from ._constants import DEFAULT_CONFIG
from .config import SiteConfig, SiteConfigError, load_site_config, to_raw
from .logging import configure_logging

app = App(name="site", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigPath = typ.Annotated[
    Path, Parameter(help="Configuration files, merged left to right")
]


def _load_or_exit(paths: tuple[Path, ...], *, verbose: bool) -> SiteConfig:
    """Compose the configuration, reporting failures as exit status 1."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    try:
        return load_site_config(*(paths or (DEFAULT_CONFIG,)))
    except (FileNotFoundError, SiteConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


@app.command(help="Validate configuration files and summarize the result.")
def check(
    *paths: ConfigPath,
    verbose: typ.Annotated[bool, Parameter(help="Emit debug logs")] = False,
) -> None:
    """Compose the configuration and print a summary.

    Parameters
    ----------
    *paths : Path
        Configuration fragments to merge; ``config/site.yaml`` when omitted.
    verbose : bool, optional
        Lower the log level to ``DEBUG``.

    Raises
    ------
    SystemExit
        With status 1 when a file is missing or a fragment is invalid.
    """
    site = _load_or_exit(paths, verbose=verbose)
    print(f"site: {site.metadata.title or '(untitled)'} [{site.metadata.lang}]")
    print(f"plugins: {', '.join(p.name for p in site.plugins) or '(none)'}")
    print(f"navbar: {len(site.theme.navbar)} entries")
    for prefix, groups in site.theme.sidebar.items():
        print(f"sidebar {prefix}: {len(groups)} groups")


@app.command(help="Print the merged, normalized configuration.")
def dump(
    *paths: ConfigPath,
    output_format: typ.Annotated[
        typ.Literal["json", "yaml"],
        Parameter(name="--format", help="Output format", env_var="INPUT_FORMAT"),
    ] = "yaml",
    verbose: typ.Annotated[bool, Parameter(help="Emit debug logs")] = False,
) -> None:
    """Write the normalized configuration to stdout.

    Parameters
    ----------
    *paths : Path
        Configuration fragments to merge; ``config/site.yaml`` when omitted.
    output_format : {"json", "yaml"}, optional
        Serialization for the normalized mapping.
    verbose : bool, optional
        Lower the log level to ``DEBUG``.
    """
    raw = to_raw(_load_or_exit(paths, verbose=verbose))
    if output_format == "json":
        sys.stdout.write(msgspec.json.format(msgspec.json.encode(raw)).decode())
        sys.stdout.write("\n")
        return
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    yaml.dump(raw, sys.stdout)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``site`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
