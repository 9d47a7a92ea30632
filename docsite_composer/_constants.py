"""Common literal values used across docsite_composer.

These constants keep defaults and raw key names centralized so the composer,
the serializer, and tests can import the same values without drifting.
Intended for internal use within the docsite_composer package.

Examples
--------
>>> from docsite_composer import _constants
>>> _constants.DEFAULT_LANG
'en-US'
>>> _constants.NAVBAR_MAX_DEPTH
1
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_LANG = "en-US"
DEFAULT_THEME_NAME = "default"

# Navbar entries may open one dropdown level; sidebars are unbounded.
NAVBAR_MAX_DEPTH = 1

# Raw theme keys mapped to ThemeConfig attribute names.
THEME_STRING_FIELDS: dict[str, str] = {
    "logo": "logo",
    "logoDark": "logo_dark",
    "repo": "repo",
    "docsRepo": "docs_repo",
    "docsBranch": "docs_branch",
    "docsDir": "docs_dir",
}

# Lists that accumulate across merged fragments instead of being replaced.
APPEND_ON_MERGE = frozenset({"head", "plugins"})
