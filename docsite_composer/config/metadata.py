"""Site metadata builders: language, title, description and head tags."""

from __future__ import annotations

import types
import typing as typ

from .._constants import DEFAULT_LANG
from .helpers import (
    _child_path,
    _reject_unknown_keys,
    _require_mapping,
    _require_sequence,
    _require_text,
)
from .models import HeadDirective, SiteMetadata, ValidationError

_HEAD_KEYS = frozenset({"tag", "attrs", "content"})


def compose_metadata(
    raw: typ.Mapping[str, typ.Any] | None, *, path: str = ""
) -> SiteMetadata:
    """Validate site-level metadata and apply defaults.

    Parameters
    ----------
    raw : Mapping or None
        Mapping with optional ``lang``, ``title``, ``description`` and
        ``head`` keys. Other keys are ignored so the full site mapping can be
        passed directly.
    path : str, optional
        Error path of ``raw`` inside the enclosing document.

    Returns
    -------
    SiteMetadata
        Metadata with ``lang`` defaulting to ``en-US`` and blank title and
        description when absent. Head directives keep their declared order.

    Raises
    ------
    ValidationError
        If ``lang`` is blank or a head entry is malformed.

    Examples
    --------
    >>> meta = compose_metadata({"head": [["link", {"rel": "icon"}]]})
    >>> meta.lang, meta.head[0].tag
    ('en-US', 'link')
    """
    data = _require_mapping({} if raw is None else raw, path or "<root>")
    head_path = _child_path(path, "head")
    head_raw = data.get("head")
    head_entries = [] if head_raw is None else _require_sequence(head_raw, head_path)
    return SiteMetadata(
        lang=_text_or_default(data, "lang", DEFAULT_LANG, path=path).strip(),
        title=_text_or_default(data, "title", "", path=path, allow_empty=True),
        description=_text_or_default(
            data, "description", "", path=path, allow_empty=True
        ),
        head=tuple(
            _build_head_directive(entry, _child_path(head_path, index))
            for index, entry in enumerate(head_entries)
        ),
    )


def _text_or_default(
    data: typ.Mapping[str, typ.Any],
    key: str,
    default: str,
    *,
    path: str,
    allow_empty: bool = False,
) -> str:
    value = data.get(key)
    if value is None:
        return default
    return _require_text(value, _child_path(path, key), allow_empty=allow_empty)


def _build_head_directive(entry: object, path: str) -> HeadDirective:
    """Build a head directive from ``[tag, attrs, content]`` or a mapping."""
    match entry:
        case {"tag": tag, **rest}:
            _reject_unknown_keys(rest, _HEAD_KEYS, path)
            attrs = rest.get("attrs", {})
            content = rest.get("content")
        case [tag]:
            attrs, content = {}, None
        case [tag, attrs]:
            content = None
        case [tag, attrs, content]:
            pass
        case _:
            msg = "head entries must be [tag, attrs, content?] or a mapping with 'tag'"
            raise ValidationError(path, msg)
    tag = _require_text(tag, _child_path(path, "tag"))
    attrs_path = _child_path(path, "attrs")
    attrs = _require_mapping({} if attrs is None else attrs, attrs_path)
    checked: dict[str, str | bool] = {}
    for name, value in attrs.items():
        attr_path = _child_path(attrs_path, str(name))
        if not isinstance(name, str) or not name:
            msg = "attribute names must be non-empty strings"
            raise ValidationError(attr_path, msg)
        if not isinstance(value, str | bool):
            msg = (
                "attribute values must be strings or booleans, "
                f"got {type(value).__name__}"
            )
            raise ValidationError(attr_path, msg)
        checked[name] = value
    if content is not None and not isinstance(content, str):
        raise ValidationError(_child_path(path, "content"), "content must be a string")
    return HeadDirective(
        tag=tag.strip(), attrs=types.MappingProxyType(checked), content=content
    )


__all__ = ["compose_metadata"]
