"""Utility helpers shared by the composer modules."""

from __future__ import annotations

import collections.abc as cabc
import contextlib
import copy
import json
import types
import typing as typ

from .models import ValidationError


def _child_path(parent: str, key: str | int) -> str:
    """Append an attribute name or list index to an error path."""
    match key:
        case int():
            return f"{parent}[{key}]"
        case str() if key.isidentifier():
            return f"{parent}.{key}" if parent else key
        case _:
            return f"{parent}[{json.dumps(key)}]"


def _key_path(parent: str, key: str) -> str:
    """Append a mapping key in bracket form, as used for sidebar prefixes."""
    return f"{parent}[{json.dumps(key)}]"


def _is_sequence(value: object) -> bool:
    """Return True for list-like values, excluding strings and bytes."""
    return isinstance(value, cabc.Sequence) and not isinstance(
        value, str | bytes | bytearray
    )


def _require_mapping(value: object, path: str) -> typ.Mapping[str, typ.Any]:
    if not isinstance(value, cabc.Mapping):
        msg = f"expected a mapping, got {type(value).__name__}"
        raise ValidationError(path, msg)
    return value


def _require_sequence(value: object, path: str) -> cabc.Sequence[typ.Any]:
    if not _is_sequence(value):
        msg = f"expected a list, got {type(value).__name__}"
        raise ValidationError(path, msg)
    return typ.cast("cabc.Sequence[typ.Any]", value)


def _require_text(value: object, path: str, *, allow_empty: bool = False) -> str:
    """Return ``value`` when it is a string, rejecting blanks unless allowed."""
    if not isinstance(value, str):
        msg = f"expected a string, got {type(value).__name__}"
        raise ValidationError(path, msg)
    if not allow_empty and not value.strip():
        raise ValidationError(path, "must not be empty")
    return value


def _optional_str(value: object | None, path: str) -> str | None:
    """Return a non-empty string value or None when the key is absent."""
    if value is None:
        return None
    return _require_text(value, path)


def _require_link(value: object, path: str) -> str:
    """Validate a root-relative link path such as ``/guide/``."""
    link = _require_text(value, path)
    if not link.startswith("/"):
        msg = f"link {link!r} must be root-relative (start with '/')"
        raise ValidationError(path, msg)
    return link


def _reject_unknown_keys(
    data: typ.Mapping[str, typ.Any], allowed: cabc.Set[str], path: str
) -> None:
    """Raise for the first key of ``data`` not listed in ``allowed``."""
    for key in data:
        if key not in allowed:
            expected = ", ".join(sorted(allowed))
            msg = f"unknown key; expected one of: {expected}"
            raise ValidationError(_child_path(path, str(key)), msg)


def _freeze(value: object, path: str, *, guard: _CycleGuard) -> typ.Any:
    """Return a read-only deep copy of an opaque option value.

    Mappings become ``MappingProxyType`` and lists become tuples, all the
    way down.
    """
    match value:
        case cabc.Mapping():
            with guard.visit(value, path):
                return types.MappingProxyType(
                    {
                        key: _freeze(item, _child_path(path, str(key)), guard=guard)
                        for key, item in value.items()
                    }
                )
        case _ if _is_sequence(value):
            with guard.visit(value, path):
                return tuple(
                    _freeze(item, _child_path(path, index), guard=guard)
                    for index, item in enumerate(typ.cast("list[typ.Any]", value))
                )
        case _:
            return copy.deepcopy(value)


def normalize_prefix(prefix: str) -> str:
    """Return ``prefix`` with exactly one leading and one trailing slash.

    Examples
    --------
    >>> normalize_prefix("guide")
    '/guide/'
    >>> normalize_prefix("//guide///")
    '/guide/'
    >>> normalize_prefix("/")
    '/'
    """
    stripped = prefix.strip().strip("/")
    if not stripped:
        return "/"
    return f"/{stripped}/"


class _CycleGuard:
    """Track raw containers on the active recursion path.

    A container seen again while it is still being composed means the raw
    structure contains itself, which YAML aliases or programmatic merges can
    produce.
    """

    __slots__ = ("_active",)

    def __init__(self) -> None:
        self._active: set[int] = set()

    @contextlib.contextmanager
    def visit(self, value: object, path: str) -> cabc.Iterator[None]:
        marker = id(value)
        if marker in self._active:
            raise ValidationError(path, "cycle detected: fragment contains itself")
        self._active.add(marker)
        try:
            yield
        finally:
            self._active.discard(marker)


__all__ = [
    "_CycleGuard",
    "_child_path",
    "_freeze",
    "_is_sequence",
    "_key_path",
    "_optional_str",
    "_reject_unknown_keys",
    "_require_link",
    "_require_mapping",
    "_require_sequence",
    "_require_text",
    "normalize_prefix",
]
