# internals/errors.py
"""Raising catalogue errors.

Every stage (schema input, IR construction, rendering, the driver) reports
user-facing failures through :func:`raise_error` or :func:`ensure`. Both
produce a :class:`TypesmithError` carrying the kind, the substituted message
and the caller's property bag, so catchers can branch on ``error.kind``
instead of parsing ``error.message``.
"""
from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Dict, Mapping, NoReturn, Optional

from typesmith.internals.messages import ErrorKind
from typesmith.internals.template import parse_template


class TypesmithError(Exception):
    """A catalogue error raised by one of the code generator's stages.

    Attributes are read-only once constructed.
    """

    __slots__ = ("_kind", "_message", "_properties")

    def __init__(self, kind: ErrorKind, message: str, properties: Mapping[str, Any]) -> None:
        super().__init__(message)
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_message", message)
        object.__setattr__(self, "_properties", properties)

    def __setattr__(self, name: str, value: Any) -> None:
        # __traceback__, __cause__, __notes__ and friends stay writable
        if name.startswith("__") and name.endswith("__"):
            super().__setattr__(name, value)
            return
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._kind, self._message, dict(self._properties)))

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def properties(self) -> Mapping[str, Any]:
        """Read-only view of the bag passed at the raise site."""
        return MappingProxyType(self._properties)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._kind.name}, {self._message!r})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form for machine consumers."""
        return {
            "kind": self._kind.name,
            "code": self._kind.code,
            "category": self._kind.category.value,
            "message": self._message,
            "properties": {str(k): _json_ready(v) for k, v in self._properties.items()},
        }


def _json_ready(value: Any) -> Any:
    # Keys JSON can't encode and reference cycles degrade to str(value).
    try:
        return json.loads(json.dumps(value, default=str))
    except (TypeError, ValueError):
        return str(value)


def display_value(value: Any) -> str:
    """Text inserted for a property value.

    Strings go in verbatim. Numbers, booleans, None and nested containers are
    rendered as compact JSON so ``{"x": 1}`` shows up as ``{"x":1}``;
    values JSON cannot encode fall back to ``str()`` within that rendering,
    and containers JSON rejects outright (tuple keys, cycles) use ``str()``.
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return str(value)


def render_message(kind: ErrorKind, properties: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute ``properties`` into ``kind``'s template.

    Placeholders with no matching property are left as ``${name}``.
    """
    if not properties:
        return kind.template
    return parse_template(kind.template).render(properties, display_value)


def raise_error(kind: ErrorKind, properties: Optional[Mapping[str, Any]] = None) -> NoReturn:
    """Raise a :class:`TypesmithError` of ``kind``.

    Args:
        kind: Catalogue entry (e.g. ``ErrorKind.InputFileDoesNotExist``)
        properties: Values for the template's placeholders

    Raises:
        TypesmithError: Always
    """
    if properties is None:
        properties = {}
    raise TypesmithError(kind, render_message(kind, properties), properties)


def ensure(condition: Any, kind: ErrorKind, properties: Optional[Mapping[str, Any]] = None) -> None:
    """Raise ``kind`` unless ``condition`` holds.

    Nothing is built when the condition is true, so ``properties`` may be
    anything in that case.
    """
    if condition:
        return
    raise_error(kind, properties)
