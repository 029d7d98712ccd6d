"""Lark parser for message templates.

A template is literal text with ``${name}`` placeholders. Parsing splits it
into segments once; rendering walks the segments in a single pass, so a
value that itself contains ``${...}`` is inserted verbatim and never
expanded again.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from lark import Lark, Transformer, UnexpectedInput

GRAMMAR_PATH = Path(__file__).with_name("template.lark")


class TemplateSyntaxError(ValueError):
    """A catalogue template contains a malformed placeholder."""

    def __init__(self, template: str, detail: str) -> None:
        super().__init__(f"malformed message template {template!r}: {detail}")
        self.template = template


@dataclass(frozen=True)
class Literal:
    text: str

    def source(self) -> str:
        return self.text


@dataclass(frozen=True)
class Placeholder:
    name: str

    def source(self) -> str:
        return "${" + self.name + "}"


Segment = Union[Literal, Placeholder]


@dataclass(frozen=True)
class Template:
    """A parsed message template."""

    text: str
    segments: Tuple[Segment, ...]

    @property
    def placeholders(self) -> Tuple[str, ...]:
        """Distinct placeholder names, in order of first occurrence."""
        seen: dict[str, None] = {}
        for seg in self.segments:
            if isinstance(seg, Placeholder):
                seen.setdefault(seg.name, None)
        return tuple(seen)

    def render(self, properties: Mapping[str, Any], display: Callable[[Any], str]) -> str:
        """Substitute every placeholder that has a property.

        Placeholders without a matching property are kept as ``${name}``.
        """
        out: list[str] = []
        for seg in self.segments:
            if isinstance(seg, Placeholder) and seg.name in properties:
                out.append(display(properties[seg.name]))
            else:
                out.append(seg.source())
        return "".join(out)


class _SegmentBuilder(Transformer):
    def literal(self, items):
        return Literal(str(items[0]))

    def placeholder(self, items):
        return Placeholder(str(items[0]))

    def start(self, items):
        return tuple(items)


_parser: Optional[Lark] = None


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark.open(str(GRAMMAR_PATH), parser="lalr", lexer="contextual")
    return _parser


@lru_cache(maxsize=None)
def parse_template(text: str) -> Template:
    """Parse ``text`` into a :class:`Template`.

    Raises:
        TemplateSyntaxError: if a ``${`` is not followed by ``identifier}``.
    """
    try:
        tree = _get_parser().parse(text)
    except UnexpectedInput as e:
        raise TemplateSyntaxError(text, f"unexpected input at column {e.column}") from None
    return Template(text, _SegmentBuilder().transform(tree))
