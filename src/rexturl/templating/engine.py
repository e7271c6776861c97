"""
Placeholder template engine.

Grammar:
    {field}              value of field, nothing if absent
    {field:default}      value of field, or the default text if absent
    {field?text}         text if field is present, nothing otherwise
    {field!text}         text if field is absent, nothing otherwise

Clause text runs verbatim to the first '}'. Placeholders do not nest and
'}' cannot be escaped inside a clause.

Templates are compiled once and rendered against any number of records.
Escaping applies to substituted field values only, never to literal text or
clause text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from rexturl.errors import EmptyFieldNameError, UnclosedPlaceholderError
from rexturl.parsing import URLRecord

from .escaping import EscapeMode, escape_value

_CLAUSE_MARKERS = ":?!"


class PlaceholderKind(str, Enum):
    PLAIN = "plain"
    DEFAULT = "default"
    PRESENT = "present"
    MISSING = "missing"


_KIND_BY_MARKER = {
    ":": PlaceholderKind.DEFAULT,
    "?": PlaceholderKind.PRESENT,
    "!": PlaceholderKind.MISSING,
}


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    """A ``{...}`` token: field name, kind and optional clause text."""

    field: str
    kind: PlaceholderKind = PlaceholderKind.PLAIN
    clause: Optional[str] = None

    @property
    def default(self) -> Optional[str]:
        return self.clause if self.kind is PlaceholderKind.DEFAULT else None

    @property
    def present_suffix(self) -> Optional[str]:
        return self.clause if self.kind is PlaceholderKind.PRESENT else None

    @property
    def missing_suffix(self) -> Optional[str]:
        return self.clause if self.kind is PlaceholderKind.MISSING else None

    def evaluate(self, record: URLRecord, escape: EscapeMode) -> str:
        value = record.get_field(self.field)

        if value is None:
            if self.kind in (PlaceholderKind.DEFAULT, PlaceholderKind.MISSING):
                return self.clause
            return ""

        if self.kind is PlaceholderKind.PRESENT:
            return self.clause
        if self.kind is PlaceholderKind.MISSING:
            return ""
        return escape_value(value, escape)


Segment = Union[Literal, Placeholder]


@dataclass(frozen=True)
class Template:
    """Compiled template: an immutable sequence of segments."""

    source: str
    segments: Tuple[Segment, ...]

    @property
    def fields(self) -> Tuple[str, ...]:
        """Field names referenced by the template, in order of appearance."""
        return tuple(seg.field for seg in self.segments if isinstance(seg, Placeholder))

    def render(self, record: URLRecord, escape: EscapeMode | str = EscapeMode.NONE) -> str:
        """
        Render the template against one record.

        Args:
            record: URL record supplying field values
            escape: Escape mode applied to substituted values

        Returns:
            Rendered string
        """
        escape = EscapeMode(escape)
        parts = []
        for segment in self.segments:
            if isinstance(segment, Literal):
                parts.append(segment.text)
            else:
                parts.append(segment.evaluate(record, escape))
        return "".join(parts)


def compile_template(source: str) -> Template:
    """
    Compile a template string.

    Args:
        source: Template text

    Returns:
        Compiled Template

    Raises:
        UnclosedPlaceholderError: A '{' has no matching '}'
        EmptyFieldNameError: A placeholder has no field name
    """
    segments = []
    literal_start = 0
    pos = 0
    length = len(source)

    while pos < length:
        if source[pos] != "{":
            pos += 1
            continue

        if pos > literal_start:
            segments.append(Literal(source[literal_start:pos]))

        close = source.find("}", pos + 1)
        if close == -1:
            raise UnclosedPlaceholderError(source, pos)

        segments.append(_parse_placeholder(source, pos, close))
        pos = close + 1
        literal_start = pos

    if literal_start < length:
        segments.append(Literal(source[literal_start:]))

    return Template(source=source, segments=tuple(segments))


def _parse_placeholder(source: str, open_pos: int, close_pos: int) -> Placeholder:
    body = source[open_pos + 1 : close_pos]

    marker_at = len(body)
    for index, ch in enumerate(body):
        if ch in _CLAUSE_MARKERS:
            marker_at = index
            break

    field = body[:marker_at]
    if not field:
        raise EmptyFieldNameError(source, open_pos)

    if marker_at == len(body):
        return Placeholder(field)

    kind = _KIND_BY_MARKER[body[marker_at]]
    return Placeholder(field, kind, body[marker_at + 1 :])


def render(
    template: Template,
    record: URLRecord,
    escape: EscapeMode | str = EscapeMode.NONE,
) -> str:
    """Render a compiled template against a record."""
    return template.render(record, escape)
