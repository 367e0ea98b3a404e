"""Line classification for object-dump text."""

from dataclasses import dataclass
from typing import Union

from dctm_parser.domain.constants import (
    ATTRIBUTE_RE,
    CONTINUATION_RE,
    SEPARATOR_PREFIX,
)


@dataclass(frozen=True)
class BlankLine:
    pass


@dataclass(frozen=True)
class SeparatorLine:
    pass


@dataclass(frozen=True)
class UnrecognizedLine:
    text: str


@dataclass(frozen=True)
class ContinuationLine:
    """An extra indexed value for the most recently named attribute."""
    index: int
    declared_type: str | None
    raw_value: str


@dataclass(frozen=True)
class AttributeLine:
    """A named attribute, optionally carrying a repeating index."""
    name: str
    index: int | None
    declared_type: str | None
    raw_value: str


DumpLine = Union[BlankLine, SeparatorLine, ContinuationLine, AttributeLine, UnrecognizedLine]


def classify_line(line: str) -> DumpLine:
    """Classify one dump line.

    Separators are checked before continuations, and continuations before
    attributes, since a name-less '[1] : x' line would otherwise be read
    as an attribute.

    Args:
        line: One line of dump text, line terminator optional.

    Returns:
        The classified line. Never raises.
    """
    trimmed = line.strip()
    if not trimmed:
        return BlankLine()
    if trimmed.startswith(SEPARATOR_PREFIX):
        return SeparatorLine()

    match = CONTINUATION_RE.match(trimmed)
    if match:
        index, declared_type, raw_value = match.groups()
        return ContinuationLine(int(index), declared_type, raw_value)

    match = ATTRIBUTE_RE.match(trimmed)
    if match:
        name, index, declared_type, raw_value = match.groups()
        return AttributeLine(
            name=name,
            index=int(index) if index is not None else None,
            declared_type=declared_type,
            raw_value=raw_value,
        )

    return UnrecognizedLine(trimmed)
