"""
Attribute accumulation for object-dump text.

This module folds classified dump lines into an ordered list of
AttributeRecord objects. Repeating attributes may be spread across an
indexed attribute line and any number of name-less continuation lines,
with indices arriving in any order; the accumulator merges them into one
gap-free list per attribute.

The only state carried from one line to the next is the name of the
most recent attribute line, held in a ParserState value that is passed
into and returned from every step.
"""

import logging
import re
from dataclasses import dataclass

from dctm_parser.domain.categories import categorize, is_prefixed
from dctm_parser.domain.constants import DEFAULT_TYPE_LABEL, START_POS_ATTRIBUTE
from dctm_parser.domain.enums import AttributeGroup, EntityKind
from dctm_parser.domain.models import AttributeRecord, ParseOptions
from dctm_parser.parsers.line_classifier import (
    AttributeLine,
    ContinuationLine,
    DumpLine,
    classify_line,
)

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r'^[+-]?\d+')


@dataclass(frozen=True)
class ParserState:
    """Cross-line parser state, fresh for every parse call."""
    last_attribute_name: str | None = None


@dataclass
class _RecordBuilder:
    """Mutable stand-in for an AttributeRecord while the dump is folded."""
    name: str
    declared_type: str
    value: str | list[str]
    is_repeating: bool
    group: AttributeGroup

    def assign(self, index: int | None, raw_value: str) -> None:
        if index is None:
            if self.is_repeating:
                self._grow(0)
                self.value[0] = raw_value
            else:
                logger.debug("Duplicate attribute %s, keeping last value", self.name)
                self.value = raw_value
            return

        if not self.is_repeating:
            self.value = [self.value]
            self.is_repeating = True
        self._grow(index)
        self.value[index] = raw_value

    def update_type(self, declared_type: str | None) -> None:
        if declared_type and self.declared_type == DEFAULT_TYPE_LABEL:
            self.declared_type = declared_type

    def _grow(self, index: int) -> None:
        missing = index + 1 - len(self.value)
        if missing > 0:
            self.value.extend([''] * missing)

    def freeze(self) -> AttributeRecord:
        value = list(self.value) if self.is_repeating else self.value
        return AttributeRecord(
            name=self.name,
            declared_type=self.declared_type,
            value=value,
            is_repeating=self.is_repeating,
            group=self.group,
        )


class DumpAccumulator:
    """
    Folds classified dump lines into attribute records.

    Records keep first-seen order; later occurrences of a name merge into
    the existing record. Nothing in here raises for malformed input:
    unusable lines are dropped.

    Args:
        kind: Entity kind used to categorize new records
        options: Parse options (index cap, custom attribute detection)
    """

    def __init__(self, kind: EntityKind, options: ParseOptions):
        self.kind = kind
        self.options = options
        self._builders: dict[str, _RecordBuilder] = {}

    def step(self, state: ParserState, line: DumpLine) -> ParserState:
        """Apply one classified line and return the next parser state."""
        if isinstance(line, AttributeLine):
            self._merge(line.name, line.index, line.declared_type, line.raw_value)
            return ParserState(last_attribute_name=line.name)

        if isinstance(line, ContinuationLine):
            if state.last_attribute_name is None:
                logger.debug("Dropping continuation [%d] with no preceding attribute", line.index)
            else:
                self._merge(state.last_attribute_name, line.index,
                            line.declared_type, line.raw_value)

        return state

    def records(self) -> list[AttributeRecord]:
        """Finish accumulation and return the frozen records."""
        if self.kind == EntityKind.OBJECT and self.options.detect_custom:
            self._mark_custom_attributes()
        return [builder.freeze() for builder in self._builders.values()]

    def _merge(self, name: str, index: int | None, declared_type: str | None, raw_value: str) -> None:
        if index is not None and index > self.options.max_repeating_index:
            logger.debug(
                "Dropping %s[%d]: index above limit %d",
                name, index, self.options.max_repeating_index,
            )
            return

        builder = self._builders.get(name)
        if builder is None:
            self._builders[name] = self._create(name, index, declared_type, raw_value)
            return

        builder.assign(index, raw_value)
        builder.update_type(declared_type)

    def _create(self, name: str, index: int | None, declared_type: str | None, raw_value: str) -> _RecordBuilder:
        if index is None:
            value: str | list[str] = raw_value
        else:
            value = [''] * (index + 1)
            value[index] = raw_value

        return _RecordBuilder(
            name=name,
            declared_type=declared_type or DEFAULT_TYPE_LABEL,
            value=value,
            is_repeating=index is not None,
            group=categorize(self.kind, name),
        )

    def _custom_start_pos(self) -> int | None:
        if self.options.custom_start_pos is not None:
            return self.options.custom_start_pos

        builder = self._builders.get(START_POS_ATTRIBUTE)
        if builder is None or builder.is_repeating:
            return None
        match = _LEADING_INT_RE.match(builder.value.strip())
        return int(match.group()) if match else None

    def _mark_custom_attributes(self) -> None:
        """Move standard attributes past the type's start position to CUSTOM.

        Only attributes without an r_/i_/a_ prefix count towards the
        position.
        """
        start_pos = self._custom_start_pos()
        if start_pos is None or start_pos <= 0:
            return

        position = 0
        for builder in self._builders.values():
            if builder.group == AttributeGroup.STANDARD and position >= start_pos:
                builder.group = AttributeGroup.CUSTOM
            if not is_prefixed(builder.name):
                position += 1


def parse_dump(
    text: str,
    kind: EntityKind = EntityKind.OBJECT,
    options: ParseOptions | None = None,
) -> list[AttributeRecord]:
    """
    Parse object-dump text into attribute records.

    Args:
        text: Dump text split on '\\n' only; a trailing '\\r' is ignored
        kind: Entity kind selecting the categorization rules
        options: Parse options, defaults used when omitted

    Returns:
        Attribute records in first-seen order. An empty list is a valid
        result.

    Example:
        >>> records = parse_dump("keywords[0] : a\\n[1] : b")
        >>> records[0].value
        ['a', 'b']
    """
    accumulator = DumpAccumulator(kind, options or ParseOptions())
    state = ParserState()
    for line in text.split('\n'):
        state = accumulator.step(state, classify_line(line))
    return accumulator.records()
