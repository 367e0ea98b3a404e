"""Shared data models used across parser modules."""

from dataclasses import dataclass, field
from typing import Any

from dctm_parser.domain.constants import MAX_REPEATING_INDEX
from dctm_parser.domain.enums import AttributeGroup


@dataclass(frozen=True)
class AttributeRecord:
    """
    One parsed attribute of a dump.

    Attributes:
        name: Attribute name as dumped (e.g. 'r_object_id')
        declared_type: Type label from the dump, 'string' when absent
        value: Scalar string, or list of strings for repeating attributes
        is_repeating: Whether any indexed occurrence of the name was seen
        group: Display group assigned by the categorizer

    Example:
        >>> record = AttributeRecord('r_version_label', 'string',
        ...                          ['1.0', 'CURRENT'], True, AttributeGroup.SYSTEM)
        >>> record.value
        ['1.0', 'CURRENT']
    """
    name: str
    declared_type: str
    value: str | list[str] | None
    is_repeating: bool
    group: AttributeGroup

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'type': self.declared_type,
            'value': list(self.value) if self.is_repeating else self.value,
            'is_repeating': self.is_repeating,
            'group': self.group.value,
        }


@dataclass
class ParseOptions:
    """Options controlling how a dump is parsed."""

    max_repeating_index: int = MAX_REPEATING_INDEX
    custom_start_pos: int | None = None
    detect_custom: bool = True


@dataclass
class DumpSummary:
    """Headline information extracted from a parsed dump."""

    title: str
    type_name: str
    object_id: str
    attribute_count: int
    members: list[str] = field(default_factory=list)
    group_members: list[str] = field(default_factory=list)


def find_record(records: list[AttributeRecord], name: str) -> AttributeRecord | None:
    """Return the record called ``name`` or None."""
    for record in records:
        if record.name == name:
            return record
    return None
