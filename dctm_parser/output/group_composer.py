"""Builds the grouped, display-ordered view of parsed attributes."""

from dataclasses import dataclass
from typing import Any

from dctm_parser.domain.categories import get_layout
from dctm_parser.domain.enums import AttributeGroup, EntityKind
from dctm_parser.domain.models import AttributeRecord
from dctm_parser.output.value_formatter import format_value


@dataclass(frozen=True)
class AttributeSection:
    """One non-empty display group with its records sorted by name."""

    group: AttributeGroup
    label: str
    records: tuple[AttributeRecord, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            'group': self.group.value,
            'label': self.label,
            'count': len(self.records),
            'attributes': [record.to_dict() for record in self.records],
        }


def compose_groups(records: list[AttributeRecord], kind: EntityKind) -> list[AttributeSection]:
    """Group records in the display order declared for ``kind``.

    Records are sorted by name (ordinal) inside each section and empty
    sections are left out. Groups the layout does not name follow the
    layout's groups in enum order.
    """
    layout = get_layout(kind)
    buckets: dict[AttributeGroup, list[AttributeRecord]] = {}
    for record in records:
        buckets.setdefault(record.group, []).append(record)

    order = list(layout.order)
    order.extend(group for group in AttributeGroup if group not in layout.order)

    sections: list[AttributeSection] = []
    for group in order:
        members = buckets.get(group)
        if not members:
            continue
        sections.append(AttributeSection(
            group=group,
            label=layout.label_for(group),
            records=tuple(sorted(members, key=lambda r: r.name)),
        ))
    return sections


def render_sections(sections: list[AttributeSection]) -> str:
    """Render sections as plain text, one attribute per line."""
    lines: list[str] = []
    for section in sections:
        if lines:
            lines.append('')
        lines.append(f"{section.label} ({len(section.records)})")
        width = max(len(record.name) for record in section.records)
        for record in section.records:
            value = format_value(record.value, record.is_repeating)
            lines.append(f"  {record.name.ljust(width)} [{record.declared_type}] : {value}")
    return '\n'.join(lines)
