"""Builds the headline summary of a parsed dump."""

from typing import Any

from dctm_parser.domain.enums import EntityKind
from dctm_parser.domain.models import AttributeRecord, DumpSummary, find_record

TITLE_ATTRIBUTES = {
    EntityKind.OBJECT: 'object_name',
    EntityKind.USER: 'user_name',
    EntityKind.GROUP: 'group_name',
}


class SummaryBuilder:
    """Extracts title, type, id and membership from parsed records."""

    def build(self, records: list[AttributeRecord], kind: EntityKind) -> DumpSummary:
        object_id = self._scalar(records, 'r_object_id')
        title_attribute = TITLE_ATTRIBUTES[kind]
        if find_record(records, title_attribute) is None:
            title = object_id
        else:
            title = self._scalar(records, title_attribute)

        summary = DumpSummary(
            title=title,
            type_name=self._scalar(records, 'r_object_type') or 'unknown',
            object_id=object_id,
            attribute_count=len(records),
        )
        if kind == EntityKind.GROUP:
            summary.members = self._values(records, 'users_names')
            summary.group_members = self._values(records, 'groups_names')
        return summary

    @staticmethod
    def to_dict(summary: DumpSummary) -> dict[str, Any]:
        return {
            'title': summary.title,
            'type_name': summary.type_name,
            'object_id': summary.object_id,
            'attribute_count': summary.attribute_count,
            'members': summary.members,
            'group_members': summary.group_members,
        }

    @staticmethod
    def _scalar(records: list[AttributeRecord], name: str) -> str:
        record = find_record(records, name)
        if record is None or record.value is None:
            return ''
        if record.is_repeating:
            return record.value[0] if record.value else ''
        return record.value

    @staticmethod
    def _values(records: list[AttributeRecord], name: str) -> list[str]:
        record = find_record(records, name)
        if record is None or record.value is None:
            return []
        values = record.value if record.is_repeating else [record.value]
        return sorted(v for v in values if v)


def summarize(records: list[AttributeRecord], kind: EntityKind) -> DumpSummary:
    return SummaryBuilder().build(records, kind)
