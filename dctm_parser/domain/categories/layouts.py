"""
Display layouts for attribute groups.

A layout fixes the order in which an entity kind's groups are shown and
the heading used for each group.
"""

from dataclasses import dataclass

from dctm_parser.domain.enums import AttributeGroup, EntityKind


@dataclass(frozen=True)
class GroupLayout:
    """
    Immutable display layout for one entity kind.

    Attributes:
        kind: Entity kind the layout applies to
        order: Groups in display order
        labels: Heading for each group in the layout
    """
    kind: EntityKind
    order: tuple[AttributeGroup, ...]
    labels: dict[AttributeGroup, str]

    def label_for(self, group: AttributeGroup) -> str:
        return self.labels.get(group) or GENERIC_LABELS[group]


GENERIC_LABELS: dict[AttributeGroup, str] = {
    AttributeGroup.CUSTOM: 'Custom Attributes',
    AttributeGroup.STANDARD: 'Standard Attributes',
    AttributeGroup.APPLICATION: 'Application Attributes',
    AttributeGroup.SYSTEM: 'System Attributes',
    AttributeGroup.INTERNAL: 'Internal Attributes',
    AttributeGroup.IDENTITY: 'Identity',
    AttributeGroup.ACCESS: 'Access',
    AttributeGroup.PREFERENCES: 'Preferences',
    AttributeGroup.MEMBERS: 'Members',
    AttributeGroup.OTHER: 'Other Attributes',
}


GROUP_LAYOUTS: dict[EntityKind, GroupLayout] = {
    EntityKind.OBJECT: GroupLayout(
        EntityKind.OBJECT,
        (
            AttributeGroup.CUSTOM,
            AttributeGroup.STANDARD,
            AttributeGroup.APPLICATION,
            AttributeGroup.SYSTEM,
            AttributeGroup.INTERNAL,
        ),
        {
            AttributeGroup.SYSTEM: 'System Attributes (r_)',
            AttributeGroup.APPLICATION: 'Application Attributes (a_)',
            AttributeGroup.INTERNAL: 'Internal Attributes (i_)',
        },
    ),
    EntityKind.USER: GroupLayout(
        EntityKind.USER,
        (
            AttributeGroup.IDENTITY,
            AttributeGroup.ACCESS,
            AttributeGroup.PREFERENCES,
            AttributeGroup.OTHER,
            AttributeGroup.SYSTEM,
        ),
        {AttributeGroup.ACCESS: 'Access & Permissions'},
    ),
    EntityKind.GROUP: GroupLayout(
        EntityKind.GROUP,
        (
            AttributeGroup.MEMBERS,
            AttributeGroup.IDENTITY,
            AttributeGroup.ACCESS,
            AttributeGroup.OTHER,
            AttributeGroup.SYSTEM,
        ),
        {AttributeGroup.ACCESS: 'Access & Settings'},
    ),
}


def get_layout(kind: EntityKind) -> GroupLayout:
    return GROUP_LAYOUTS[kind]
