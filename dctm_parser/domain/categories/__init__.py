"""
Attribute categorization for dumped entities.

Maps attribute names to display groups through per-entity-kind rule
tables, and fixes the order and headings groups are displayed with.

Example:
    >>> from dctm_parser.domain.categories import categorize, get_layout
    >>> from dctm_parser.domain.enums import EntityKind
    >>>
    >>> categorize(EntityKind.GROUP, 'users_names')
    <AttributeGroup.MEMBERS: 'members'>
    >>> get_layout(EntityKind.USER).order[0]
    <AttributeGroup.IDENTITY: 'identity'>

Module Contents:
    CATEGORY_RULES: Ordered (predicate, group) rule tables per entity kind
    DEFAULT_GROUPS: Fallback group per entity kind
    categorize: Assign a group to an attribute name
    is_prefixed: Whether a name carries an r_/i_/a_ prefix
    GroupLayout: Immutable display order and headings for one kind
    GROUP_LAYOUTS: Layout per entity kind
    get_layout: Look up the layout of a kind
"""

from dctm_parser.domain.categories.layouts import (
    GROUP_LAYOUTS,
    GroupLayout,
    get_layout,
)
from dctm_parser.domain.categories.rules import (
    CATEGORY_RULES,
    DEFAULT_GROUPS,
    categorize,
    is_prefixed,
)

__all__ = [
    'CATEGORY_RULES',
    'DEFAULT_GROUPS',
    'categorize',
    'is_prefixed',
    'GroupLayout',
    'GROUP_LAYOUTS',
    'get_layout',
]
