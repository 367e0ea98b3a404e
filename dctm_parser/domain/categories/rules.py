"""
Categorization rule tables for dumped attributes.

Each entity kind owns an ordered table of (predicate, group) rules that is
evaluated top to bottom; the first matching rule decides the group and the
kind's default group applies when nothing matches. Supporting a new entity
kind or a renamed attribute only needs a table edit.

The name sets mirror the attribute layout of the repository's dm_user and
dm_group types.
"""

from typing import Callable

from dctm_parser.domain.constants import (
    APPLICATION_PREFIX,
    INTERNAL_PREFIX,
    SYSTEM_PREFIX,
)
from dctm_parser.domain.enums import AttributeGroup, EntityKind

NamePredicate = Callable[[str], bool]
CategoryRule = tuple[NamePredicate, AttributeGroup]


def name_in(*names: str) -> NamePredicate:
    """Predicate matching any of the given attribute names exactly."""
    members = frozenset(names)
    return lambda name: name in members


def has_prefix(*prefixes: str) -> NamePredicate:
    """Predicate matching attribute names starting with any prefix."""
    return lambda name: name.startswith(prefixes)


# =========================================================================
# Attribute name sets
# =========================================================================

USER_IDENTITY_ATTRIBUTES = (
    'user_name', 'user_login_name', 'user_os_name', 'user_address',
    'user_db_name', 'user_source', 'user_ldap_dn', 'user_global_unique_id',
)

USER_ACCESS_ATTRIBUTES = (
    'acl_domain', 'acl_name', 'owner_name', 'owner_permit',
    'user_privileges', 'user_xprivileges', 'client_capability', 'alias_set_id',
)

USER_PREFERENCE_ATTRIBUTES = (
    'default_folder', 'default_group', 'home_docbase', 'user_web_page',
    'user_delegation', 'user_email',
)

GROUP_IDENTITY_ATTRIBUTES = (
    'group_name', 'group_address', 'group_source', 'description',
    'group_class', 'group_admin', 'owner_name', 'group_global_unique_id',
)

GROUP_ACCESS_ATTRIBUTES = (
    'acl_domain', 'acl_name', 'alias_set_id', 'is_private',
    'is_protected', 'is_dynamic', 'globally_managed',
)

GROUP_MEMBER_ATTRIBUTES = ('users_names', 'groups_names')


# =========================================================================
# Rule tables
# =========================================================================

CATEGORY_RULES: dict[EntityKind, list[CategoryRule]] = {
    EntityKind.OBJECT: [
        (has_prefix(SYSTEM_PREFIX), AttributeGroup.SYSTEM),
        (has_prefix(INTERNAL_PREFIX), AttributeGroup.INTERNAL),
        (has_prefix(APPLICATION_PREFIX), AttributeGroup.APPLICATION),
    ],
    EntityKind.USER: [
        (name_in(*USER_IDENTITY_ATTRIBUTES), AttributeGroup.IDENTITY),
        (name_in(*USER_ACCESS_ATTRIBUTES), AttributeGroup.ACCESS),
        (name_in(*USER_PREFERENCE_ATTRIBUTES), AttributeGroup.PREFERENCES),
        (has_prefix(SYSTEM_PREFIX, INTERNAL_PREFIX), AttributeGroup.SYSTEM),
    ],
    EntityKind.GROUP: [
        (name_in(*GROUP_IDENTITY_ATTRIBUTES), AttributeGroup.IDENTITY),
        (name_in(*GROUP_ACCESS_ATTRIBUTES), AttributeGroup.ACCESS),
        (name_in(*GROUP_MEMBER_ATTRIBUTES), AttributeGroup.MEMBERS),
        (has_prefix(SYSTEM_PREFIX, INTERNAL_PREFIX), AttributeGroup.SYSTEM),
    ],
}

DEFAULT_GROUPS: dict[EntityKind, AttributeGroup] = {
    EntityKind.OBJECT: AttributeGroup.STANDARD,
    EntityKind.USER: AttributeGroup.OTHER,
    EntityKind.GROUP: AttributeGroup.OTHER,
}


def categorize(kind: EntityKind, name: str) -> AttributeGroup:
    """
    Assign a display group to an attribute name.

    Args:
        kind: Entity kind selecting the rule table
        name: Attribute name as dumped

    Returns:
        Group of the first matching rule, or the kind's default group

    Example:
        >>> categorize(EntityKind.OBJECT, 'r_object_id')
        <AttributeGroup.SYSTEM: 'system'>
        >>> categorize(EntityKind.USER, 'user_email')
        <AttributeGroup.PREFERENCES: 'preferences'>
    """
    for predicate, group in CATEGORY_RULES[kind]:
        if predicate(name):
            return group
    return DEFAULT_GROUPS[kind]


def is_prefixed(name: str) -> bool:
    """Whether the name carries a server-managed r_/i_/a_ prefix."""
    return name.startswith((SYSTEM_PREFIX, INTERNAL_PREFIX, APPLICATION_PREFIX))
