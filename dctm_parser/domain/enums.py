"""Domain enums for the dump parser."""
from enum import Enum


class EntityKind(str, Enum):
    """Kind of repository entity a dump describes."""
    OBJECT = "object"
    USER = "user"
    GROUP = "group"


class AttributeGroup(str, Enum):
    """
    Semantic display groups for dumped attributes.

    Object dumps use CUSTOM, STANDARD, APPLICATION, SYSTEM and INTERNAL.
    User dumps use IDENTITY, ACCESS, PREFERENCES, OTHER and SYSTEM.
    Group dumps use MEMBERS, IDENTITY, ACCESS, OTHER and SYSTEM.
    """
    CUSTOM = "custom"
    STANDARD = "standard"
    APPLICATION = "application"
    SYSTEM = "system"
    INTERNAL = "internal"
    IDENTITY = "identity"
    ACCESS = "access"
    PREFERENCES = "preferences"
    MEMBERS = "members"
    OTHER = "other"
