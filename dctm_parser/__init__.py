"""Parser for repository object-dump text."""

from dctm_parser.domain.enums import AttributeGroup, EntityKind
from dctm_parser.domain.models import AttributeRecord, ParseOptions
from dctm_parser.output.group_composer import AttributeSection, compose_groups
from dctm_parser.output.value_formatter import format_value
from dctm_parser.parsers.dump_parser import parse_dump

__all__ = [
    'AttributeGroup', 'EntityKind', 'AttributeRecord', 'ParseOptions',
    'AttributeSection', 'compose_groups', 'format_value', 'parse_dump',
]
