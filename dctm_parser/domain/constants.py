"""Shared constants and regex patterns for dump parsing.

Centralizes the line grammar and the limits shared across the parser,
the categorizer and the output modules.
"""

import re

# ── Dump Line Patterns ──────────────────────────────────────────────────

# Section delimiter, e.g. '---' or '--- dm_document ---'
SEPARATOR_PREFIX = '---'

# Name-less repeating value: '[1] : value' or '  [2] [ID] = value'
CONTINUATION_RE = re.compile(r'^\[(\d+)\](?:\s*\[([^\]]+)\])?\s*[:=]\s*(.*)$')

# Attribute line: 'name : value', 'name [ID] : value', 'name[0] : value'
# A bracket after whitespace is always the type: 'a [0] : x' has type '0'.
ATTRIBUTE_RE = re.compile(r'^(\S+?)(?:\[(\d+)\])?\s*(?:\[([^\]]+)\])?\s*[:=]\s*(.*)$')

# Repository object ids are 16 hex characters, e.g. '0900000180001234'
OBJECT_ID_RE = re.compile(r'[0-9a-f]{16}', re.I)

# ── Parsing Limits ──────────────────────────────────────────────────────

DEFAULT_TYPE_LABEL = 'string'

# Highest repeating index accepted; larger indices are dropped.
MAX_REPEATING_INDEX = 100_000

# Attribute carrying the position where custom attributes start
START_POS_ATTRIBUTE = 'start_pos'

# Attribute prefixes that mark server-managed attributes
SYSTEM_PREFIX = 'r_'
INTERNAL_PREFIX = 'i_'
APPLICATION_PREFIX = 'a_'

# ── Formatting ──────────────────────────────────────────────────────────

NULL_MARKER = 'NULL'
VALUE_SEPARATOR = ', '
