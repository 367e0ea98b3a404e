"""Display formatting for attribute values."""

from typing import Any

from dctm_parser.domain.constants import NULL_MARKER, OBJECT_ID_RE, VALUE_SEPARATOR


def format_value(value: Any, is_repeating: bool) -> str:
    """Render an attribute value as display text.

    None becomes 'NULL'. Repeating values are joined with ', ', with
    'NULL' standing in for None entries.
    """
    if value is None:
        return NULL_MARKER
    if is_repeating and isinstance(value, (list, tuple)):
        return VALUE_SEPARATOR.join(
            NULL_MARKER if item is None else _to_text(item) for item in value
        )
    return _to_text(value)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def is_object_id(value: Any) -> bool:
    """Whether value looks like a 16 hex character repository object id."""
    if not isinstance(value, str):
        return False
    return bool(OBJECT_ID_RE.fullmatch(value))
