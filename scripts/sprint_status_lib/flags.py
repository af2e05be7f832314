"""
'Flagged' custom field handling

In our Jira, customfield_10000 is an array of objects marking an issue as flagged:

    "customfield_10000": [
        {"disabled": false, "id": "10000", "self": "https://...", "value": "Impediment"}
    ]
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from .models import FlagEntry

logger = logging.getLogger(__name__)

FLAG_FIELD = "customfield_10000"
IMPEDIMENT = "Impediment"
FLAG_GLYPH = "🚩"

_ENTRY_TYPES = {
    'disabled': bool,
    'id': str,
    'self': str,
    'value': str,
}


@dataclass(frozen=True)
class FlagEntries:
    """Field value decoded as a list of flag entries"""
    entries: Tuple[FlagEntry, ...]


@dataclass(frozen=True)
class Unparseable:
    """Field value did not have the expected shape; treated as no entries"""
    raw: Any = None

    @property
    def entries(self) -> Tuple[FlagEntry, ...]:
        return ()


FlagField = Union[FlagEntries, Unparseable]


def _decode_entry(item: Any) -> FlagEntry:
    if not isinstance(item, Mapping) or set(item) != set(_ENTRY_TYPES):
        raise ValueError(f"unexpected flag entry shape: {item!r}")
    for key, expected in _ENTRY_TYPES.items():
        if not isinstance(item[key], expected):
            raise ValueError(f"flag entry '{key}' is not {expected.__name__}")
    return FlagEntry(
        disabled=item['disabled'],
        id=item['id'],
        self_link=item['self'],
        value=item['value']
    )


def decode_flag_field(value: Any) -> FlagField:
    """Decode the raw field value; any shape mismatch yields Unparseable."""
    if not isinstance(value, list):
        return Unparseable(value)
    try:
        return FlagEntries(tuple(_decode_entry(item) for item in value))
    except ValueError as e:
        logger.debug(f"Ignoring malformed {FLAG_FIELD} value: {e}")
        return Unparseable(value)


def is_flagged(custom_fields: Mapping[str, Any]) -> bool:
    """True iff the issue carries an 'Impediment' flag entry"""
    if FLAG_FIELD not in custom_fields:
        return False
    decoded = decode_flag_field(custom_fields[FLAG_FIELD])
    # Other flag values are ignored for now
    return any(entry.value == IMPEDIMENT for entry in decoded.entries)


def flag_marker(flagged: bool) -> str:
    """Prefix for the status cell of a flagged issue"""
    return f"{FLAG_GLYPH} " if flagged else ""
