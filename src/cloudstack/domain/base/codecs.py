"""Wire codecs shared by the record types.

These convert between the shapes CloudStack puts on the wire and the
in-memory representation used by the records:

- comma-joined strings <-> ``frozenset`` of tags or CIDRs
- ``"Unlimited"`` <-> ``None`` for limit counters
- ``yyyy-MM-dd'T'HH:mm:ssZ`` timestamps <-> ``datetime``
"""
from datetime import datetime
from typing import Annotated, Any, FrozenSet, Iterable, Optional, Tuple, Union

from pydantic import BeforeValidator, PlainSerializer

WIRE_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
TAG_SEPARATOR = ","
UNLIMITED = "Unlimited"


def decode_tags(value: Union[str, Iterable[str], None]) -> FrozenSet[str]:
    """
    Split a comma-joined wire value into a set of tags.

    Embedded commas are not escaped on the wire, so a tag containing a comma
    cannot be told apart from two tags.

    Args:
        value: Comma-joined string, an iterable of tags, or None

    Returns:
        Set of non-empty tags; empty when the value is absent or blank
    """
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset(tag for tag in value.split(TAG_SEPARATOR) if tag)
    return frozenset(str(tag) for tag in value if tag)


def encode_tags(tags: Optional[Iterable[str]]) -> Optional[str]:
    """
    Join a set of tags for the wire.

    Empty tags are dropped, as they are when decoding.

    Args:
        tags: Tags to join

    Returns:
        Sorted comma-joined string, or None when there are no tags
    """
    present = sorted(tag for tag in tags or () if tag)
    if not present:
        return None
    return TAG_SEPARATOR.join(present)


def parse_unlimited(value: Any) -> Optional[int]:
    """Map the wire ``Unlimited`` marker (or absence) to None, anything else to int."""
    if value is None or value == UNLIMITED:
        return None
    if isinstance(value, str):
        return int(value.strip())
    return value


def parse_wire_date(value: Any) -> Optional[datetime]:
    """
    Parse a CloudStack timestamp.

    The API emits ``2011-12-04T00:55:48-0800``; ISO-8601 variants are accepted
    as a fallback.

    Raises:
        ValueError: If the value is not a recognisable timestamp
    """
    if value is None or isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, WIRE_DATE_FORMAT)
    except ValueError:
        return datetime.fromisoformat(text)


def format_wire_date(value: Optional[datetime]) -> Optional[str]:
    """Render a timestamp in the CloudStack wire pattern."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.strftime("%Y-%m-%dT%H:%M:%S")
    return value.strftime(WIRE_DATE_FORMAT)


def natural_key(value: Any) -> Tuple[int, int, str]:
    """
    Ordering key for identity values.

    Identifiers made only of digits compare numerically, anything else
    compares as text and sorts after numeric identifiers. None sorts first.
    """
    if value is None:
        return (0, 0, "")
    if isinstance(value, int) and not isinstance(value, bool):
        return (1, value, "")
    text = str(value)
    if text.isdigit():
        return (1, int(text), "")
    return (2, 0, text)


# Field types

TagSet = Annotated[
    FrozenSet[str],
    BeforeValidator(decode_tags),
    PlainSerializer(encode_tags, when_used="json"),
]

UnlimitedCount = Annotated[Optional[int], BeforeValidator(parse_unlimited)]

WireDate = Annotated[
    Optional[datetime],
    BeforeValidator(parse_wire_date),
    PlainSerializer(format_wire_date, when_used="json"),
]
