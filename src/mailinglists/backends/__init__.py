"""Mailing lists backends module."""

from dataclasses import dataclass, fields
from typing import Any, get_args, get_origin

from mailinglists.exceptions import MailingListDecodeError


def _accepted_types(field_type):
    """Return the runtime types allowed by an optional field annotation."""
    return tuple(get_origin(arg) or arg for arg in get_args(field_type))


def _from_dict(cls, data):
    """
    Build a dataclass instance from a JSON object, ignoring unknown keys.

    Raises:
        MailingListDecodeError: If data is not an object or a member has the wrong type

    """
    if not isinstance(data, dict):
        raise MailingListDecodeError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")

    values = {}
    for field in fields(cls):
        if field.name not in data:
            continue
        value = data[field.name]
        accepted = _accepted_types(field.type)
        # JSON booleans are ints for isinstance
        if not isinstance(value, accepted) or (isinstance(value, bool) and bool not in accepted):
            raise MailingListDecodeError(f"{cls.__name__}.{field.name} cannot be {type(value).__name__}: {value!r}")
        values[field.name] = value
    return cls(**values)


@dataclass
class MailingList:
    """
    A mailing list as known by the mailing list service.

    Also used as a prototype for creation and partial updates: only the fields
    set to a non-empty value are sent.
    """

    address: str | None = None
    name: str | None = None
    description: str | None = None
    access_level: str | None = None
    created_at: str | None = None
    members_count: int | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "MailingList":
        """Build a mailing list from its JSON representation."""
        return _from_dict(cls, data)


@dataclass
class Subscriber:
    """
    A member of a mailing list.

    `subscribed` is a tri-state: None leaves it unspecified.
    `vars` holds any JSON-encodable metadata.
    """

    address: str | None = None
    name: str | None = None
    subscribed: bool | None = None
    vars: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Subscriber":
        """Build a subscriber from its JSON representation."""
        return _from_dict(cls, data)
