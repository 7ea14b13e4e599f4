"""Enums and constants for mailing lists."""

from enum import StrEnum


class AccessLevel(StrEnum):
    """Who may post to a mailing list."""

    # only list administrators
    READ_ONLY = "readonly"
    # only subscribers
    MEMBERS = "members"
    # anyone, including non-subscribers
    EVERYONE = "everyone"


# Subscription filters for `get_subscribers`. A subscription flag is a tri-state:
# None leaves it unspecified, otherwise it is either True or False.
ALL = None
SUBSCRIBED = True
UNSUBSCRIBED = False

# Paging values the API uses when `limit` and `skip` are not sent.
DEFAULT_LIMIT = 25
DEFAULT_SKIP = 0
