"""Dummy mailing lists backend."""

from dataclasses import replace

from mailinglists.backends import MailingList, Subscriber
from mailinglists.enums import ALL, DEFAULT_LIMIT, DEFAULT_SKIP

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy mailing lists backend doing nothing."""

    def get_lists(self, limit=DEFAULT_LIMIT, skip=DEFAULT_SKIP, address_filter="", timeout=None):
        """List the mailing lists."""
        return 0, []

    def create_list(self, prototype, timeout=None):
        """Create a mailing list."""
        return replace(prototype)

    def delete_list(self, address, timeout=None):
        """Delete a mailing list."""

    def get_list_by_address(self, address, timeout=None):
        """Retrieve a mailing list."""
        return MailingList(address=address)

    def update_list(self, address, prototype, timeout=None):
        """Update a mailing list."""
        return replace(prototype)

    def get_subscribers(self, limit=DEFAULT_LIMIT, skip=DEFAULT_SKIP, subscribed=ALL, address="", timeout=None):
        """List the members of a mailing list."""
        return 0, []

    def get_subscriber_by_address(self, subscriber_address, list_address, timeout=None):
        """Retrieve a member of a mailing list."""
        return Subscriber(address=subscriber_address)

    def create_subscriber(self, merge, list_address, prototype, timeout=None):
        """Add a member to a mailing list."""

    def update_subscriber(self, subscriber_address, list_address, prototype, timeout=None):
        """Update a member of a mailing list."""
        return replace(prototype)

    def delete_subscriber(self, subscriber_address, list_address, timeout=None):
        """Remove a member from a mailing list."""
