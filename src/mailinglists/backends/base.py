"""Mailing lists backend base module."""

from abc import ABC, abstractmethod

from mailinglists.backends import MailingList, Subscriber
from mailinglists.enums import ALL, DEFAULT_LIMIT, DEFAULT_SKIP


class BaseBackend(ABC):
    """Base class for all mailing lists backends."""

    @abstractmethod
    def get_lists(
        self,
        limit: int | None = DEFAULT_LIMIT,
        skip: int | None = DEFAULT_SKIP,
        address_filter: str = "",
        timeout: int = None,
    ) -> tuple[int, list[MailingList]]:
        """
        List the mailing lists administered by the account.

        Args:
            limit: Maximum number of lists to return
            skip: Number of lists to skip
            address_filter: Only return the list matching this address
            timeout: API request timeout in seconds

        Returns:
            tuple: Total number of lists and the requested page of lists

        """

    @abstractmethod
    def create_list(self, prototype: MailingList, timeout: int = None) -> MailingList:
        """
        Create a mailing list.

        Only `address` and `name` are needed, `description` and `access_level`
        are optional. The access level defaults to "everyone".
        """

    @abstractmethod
    def delete_list(self, address: str, timeout: int = None) -> None:
        """Remove all the members of a mailing list, then the list itself."""

    @abstractmethod
    def get_list_by_address(self, address: str, timeout: int = None) -> MailingList:
        """Retrieve a mailing list by its address."""

    @abstractmethod
    def update_list(self, address: str, prototype: MailingList, timeout: int = None) -> MailingList:
        """
        Update the fields set in the prototype.

        Changing the address of a list means mail sent to the old address
        will no longer be delivered.
        """

    @abstractmethod
    def get_subscribers(
        self,
        limit: int | None = DEFAULT_LIMIT,
        skip: int | None = DEFAULT_SKIP,
        subscribed: bool | None = ALL,
        address: str = "",
        timeout: int = None,
    ) -> tuple[int, list[Subscriber]]:
        """
        List the members of a mailing list.

        Args:
            limit: Maximum number of members to return
            skip: Number of members to skip
            subscribed: ALL, SUBSCRIBED or UNSUBSCRIBED
            address: Address of the mailing list
            timeout: API request timeout in seconds

        Returns:
            tuple: Total number of members and the requested page of members

        """

    @abstractmethod
    def get_subscriber_by_address(self, subscriber_address: str, list_address: str, timeout: int = None) -> Subscriber:
        """Retrieve a member of a mailing list by its address."""

    @abstractmethod
    def create_subscriber(self, merge: bool, list_address: str, prototype: Subscriber, timeout: int = None) -> None:
        """
        Add a member to a mailing list.

        Args:
            merge: Update the existing member instead of failing on a duplicate address
            list_address: Address of the mailing list
            prototype: The member to add
            timeout: API request timeout in seconds

        Raises:
            VarsEncodingError: If the member vars cannot be serialized

        """

    @abstractmethod
    def update_subscriber(
        self, subscriber_address: str, list_address: str, prototype: Subscriber, timeout: int = None
    ) -> Subscriber:
        """Update the fields set in the prototype for a member of a mailing list."""

    @abstractmethod
    def delete_subscriber(self, subscriber_address: str, list_address: str, timeout: int = None) -> None:
        """Remove a member from a mailing list."""
