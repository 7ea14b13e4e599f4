"""Client for mailing lists and their members."""

from django.utils.functional import LazyObject

from .handler import MailingListsHandler


class DefaultMailingLists(LazyObject):
    """The configured mailing lists backend, built the first time it is used."""

    def _setup(self):
        """Build the backend from settings.MAILINGLISTS."""
        self._wrapped = mailing_lists_handler()


mailing_lists_handler = MailingListsHandler()
mailing_lists = DefaultMailingLists()
