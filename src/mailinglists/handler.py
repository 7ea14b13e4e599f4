"""Build the mailing lists backend configured in the Django settings."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from mailinglists.exceptions import MailingListInvalidBackendError


class MailingListsHandler:
    """
    Resolve and instantiate the mailing lists backend once.

    The configuration is a dict with the dotted path of the backend class in
    `BACKEND` and its keyword arguments (API key, base URL, timeout...) in
    `PARAMETERS`.
    """

    def __init__(self, backend=None):
        """Use the given configuration instead of settings.MAILINGLISTS when provided."""
        self._backend = backend
        self._mailing_lists = None

    @cached_property
    def backend(self):
        """Return the backend configuration, read from settings.MAILINGLISTS by default."""
        if self._backend is None:
            try:
                self._backend = settings.MAILINGLISTS.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.MAILINGLISTS is not configured") from e
        return self._backend

    def __call__(self):
        """Return the backend, instantiating it on first use."""
        if self._mailing_lists is None:
            self._mailing_lists = self.create_backend(self.backend)
        return self._mailing_lists

    def create_backend(self, params):
        """Import the backend class and instantiate it with its parameters."""
        params = params.copy()
        try:
            backend = params.pop("BACKEND")
        except KeyError as e:
            raise ImproperlyConfigured("settings.MAILINGLISTS has no BACKEND") from e
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise MailingListInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)
