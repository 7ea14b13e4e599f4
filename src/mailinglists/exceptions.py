"""Mailing lists exceptions module."""


class MailingListError(Exception):
    """Base exception for all mailing lists exceptions."""


class MailingListInvalidBackendError(MailingListError):
    """Exception raised when the backend is invalid."""


class MailingListTransportError(MailingListError):
    """Exception raised when the API could not be reached."""


class MailingListAPIError(MailingListError):
    """Exception raised when the API answers with a non 2xx status."""

    def __init__(self, status_code, body):
        """Keep the status code and the raw body of the response."""
        super().__init__(f"Mailing list API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class MailingListDecodeError(MailingListError):
    """Exception raised when a response body does not match the expected envelope."""


class VarsEncodingError(MailingListError):
    """Exception raised when subscriber vars cannot be serialized to JSON."""
