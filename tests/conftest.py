"""Fixtures for the test suite."""

import pytest

from mailinglists.backends.mailgun import MailgunBackend

API_KEY = "key-test"


@pytest.fixture(name="mailgun_backend")
def fixture_mailgun_backend():
    """Generate a Mailgun backend talking to the default API URL."""
    return MailgunBackend(api_key=API_KEY)
