"""Mailgun mailing lists integration."""

import json
import logging

import requests
from django.core.exceptions import ImproperlyConfigured
from urllib3 import encode_multipart_formdata

from mailinglists.backends import MailingList, Subscriber
from mailinglists.enums import ALL, DEFAULT_LIMIT, DEFAULT_SKIP
from mailinglists.exceptions import (
    MailingListAPIError,
    MailingListDecodeError,
    MailingListTransportError,
    VarsEncodingError,
)

from .base import BaseBackend

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.mailgun.net/v3"
BASIC_AUTH_USER = "api"

LIST_FIELDS = ("address", "name", "description", "access_level")


def yes_no(value: bool) -> str:
    """Encode a boolean the way the Mailgun API expects it."""
    return "yes" if value else "no"


def encode_vars(subscriber_vars: dict) -> str:
    """Serialize subscriber vars to the JSON text sent as a form value."""
    try:
        return json.dumps(subscriber_vars, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as err:
        raise VarsEncodingError(f"Could not serialize subscriber vars: {err}") from err


def paging_params(limit: int | None, skip: int | None) -> dict:
    """Keep only the paging values that differ from the API defaults."""
    params = {}
    if limit is not None and limit != DEFAULT_LIMIT:
        params["limit"] = str(limit)
    if skip is not None and skip != DEFAULT_SKIP:
        params["skip"] = str(skip)
    return params


def list_form(prototype: MailingList) -> dict:
    """Build the form of a list creation or update from the non-empty prototype fields."""
    return {field: str(getattr(prototype, field)) for field in LIST_FIELDS if getattr(prototype, field)}


def subscriber_form(prototype: Subscriber) -> list[tuple[str, str]]:
    """Build the multipart fields of a subscriber from the fields set in the prototype."""
    form = []
    if prototype.address:
        form.append(("address", prototype.address))
    if prototype.name:
        form.append(("name", prototype.name))
    if prototype.vars is not None:
        form.append(("vars", encode_vars(prototype.vars)))
    if prototype.subscribed is not None:
        form.append(("subscribed", yes_no(prototype.subscribed)))
    return form


def multipart_payload(form: list[tuple[str, str]]) -> dict:
    """
    Encode form fields as a multipart/form-data body.

    The body is always multipart, even without any field, so an update
    with nothing set is still sent with its multipart content type.
    """
    body, content_type = encode_multipart_formdata(form)
    return {"data": body, "headers": {"Content-Type": content_type}}


class MailgunBackend(BaseBackend):
    """
    Mailgun mailing lists integration.

    Handles:
    - Mailing lists creation, retrieval, update and deletion
    - Mailing list members management

    Every call is a single request against the Mailgun API, nothing is cached
    and nothing is retried.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: int = 10):
        """Configure the Mailgun backend."""
        if not api_key:
            raise ImproperlyConfigured(f"Could not instantiate {self.__class__.__name__}, api_key is missing.")
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _lists_url(self, *parts):
        """Build the URL of a lists endpoint."""
        return "/".join((self.base_url, "lists", *parts))

    def _members_url(self, list_address, *parts):
        """Build the URL of a list members endpoint."""
        return self._lists_url(list_address, "members", *parts)

    def _request(self, method, url, timeout=None, **kwargs):
        """
        Send an authenticated request to the Mailgun API.

        Raises:
            MailingListTransportError: If the API could not be reached
            MailingListAPIError: If the API answers with a non 2xx status

        """
        logger.debug("Mailgun request %s %s", method, url)
        try:
            response = requests.request(
                method,
                url,
                auth=(BASIC_AUTH_USER, self._api_key),
                timeout=timeout or self._timeout,
                **kwargs,
            )
        except requests.RequestException as err:
            raise MailingListTransportError(f"Failed to reach Mailgun at {url}") from err

        if not response.ok:
            logger.warning("Mailgun answered %s to %s %s", response.status_code, method, url)
            raise MailingListAPIError(response.status_code, response.text)

        return response

    @staticmethod
    def _decode(response, key=None):
        """Decode a JSON object from a response, optionally unwrapping its `key` member."""
        try:
            payload = response.json()
        except ValueError as err:
            raise MailingListDecodeError("Mailgun response is not valid JSON") from err

        if not isinstance(payload, dict):
            raise MailingListDecodeError("Mailgun response is not a JSON object")

        if key is None:
            return payload

        try:
            value = payload[key]
        except KeyError as err:
            raise MailingListDecodeError(f"Mailgun response has no {key!r} member") from err
        if not isinstance(value, dict):
            raise MailingListDecodeError(f"Mailgun response {key!r} member is not a JSON object")
        return value

    def _decode_page(self, response, record):
        """Decode a `{total_count, items}` envelope into records."""
        payload = self._decode(response)
        try:
            total_count = int(payload["total_count"])
            items = [record.from_dict(item) for item in payload["items"]]
        except (KeyError, TypeError, ValueError) as err:
            raise MailingListDecodeError("Mailgun response does not match the paging envelope") from err
        return total_count, items

    def _decode_list(self, response):
        """Decode a list answered either directly or wrapped in a `list` member with a message."""
        payload = self._decode(response)
        if "list" in payload:
            payload = payload["list"]
        return MailingList.from_dict(payload)

    def get_lists(self, limit=DEFAULT_LIMIT, skip=DEFAULT_SKIP, address_filter="", timeout=None):
        """List the mailing lists administered by the Mailgun account."""
        params = paging_params(limit, skip)
        if address_filter:
            params["address"] = address_filter

        response = self._request("GET", self._lists_url(), timeout=timeout, params=params)
        return self._decode_page(response, MailingList)

    def create_list(self, prototype, timeout=None):
        """
        Create a mailing list in Mailgun.

        Mailgun answers with the list itself, possibly wrapped in a `list` member
        along with a message.
        """
        response = self._request("POST", self._lists_url(), timeout=timeout, data=list_form(prototype))
        return self._decode_list(response)

    def delete_list(self, address, timeout=None):
        """Delete a mailing list and all its members."""
        self._request("DELETE", self._lists_url(address), timeout=timeout)

    def get_list_by_address(self, address, timeout=None):
        """Retrieve a mailing list by its address."""
        response = self._request("GET", self._lists_url(address), timeout=timeout)
        return MailingList.from_dict(self._decode(response, "list"))

    def update_list(self, address, prototype, timeout=None):
        """Update the fields set in the prototype."""
        response = self._request("PUT", self._lists_url(address), timeout=timeout, data=list_form(prototype))
        return self._decode_list(response)

    def get_subscribers(self, limit=DEFAULT_LIMIT, skip=DEFAULT_SKIP, subscribed=ALL, address="", timeout=None):
        """List the members of a mailing list, optionally filtered on their subscription."""
        params = paging_params(limit, skip)
        if subscribed is not None:
            params["subscribed"] = yes_no(subscribed)

        response = self._request("GET", self._members_url(address), timeout=timeout, params=params)
        return self._decode_page(response, Subscriber)

    def get_subscriber_by_address(self, subscriber_address, list_address, timeout=None):
        """Retrieve a member of a mailing list."""
        response = self._request("GET", self._members_url(list_address, subscriber_address), timeout=timeout)
        return Subscriber.from_dict(self._decode(response, "member"))

    def create_subscriber(self, merge, list_address, prototype, timeout=None):
        """Add a member to a mailing list, updating it on duplicates when `merge` is set."""
        form = [("upsert", yes_no(merge)), *subscriber_form(prototype)]
        self._request("POST", self._members_url(list_address), timeout=timeout, **multipart_payload(form))

    def update_subscriber(self, subscriber_address, list_address, prototype, timeout=None):
        """Update the fields set in the prototype for a member of a mailing list."""
        response = self._request(
            "PUT",
            self._members_url(list_address, subscriber_address),
            timeout=timeout,
            **multipart_payload(subscriber_form(prototype)),
        )
        return Subscriber.from_dict(self._decode(response, "member"))

    def delete_subscriber(self, subscriber_address, list_address, timeout=None):
        """Remove a member from a mailing list."""
        self._request("DELETE", self._members_url(list_address, subscriber_address), timeout=timeout)
