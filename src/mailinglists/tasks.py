"""Mailing lists tasks module."""

import logging

from celery import shared_task

from mailinglists import mailing_lists
from mailinglists.backends import Subscriber

logger = logging.getLogger(__name__)


@shared_task
def create_subscriber(
    list_address: str,
    address: str,
    name: str | None = None,
    vars: dict | None = None,  # noqa: A002
    subscribed: bool | None = None,
    merge: bool = True,
    timeout: int = None,
):
    """Add a member to a mailing list."""
    subscriber = Subscriber(address=address, name=name, subscribed=subscribed, vars=vars)
    logger.info("Adding %s to mailing list %s", address, list_address)
    return mailing_lists.create_subscriber(merge, list_address, subscriber, timeout)


@shared_task
def update_subscriber(
    list_address: str,
    subscriber_address: str,
    name: str | None = None,
    vars: dict | None = None,  # noqa: A002
    subscribed: bool | None = None,
    timeout: int = None,
):
    """Update a member of a mailing list."""
    subscriber = Subscriber(name=name, subscribed=subscribed, vars=vars)
    logger.info("Updating %s in mailing list %s", subscriber_address, list_address)
    # a Subscriber is not serializable as a task result
    mailing_lists.update_subscriber(subscriber_address, list_address, subscriber, timeout)
