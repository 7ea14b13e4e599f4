"""Factories for the mailing lists records."""

import factory

from mailinglists.backends import MailingList, Subscriber
from mailinglists.enums import AccessLevel


class MailingListFactory(factory.Factory):
    """A factory to build mailing lists as returned by the API."""

    class Meta:  # noqa: D106
        model = MailingList

    address = factory.Sequence(lambda n: f"list{n}@lists.example.com")
    name = factory.Faker("catch_phrase")
    description = factory.Faker("sentence")
    access_level = AccessLevel.EVERYONE.value
    created_at = "Tue, 06 Mar 2012 05:44:45 GMT"
    members_count = 0


class SubscriberFactory(factory.Factory):
    """A factory to build mailing list members as returned by the API."""

    class Meta:  # noqa: D106
        model = Subscriber

    address = factory.Faker("email")
    name = factory.Faker("name")
    subscribed = True
    vars = factory.Dict({"age": 26})
