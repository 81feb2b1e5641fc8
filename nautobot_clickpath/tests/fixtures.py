"""Create fixtures for tests."""

from django.contrib.auth import get_user_model

from nautobot_clickpath.restrictions import Restriction
from nautobot_clickpath.store import SessionLinkStore, TransactionGateway

User = get_user_model()


class InMemoryLinkStore(SessionLinkStore):
    """SessionLinkStore keeping snapshots in memory and recording every call in `events`."""

    def __init__(self, allowed_navs=None, cached_navs=None, events=None):
        self.allowed_navs = allowed_navs
        self.cached_navs = cached_navs
        self.events = events if events is not None else []

    def read_allowed_navs(self):
        self.events.append("read_allowed_navs")
        return self.allowed_navs

    def write_allowed_navs(self, records):
        self.events.append("write_allowed_navs")
        self.allowed_navs = list(records)

    def read_cached_navs(self):
        self.events.append("read_cached_navs")
        return self.cached_navs

    def write_cached_navs(self, records):
        self.events.append("write_cached_navs")
        self.cached_navs = list(records)

    def flush(self):
        self.events.append("flush")


class RecordingTransactions(TransactionGateway):
    """TransactionGateway recording commits in `events`."""

    def __init__(self, active=True, events=None, error=None):
        self.active = active
        self.error = error
        self.events = events if events is not None else []

    def is_transaction_active(self):
        return self.active

    def commit(self):
        if self.error:
            raise self.error
        self.events.append("commit")
        self.active = False


class StaticRestriction(Restriction):
    """Restriction with a fixed answer."""

    def __init__(self, allowed):
        self.allowed = allowed

    def is_allowed_by(self, actor):
        return self.allowed


def create_users():
    """Fixture to create the users used by database tests."""
    alice = User.objects.create(username="alice", is_active=True)
    bob = User.objects.create(username="bob", is_active=True)
    return alice, bob
