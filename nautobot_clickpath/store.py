"""Persistence bindings used by the navigation engine.

The engine only talks to the two interfaces defined here, `SessionLinkStore` and
`TransactionGateway`. The Django implementations below back them with the
`NavigationState` model and `django.db.transaction`.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from django.db import DEFAULT_DB_ALIAS, transaction

from nautobot_clickpath.models import NavigationState
from nautobot_clickpath.types import Snapshot

logger = logging.getLogger("nautobot.clickpath")


class SessionLinkStore(ABC):
    """Reads and writes the navigation snapshots of one actor."""

    @abstractmethod
    def read_allowed_navs(self):
        """Return the stored allowed-navigation snapshot, as stored."""

    @abstractmethod
    def write_allowed_navs(self, records: Snapshot):
        """Replace the allowed-navigation snapshot."""

    @abstractmethod
    def read_cached_navs(self):
        """Return the stored cache snapshot, as stored."""

    @abstractmethod
    def write_cached_navs(self, records: Snapshot):
        """Replace the cache snapshot."""

    @abstractmethod
    def flush(self):
        """Make pending writes durable."""


class TransactionGateway(ABC):
    """Access to the surrounding database transaction."""

    @abstractmethod
    def is_transaction_active(self) -> bool:
        """Return True if a transaction is open and waiting for a commit."""

    @abstractmethod
    def commit(self):
        """Commit the open transaction."""


class ORMSessionLinkStore(SessionLinkStore):
    """`SessionLinkStore` backed by the `NavigationState` row of a user.

    Writes are buffered on the model instance and only reach the database on `flush()`.
    """

    def __init__(self, actor):
        """Bind the store to `actor`; the row is looked up lazily."""
        self.actor = actor
        self._state: Optional[NavigationState] = None
        self._dirty = False

    @property
    def state(self) -> NavigationState:
        """The actor's NavigationState, created on first access."""
        if self._state is None:
            self._state, created = NavigationState.objects.get_or_create(user=self.actor)
            if created:
                logger.debug("Created navigation state for %s", self.actor)
        return self._state

    def read_allowed_navs(self):
        """Return the `allowed_navs` field of the row."""
        return self.state.allowed_navs

    def write_allowed_navs(self, records: Snapshot):
        """Buffer a new `allowed_navs` value; an unchanged snapshot leaves the row clean."""
        records = list(records)
        if records != self.state.allowed_navs:
            self.state.allowed_navs = records
            self._dirty = True

    def read_cached_navs(self):
        """Return the `allowed_navs_cache` field of the row."""
        return self.state.allowed_navs_cache

    def write_cached_navs(self, records: Snapshot):
        """Buffer a new `allowed_navs_cache` value; an unchanged snapshot leaves the row clean."""
        records = list(records)
        if records != self.state.allowed_navs_cache:
            self.state.allowed_navs_cache = records
            self._dirty = True

    def flush(self):
        """Save the NavigationState row if anything was written since the last flush."""
        if not self._dirty:
            return
        self.state.validated_save()
        self._dirty = False


class DjangoTransactionGateway(TransactionGateway):
    """`TransactionGateway` on top of `django.db.transaction`.

    A transaction counts as active when autocommit is off. Django refuses a manual commit
    inside an `atomic()` block and raises `TransactionManagementError`, which propagates.
    """

    def __init__(self, using: Optional[str] = None):
        """Bind the gateway to the `using` database alias, `default` if omitted."""
        self.using = using or DEFAULT_DB_ALIAS

    def is_transaction_active(self) -> bool:
        """Return True when autocommit is off."""
        return not transaction.get_autocommit(using=self.using)

    def commit(self):
        """Commit on the bound database."""
        logger.debug("Committing transaction on %s", self.using)
        transaction.commit(using=self.using)
