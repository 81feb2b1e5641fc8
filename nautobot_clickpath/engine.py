"""Click-path navigation engine.

A `NavigationEngine` collects the links a page offers to the current user, persists them at
the end of the request, and on the next request checks that the requested URL was one of
them. Following a link consumes the whole set the previous page offered, so navigation is a
forward-only chain of grants.

Typical use in a page handler:

```python
nav = NavigationEngine(request.user, request=request)
nav.load_state()
if not nav.check_request_url():
    return nav.redirect("page=common/home")
nav.add_link("Back", "page=common/home")
...
nav.save()
nav.flush()
```

`ClickPathMiddleware` and the `require_offered_link` decorator wrap this flow.
"""

import logging
from typing import Optional

from django.http import HttpResponse, HttpResponseRedirect
from django.utils.html import format_html

from nautobot_clickpath.choices import AddOutcomeChoices, LinkContainerChoices
from nautobot_clickpath.exceptions import OutputSinkUnavailable
from nautobot_clickpath.links import Link
from nautobot_clickpath.output import OutputSink, render_anchor
from nautobot_clickpath.registry import LinkRegistry
from nautobot_clickpath.request import get_referer_url, get_request_url
from nautobot_clickpath.restrictions import Restriction
from nautobot_clickpath.store import DjangoTransactionGateway, ORMSessionLinkStore, SessionLinkStore, TransactionGateway
from nautobot_clickpath.types import Snapshot
from nautobot_clickpath.utils import get_app_setting
from nautobot_clickpath.validators import PagePathValidator

logger = logging.getLogger("nautobot.clickpath")
audit_logger = logging.getLogger("nautobot.clickpath.audit")

REDIRECT_LINK_NAME = "Redirection"


def _is_snapshot(value) -> bool:
    """A usable snapshot is a list of mappings."""
    return isinstance(value, list) and all(isinstance(entry, dict) for entry in value)


def _describe(link: Link) -> str:
    if link.is_hidden:
        return "Hidden link"
    if link.is_head:
        return "Header"
    return "Link"


class NavigationEngine:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """Registry of offered links for one actor and one request.

    Args:
        actor: the user the navigation authorizes, or None for public pages. Validation is
            enabled by default iff an actor is bound.
        request: the Django request, used to read the requested URL and the referer.
        output (OutputSink): where inline text links are written.
        store (SessionLinkStore): snapshot persistence, defaults to the actor's `NavigationState`.
        transactions (TransactionGateway): commit boundary used by `redirect()`.
        validator (PagePathValidator): path-safety check for link URLs.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        actor=None,
        request=None,
        output: Optional[OutputSink] = None,
        store: Optional[SessionLinkStore] = None,
        transactions: Optional[TransactionGateway] = None,
        validator: Optional[PagePathValidator] = None,
    ):
        """Initialize the engine with an empty registry."""
        self.actor = actor
        self.request = request
        self.output = output
        self.registry = LinkRegistry()
        self.cache_navigation = False
        self._last_add_outcome = False
        self._validation_enabled = False

        if actor is not None and store is None:
            store = ORMSessionLinkStore(actor)
        self.store = store
        self._transactions = transactions
        self._validator = validator

        if self.actor is None:
            self.disable_validation()
        else:
            self.enable_validation()

    @classmethod
    def for_request(cls, request, output: Optional[OutputSink] = None):
        """Build an engine bound to the authenticated user of `request`, configured from the app settings."""
        user = getattr(request, "user", None)
        actor = user if user is not None and user.is_authenticated else None
        engine = cls(actor=actor, request=request, output=output)
        engine.cache_navigation = get_app_setting("cache_navigation")
        return engine

    @property
    def transactions(self) -> TransactionGateway:
        """The transaction gateway, Django's default database unless one was given."""
        if self._transactions is None:
            self._transactions = DjangoTransactionGateway()
        return self._transactions

    @property
    def validator(self) -> PagePathValidator:
        """The path validator, built from the app settings unless one was given."""
        if self._validator is None:
            self._validator = PagePathValidator.from_settings()
        return self._validator

    @property
    def last_add_outcome(self) -> bool:
        """Outcome of the most recent `add()`."""
        return self._last_add_outcome

    def __repr__(self):
        """Show the actor and the number of offered links."""
        return f"<NavigationEngine actor={self.actor} links={len(self.registry)}>"

    #
    # Validation flag
    #

    def enable_validation(self):
        """Check path safety and restrictions on `add()`."""
        self._validation_enabled = True

    def disable_validation(self):
        """Accept every link with a URL."""
        self._validation_enabled = False

    def validation_enabled(self) -> bool:
        """Return True if validation is enabled."""
        return self._validation_enabled

    #
    # Adding and removing links
    #

    def add(self, link: Link, absolute_position: Optional[int] = None) -> bool:
        """Offer `link` to the actor.

        Args:
            link (Link): the link to offer.
            absolute_position (int): optional 1-based position to insert the link at.

        Returns:
            bool: True if the link is now offered (including when it already was), False if
                it failed the path-safety check or its restriction.
        """
        if self.validation_enabled() and link.url and not self.validator.validate(link.url):
            return self._set_outcome(link, AddOutcomeChoices.OUTCOME_UNSAFE_PATH)

        if self.registry.exists(link.display_name, link.url):
            return self._set_outcome(link, AddOutcomeChoices.OUTCOME_DUPLICATE)

        if not self.validation_enabled() or link.is_allowed_by(self.actor):
            self.registry.insert(link.to_record(), absolute_position)
            return self._set_outcome(link, AddOutcomeChoices.OUTCOME_ACCEPTED)

        return self._set_outcome(link, AddOutcomeChoices.OUTCOME_UNAUTHORIZED)

    def _set_outcome(self, link: Link, outcome: str) -> bool:
        accepted = outcome in (AddOutcomeChoices.OUTCOME_ACCEPTED, AddOutcomeChoices.OUTCOME_DUPLICATE)
        if not accepted:
            logger.debug(
                "%s %r (%s) %s for %s",
                _describe(link),
                link.display_name,
                link.url,
                dict(AddOutcomeChoices.CHOICES)[outcome],
                self.actor,
            )
        self._last_add_outcome = accepted
        return accepted

    def add_head(
        self, title: str, container: str = LinkContainerChoices.CONTAINER_MAIN, restriction: Optional[Restriction] = None
    ):
        """Add a section header."""
        self.add(Link(title, None, container, restriction=restriction))
        return self

    def add_link(  # pylint: disable=too-many-arguments
        self,
        name: str,
        url: str,
        container: str = LinkContainerChoices.CONTAINER_MAIN,
        restriction: Optional[Restriction] = None,
        description: Optional[str] = None,
    ):
        """Add a visible link."""
        self.add(Link(name, url, container, description, restriction=restriction))
        return self

    def add_hidden_link(self, url: str, restriction: Optional[Restriction] = None):
        """Authorize `url` without showing it in a menu, e.g. the target of an HTML form."""
        self.add(Link(None, url, restriction=restriction))
        return self

    def add_text_link(self, text: str, url: str, restriction: Optional[Restriction] = None):
        """Authorize `url` and write an anchor for it into the output sink.

        Raises:
            OutputSinkUnavailable: if the link was accepted but the engine has no output sink.
        """
        self.add_hidden_link(url, restriction)
        if self.last_add_outcome:
            if self.output is None:
                raise OutputSinkUnavailable(url)
            self.output.output(render_anchor(text, url), raw=True)
        return self

    def remove(self, key: str) -> int:
        """Remove every offered link whose display name or URL is `key`."""
        return self.registry.remove(key)

    def clear(self):
        """Forget every offered link."""
        self.registry.clear()

    def get_link_list(self) -> Snapshot:
        """Return the offered links in order."""
        return self.registry.records

    #
    # Request validation
    #

    def get_request_url(self) -> Optional[str]:
        """Return the navigation URL of the bound request."""
        return get_request_url(self.request)

    def get_referer_url(self) -> Optional[str]:
        """Return the referer of the bound request."""
        return get_referer_url(self.request)

    def check_request_url(self, url: Optional[str] = None, keep_registry: bool = False) -> Optional[str]:
        """Check that `url` (default: the requested URL) was offered before.

        On success the offered links are consumed, unless `keep_registry` is set.

        Returns:
            str: the authorized URL, or None if it was never offered.
        """
        if not url:
            url = self.get_request_url()
        if not url or not self.registry.exists(url=url):
            return None

        audit_logger.debug("Open %s", url, extra={"actor": str(self.actor)})
        if not keep_registry:
            self.clear()
        return url

    #
    # Persistence
    #

    def load_state(self):
        """Load the actor's allowed navigation; public navigation always starts empty."""
        if self.actor is None:
            self.registry.clear()
            return
        snapshot = self.store.read_allowed_navs()
        if _is_snapshot(snapshot):
            self.registry.replace(snapshot)
        else:
            self.registry.clear()

    def load_from_cache(self):
        """Replay the cached navigation without re-checking restrictions, then save it.

        Caching stays disabled for the rest of the request so the cache is not read back again.
        Public navigation has no cache and loads empty.
        """
        if self.actor is None:
            self.registry.clear()
            self.cache_navigation = False
            return
        snapshot = self.store.read_cached_navs()
        self.registry.replace(snapshot if _is_snapshot(snapshot) else [])
        self.cache_navigation = False
        self.save()

    def save(self):
        """Write the offered links as the actor's allowed navigation; no-op for public navigation."""
        if self.actor is None:
            return
        records = self.registry.records
        self.store.write_allowed_navs(records)
        if self.cache_navigation:
            self.store.write_cached_navs(records)

    def flush(self):
        """Make saved snapshots durable."""
        if self.actor is None:
            return
        self.store.flush()

    #
    # Redirect
    #

    def redirect(self, target_url: str) -> HttpResponse:
        """Offer `target_url`, make all pending writes durable, then redirect the client to it.

        Flush and commit errors propagate, and no response is built for uncommitted state.
        """
        self.add(Link(REDIRECT_LINK_NAME, target_url))
        self.save()
        self.flush()
        if self.transactions.is_transaction_active():
            self.transactions.commit()

        location = f"{self._base_url()}?{target_url}"
        logger.info("Redirecting %s to %s", self.actor, location)
        if get_app_setting("use_manual_redirect"):
            return HttpResponse(format_html("Forward to {} <br /><a href='{}'>Continue</a>", target_url, location))
        return HttpResponseRedirect(location)

    def _base_url(self) -> str:
        base_url = get_app_setting("base_url")
        if base_url:
            return base_url
        if self.request is not None:
            return self.request.path
        return "/"
