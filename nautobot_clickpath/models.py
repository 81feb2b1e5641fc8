"""
Django Models for persisting the navigation a user is allowed to follow.

Each user owns at most one NavigationState row:

- `allowed_navs` holds the snapshot of links offered by the last rendered page. The next
  request is only authorized if its URL appears in this list.
- `allowed_navs_cache` holds an optional secondary snapshot. It is only written when the
  navigation asked for it, and it is replayed as-is by `NavigationEngine.load_from_cache()`.

Both are whole-list replacements: the last request to write wins.

User 1<->1 NavigationState
"""

import logging

from django.conf import settings
from django.db import models
from nautobot.apps.models import BaseModel

logger = logging.getLogger(__name__)


class NavigationState(BaseModel):  # pylint: disable=nb-string-field-blank-null
    """Persisted click-path state of a single user."""

    user = models.OneToOneField(
        to=settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="navigation_state",
    )
    allowed_navs = models.JSONField(
        default=list,
        blank=True,
        help_text="Links offered by the last rendered page",
        verbose_name="Allowed Navigation",
    )
    allowed_navs_cache = models.JSONField(
        blank=True,
        null=True,
        help_text="Cached copy of the allowed navigation, replayed without re-authorization",
        verbose_name="Cached Navigation",
    )
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        """Metaclass attributes of NavigationState model."""

        ordering = ["user"]
        verbose_name = "Navigation State"
        verbose_name_plural = "Navigation States"

    def __str__(self):
        """String representation of a NavigationState instance."""
        return f"Navigation of {self.user}"

    def reset(self):
        """Drop both snapshots."""
        self.allowed_navs = []
        self.allowed_navs_cache = None
