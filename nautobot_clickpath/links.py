"""Link value objects offered to the user by a navigation."""

from dataclasses import dataclass
from typing import Optional

from nautobot_clickpath.choices import LinkContainerChoices
from nautobot_clickpath.exceptions import InvalidLinkError
from nautobot_clickpath.restrictions import Restriction
from nautobot_clickpath.types import LinkRecord


@dataclass(frozen=True)
class Link:
    """A single navigable destination.

    Headers have no `url`, hidden links (e.g. form targets) have no `display_name`. A link
    needs at least one of the two.

    Example:
        ```python
        Link("Support", "popup=popup/support", "shared", "Report a problem with this page")
        ```
    """

    display_name: Optional[str]
    url: Optional[str] = None
    container: str = LinkContainerChoices.CONTAINER_MAIN
    description: Optional[str] = None
    position: int = 0
    restriction: Optional[Restriction] = None

    def __post_init__(self):
        """Reject links that point nowhere and show nothing."""
        if not self.display_name and not self.url:
            raise InvalidLinkError("A link needs a display name, a URL, or both.")

    @property
    def is_hidden(self) -> bool:
        """Hidden links authorize a URL without being shown in any menu."""
        return not self.display_name

    @property
    def is_head(self) -> bool:
        """Section headers are shown but cannot be followed."""
        return not self.url

    def is_allowed_by(self, actor) -> bool:
        """Return True if the link carries no restriction or `actor` satisfies it."""
        if self.restriction is None:
            return True
        return self.restriction.is_allowed_by(actor)

    def to_record(self) -> LinkRecord:
        """Build the snapshot entry stored for this link."""
        return LinkRecord(
            display_name=self.display_name or None,
            url=self.url or None,
            position=self.position,
            description=self.description,
        )
