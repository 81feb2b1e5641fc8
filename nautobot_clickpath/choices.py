"""ChoiceSet classes for click-path navigation."""

from nautobot.apps.choices import ChoiceSet


class LinkContainerChoices(ChoiceSet):
    """Well-known rendering zones for navigation links."""

    CONTAINER_MAIN = "main"
    CONTAINER_SHARED = "shared"

    CHOICES = (
        (CONTAINER_MAIN, "Main navigation"),
        (CONTAINER_SHARED, "Shared navigation"),
    )


class AddOutcomeChoices(ChoiceSet):
    """Labels for the outcome of adding a link, as written to the logs."""

    OUTCOME_ACCEPTED = "accepted"
    OUTCOME_DUPLICATE = "duplicate"
    OUTCOME_UNSAFE_PATH = "unsafe-path"
    OUTCOME_UNAUTHORIZED = "unauthorized"

    CHOICES = (
        (OUTCOME_ACCEPTED, "accepted"),
        (OUTCOME_DUPLICATE, "already offered"),
        (OUTCOME_UNSAFE_PATH, "rejected: unsafe path"),
        (OUTCOME_UNAUTHORIZED, "rejected: not authorized"),
    )
