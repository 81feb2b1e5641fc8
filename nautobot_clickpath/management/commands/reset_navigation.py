"""Django Management command to reset the stored navigation of users."""

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from nautobot_clickpath.models import NavigationState


class Command(BaseCommand):
    """MGMT command to drop allowed and cached navigation snapshots.

    A user whose snapshot no longer offers any reachable link is stuck on the fallback page;
    resetting the snapshot lets the next page re-derive it.
    """

    help = "Reset the stored click-path navigation of all users, or of the users given with --username."

    def add_arguments(self, parser):  # noqa: D102
        parser.add_argument(
            "-u",
            "--username",
            default=None,
            help="Usernames to limit which navigation states are reset (comma separated).",
        )

    def handle(self, *args, **options):  # noqa: D102
        states = NavigationState.objects.select_related("user")
        username_limit = options.get("username")
        if username_limit:
            usernames = [username.strip() for username in username_limit.split(",")]
            states = states.filter(user__username__in=usernames)
            if not states.exists():
                raise CommandError(f"No navigation state found for {', '.join(usernames)}.")

        with transaction.atomic():
            for state in states:
                state.reset()
                state.validated_save()
                self.stdout.write(f"Reset navigation of {state.user}")
