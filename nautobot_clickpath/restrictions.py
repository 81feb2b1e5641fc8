"""Capability checks that gate whether a link may be offered to an actor.

A restriction is attached to a `Link` and evaluated once, when the link is added to a
navigation. After that the link is trusted until the navigation is cleared or reloaded.
"""

from abc import ABC, abstractmethod


def _is_active(actor) -> bool:
    """Anonymous or deactivated actors never satisfy a restriction."""
    if actor is None:
        return False
    return bool(getattr(actor, "is_active", True))


class Restriction(ABC):
    """Base class for all link restrictions."""

    @abstractmethod
    def is_allowed_by(self, actor) -> bool:
        """Return True if `actor` satisfies this restriction."""

    def __repr__(self):
        """Short representation for log messages."""
        return f"<{self.__class__.__name__}>"


class GroupRestriction(Restriction):
    """Restrict a link to members of a Django auth group."""

    def __init__(self, group):
        """Store the group the link is restricted to."""
        self.group = group

    def is_allowed_by(self, actor) -> bool:
        """Check the actor's group memberships."""
        if not _is_active(actor):
            return False
        return actor.groups.filter(pk=self.group.pk).exists()

    def __repr__(self):
        """Include the group name."""
        return f"<GroupRestriction: {self.group}>"


class PermissionRestriction(Restriction):
    """Restrict a link to actors holding a Django permission, e.g. `dcim.view_device`."""

    def __init__(self, permission: str):
        """Store the permission string."""
        self.permission = permission

    def is_allowed_by(self, actor) -> bool:
        """Delegate to the actor's permission backends."""
        if not _is_active(actor):
            return False
        return actor.has_perm(self.permission)

    def __repr__(self):
        """Include the permission."""
        return f"<PermissionRestriction: {self.permission}>"


class OwnerRestriction(Restriction):
    """Restrict a link to the owner of an object."""

    def __init__(self, owner):
        """Initialize with the object owner to compare actors against."""
        self.owner = owner

    def is_allowed_by(self, actor) -> bool:
        """Allow an active actor whose primary key matches the owner."""
        if not _is_active(actor):
            return False
        return actor.pk is not None and actor.pk == getattr(self.owner, "pk", None)


class SuperuserRestriction(Restriction):
    """Restrict a link to superusers."""

    def is_allowed_by(self, actor) -> bool:
        """Allow active superusers."""
        if not _is_active(actor):
            return False
        return bool(getattr(actor, "is_superuser", False))
