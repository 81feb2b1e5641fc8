"""Tests for links and restrictions."""

import unittest
from unittest.mock import MagicMock

from nautobot_clickpath.exceptions import InvalidLinkError
from nautobot_clickpath.links import Link
from nautobot_clickpath.restrictions import (
    GroupRestriction,
    OwnerRestriction,
    PermissionRestriction,
    SuperuserRestriction,
)


class TestLink(unittest.TestCase):
    """Test the Link value object."""

    def test_link_without_name_and_url_is_rejected(self):
        """A link must show something or point somewhere."""
        with self.assertRaises(InvalidLinkError):
            Link(None, None)
        with self.assertRaises(InvalidLinkError):
            Link("", "")

    def test_defaults(self):
        link = Link("Home", "page=common/home")
        self.assertEqual(link.container, "main")
        self.assertEqual(link.position, 0)
        self.assertIsNone(link.description)
        self.assertIsNone(link.restriction)

    def test_hidden_and_head(self):
        self.assertTrue(Link(None, "page=forms/login").is_hidden)
        self.assertTrue(Link("Account", None).is_head)
        self.assertFalse(Link("Home", "page=common/home").is_hidden)

    def test_link_is_immutable(self):
        link = Link("Home", "page=common/home")
        with self.assertRaises(AttributeError):
            link.url = "page=admin"

    def test_to_record(self):
        """Only the snapshot fields are stored."""
        link = Link("Support", "popup=popup/support", "shared", "Report a bug", position=3)
        self.assertEqual(
            link.to_record(),
            {"display_name": "Support", "url": "popup=popup/support", "position": 3, "description": "Report a bug"},
        )

    def test_unrestricted_link_is_allowed_for_anyone(self):
        self.assertTrue(Link("Home", "page=common/home").is_allowed_by(None))


class TestRestrictions(unittest.TestCase):
    """Test the restriction variants."""

    def setUp(self):
        self.actor = MagicMock(is_active=True, is_superuser=False, pk=1)

    def test_group_restriction(self):
        group = MagicMock(pk=7)
        restriction = GroupRestriction(group)
        self.actor.groups.filter.return_value.exists.return_value = True
        self.assertTrue(restriction.is_allowed_by(self.actor))
        self.actor.groups.filter.assert_called_with(pk=7)

        self.actor.groups.filter.return_value.exists.return_value = False
        self.assertFalse(restriction.is_allowed_by(self.actor))

    def test_permission_restriction(self):
        restriction = PermissionRestriction("dcim.view_device")
        self.actor.has_perm.return_value = True
        self.assertTrue(restriction.is_allowed_by(self.actor))
        self.actor.has_perm.assert_called_once_with("dcim.view_device")

    def test_owner_restriction(self):
        self.assertTrue(OwnerRestriction(MagicMock(pk=1)).is_allowed_by(self.actor))
        self.assertFalse(OwnerRestriction(MagicMock(pk=2)).is_allowed_by(self.actor))

    def test_superuser_restriction(self):
        self.assertFalse(SuperuserRestriction().is_allowed_by(self.actor))
        self.actor.is_superuser = True
        self.assertTrue(SuperuserRestriction().is_allowed_by(self.actor))

    def test_anonymous_and_inactive_actors_are_denied(self):
        """No restriction is satisfied without an active actor."""
        restrictions = [
            GroupRestriction(MagicMock(pk=7)),
            PermissionRestriction("dcim.view_device"),
            OwnerRestriction(self.actor),
            SuperuserRestriction(),
        ]
        self.actor.is_active = False
        self.actor.is_superuser = True
        self.actor.has_perm.return_value = True
        for restriction in restrictions:
            self.assertFalse(restriction.is_allowed_by(None), restriction)
            self.assertFalse(restriction.is_allowed_by(self.actor), restriction)

    def test_link_delegates_to_restriction(self):
        restriction = MagicMock()
        restriction.is_allowed_by.return_value = False
        link = Link("Admin", "page=admin/index", restriction=restriction)
        self.assertFalse(link.is_allowed_by(self.actor))
        restriction.is_allowed_by.assert_called_once_with(self.actor)
