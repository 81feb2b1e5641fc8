"""Test NavigationState."""

from django.db import IntegrityError
from nautobot.apps.testing import TestCase

from nautobot_clickpath.models import NavigationState
from nautobot_clickpath.tests import fixtures


class TestNavigationState(TestCase):
    """Test NavigationState."""

    def setUp(self):
        """Create test users."""
        self.alice, _ = fixtures.create_users()

    def test_create_navigation_state_only_required(self):
        """Create with only required fields, and validate defaults and __str__."""
        state = NavigationState.objects.create(user=self.alice)
        self.assertEqual(state.allowed_navs, [])
        self.assertIsNone(state.allowed_navs_cache)
        self.assertEqual(str(state), "Navigation of alice")
        self.assertEqual(self.alice.navigation_state, state)

    def test_one_state_per_user(self):
        NavigationState.objects.create(user=self.alice)
        with self.assertRaises(IntegrityError):
            NavigationState.objects.create(user=self.alice)

    def test_reset(self):
        records = [{"display_name": "Home", "url": "page=home", "position": 0, "description": None}]
        state = NavigationState.objects.create(user=self.alice, allowed_navs=records, allowed_navs_cache=records)
        state.reset()
        state.validated_save()
        state.refresh_from_db()
        self.assertEqual(state.allowed_navs, [])
        self.assertIsNone(state.allowed_navs_cache)
