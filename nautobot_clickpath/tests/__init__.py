"""Unit tests for nautobot_clickpath app."""
