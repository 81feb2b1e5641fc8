"""Tests for the page path validator."""

import os
import tempfile
import unittest

from nautobot_clickpath.validators import PagePathValidator


class TestPagePathValidator(unittest.TestCase):
    """Test PagePathValidator."""

    def setUp(self):
        self.validator = PagePathValidator()

    def test_valid_urls(self):
        for url in ["page=common/home", "?page=common/home", "popup=popup/support", "page=forms/login&op=submit"]:
            with self.subTest(url=url):
                self.assertTrue(self.validator.validate(url))

    def test_missing_or_empty_page(self):
        for url in [None, "", "op=submit", "page=", "?"]:
            with self.subTest(url=url):
                self.assertFalse(self.validator.validate(url))

    def test_traversal_and_unsafe_characters(self):
        for url in [
            "page=../secret",
            "page=common/../../secret",
            "page=/etc/passwd",
            "page=common\\home",
            "page=common/home%00",
            "page=common home",
            "page=common/home%0A",
            "page=common/home\n",
        ]:
            with self.subTest(url=url):
                self.assertFalse(self.validator.validate(url))

    def test_every_namespace_value_is_checked(self):
        for url in [
            "page=common/home&popup=../../etc/passwd",
            "popup=popup/support&page=/etc/passwd",
            "page=common/home&op=submit&popup=common/home%0A",
        ]:
            with self.subTest(url=url):
                self.assertFalse(self.validator.validate(url))
        self.assertTrue(self.validator.validate("page=common/home&popup=popup/support"))

    def test_repeated_namespace_key(self):
        for url in ["page=common/home&page=../../etc/passwd", "page=common/home&page=common/forge"]:
            with self.subTest(url=url):
                self.assertFalse(self.validator.validate(url))

    def test_page_paths(self):
        self.assertEqual(
            self.validator.page_paths("?page=common/home&op=submit&popup=popup/support"),
            [("page", "common/home"), ("popup", "popup/support")],
        )

    def test_inner_dotdot_that_stays_inside_is_allowed(self):
        self.assertTrue(self.validator.validate("page=common/../admin/index"))

    def test_custom_namespace_keys(self):
        validator = PagePathValidator(namespace_keys=["view"])
        self.assertTrue(validator.validate("view=device/list"))
        self.assertFalse(validator.validate("page=device/list"))

    def test_page_root(self):
        with tempfile.TemporaryDirectory() as page_root, tempfile.TemporaryDirectory() as outside:
            os.symlink(outside, os.path.join(page_root, "escape"))
            validator = PagePathValidator(page_root=page_root)
            self.assertTrue(validator.validate("page=common/home"))
            self.assertFalse(validator.validate("page=common/../../outside"))
            self.assertFalse(validator.validate("page=escape/secret"))
