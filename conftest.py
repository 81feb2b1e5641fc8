"""Pytest bootstrap: load the development Nautobot config before tests are collected."""

import os

import nautobot

os.environ.setdefault("NAUTOBOT_CONFIG", os.path.join(os.path.dirname(__file__), "development", "nautobot_config.py"))
nautobot.setup()
