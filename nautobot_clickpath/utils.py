"""Utility functions for the click-path navigation app."""

from django.conf import settings

from nautobot_clickpath.exceptions import MissingConfigSetting

APP_NAME = "nautobot_clickpath"

DEFAULT_SETTINGS = {
    "page_namespace_keys": ["page", "popup"],
    "page_root": "",
    "base_url": "",
    "use_manual_redirect": False,
    "cache_navigation": False,
    "persist_on_response": True,
}


def get_app_setting(name: str):
    """Return an app setting from `PLUGINS_CONFIG`, falling back to the app defaults.

    Args:
        name (str): Name of the setting, one of the keys of `DEFAULT_SETTINGS`.

    Raises:
        MissingConfigSetting: When `name` is not a known setting.
    """
    if name not in DEFAULT_SETTINGS:
        raise MissingConfigSetting(name)
    app_settings = getattr(settings, "PLUGINS_CONFIG", {}).get(APP_NAME, {})
    return app_settings.get(name, DEFAULT_SETTINGS[name])
