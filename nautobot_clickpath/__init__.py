"""App declaration for nautobot_clickpath."""

import logging
from importlib import metadata

from nautobot.extras.plugins import NautobotAppConfig

from nautobot_clickpath.utils import DEFAULT_SETTINGS

logger = logging.getLogger("nautobot.clickpath")
__version__ = metadata.version(__name__)


class NautobotClickPathAppConfig(NautobotAppConfig):
    """App configuration for the nautobot_clickpath app."""

    name = "nautobot_clickpath"
    verbose_name = "Click-Path Navigation"
    version = __version__
    author = "Network to Code, LLC"
    description = "Nautobot app that only lets users follow navigation links they were offered, and persists the offered links per user."
    base_url = "clickpath"
    required_settings = []
    min_version = "2.1.0"
    max_version = "2.9999"
    default_settings = dict(DEFAULT_SETTINGS)
    middleware = ["nautobot_clickpath.middleware.ClickPathMiddleware"]
    caching_config = {}

    def ready(self):
        """Log once the app is loaded."""
        super().ready()
        logger.debug("Click-path navigation ready (version %s)", self.version)


config = NautobotClickPathAppConfig  # pylint:disable=invalid-name
