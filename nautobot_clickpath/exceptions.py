"""Custom Exceptions raised by the click-path navigation engine."""


class ConfigurationError(Exception):
    """Exception thrown when the app or engine is configured incorrectly."""


class InvalidLinkError(ValueError):
    """Raised when a link carries neither a display name nor a URL."""


class OutputSinkUnavailable(ConfigurationError):
    """Raised when an inline link is requested but the engine has no output sink.

    Attributes:
        message (str): Returned explanation of Error.
    """

    def __init__(self, url):
        """Initialize Exception with the URL of the link that could not be rendered."""
        self.url = url
        self.message = f"Cannot render inline link to '{url}': no output sink was configured for this navigation!"
        super().__init__(self.message)


class MissingConfigSetting(ConfigurationError):
    """Exception raised for unknown app configuration settings.

    Attributes:
        message (str): Returned explanation of Error.
    """

    def __init__(self, setting):
        """Initialize Exception with Setting that is missing and message."""
        self.setting = setting
        self.message = f"Missing configuration setting - {setting}!"
        super().__init__(self.message)
