class ActivityConsoleError(Exception):
    """Base class for errors raised by activity-console."""


class ConfigurationError(ActivityConsoleError):
    """Settings could not be loaded or failed validation."""


class UpstreamFetchError(ActivityConsoleError):
    """The upstream activity service could not be reached."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Unable to fetch activity from {url}: {reason}")
        self.url = url
        self.reason = reason
