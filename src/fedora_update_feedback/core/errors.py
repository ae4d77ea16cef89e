"""Error types raised across the application."""

from typing import Optional, Sequence


class FeedbackError(Exception):
    """Base class for all fatal run errors."""


class ConfigurationError(FeedbackError):
    """Config file missing, unreadable, malformed or without a username."""


class ParseError(FeedbackError):
    """Malformed package filename or NVR string."""

    def __init__(self, message: str, value: str = "") -> None:
        super().__init__(message)
        self.value = value


class ExternalProcessError(FeedbackError):
    """A local helper command failed to run or produced unusable output."""

    def __init__(self, message: str, command: Optional[Sequence[str]] = None) -> None:
        super().__init__(message)
        self.command = list(command or [])


class RemoteServiceError(FeedbackError):
    """Querying the update-tracking service failed."""


class NotificationError(FeedbackError):
    """A desktop notification could not be displayed."""
