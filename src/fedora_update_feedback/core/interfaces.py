"""Core interfaces for adapters."""

from abc import ABC, abstractmethod

from fedora_update_feedback.core.entities import UpdateRecord


class ReleaseResolver(ABC):
    """Interface for determining the running distribution release."""

    @abstractmethod
    def get_release(self) -> str:
        """Return the release identifier, e.g. "F40"."""
        pass


class PackageLister(ABC):
    """Interface for listing locally installed packages."""

    @abstractmethod
    def list_installed(self) -> str:
        """Return newline-separated package filenames."""
        pass


class UpdateSource(ABC):
    """Interface for fetching pending updates from the update-tracking service."""

    @abstractmethod
    def fetch_updates(self, release: str) -> list[UpdateRecord]:
        """Fetch updates in testing for the given release."""
        pass


class NotificationService(ABC):
    """Interface for showing notifications to the user."""

    @abstractmethod
    def send(self, summary: str, body: str) -> None:
        """Display a notification with the given summary and body."""
        pass
