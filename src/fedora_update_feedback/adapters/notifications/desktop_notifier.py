"""Desktop notification adapter."""

import logging
import shutil
import subprocess
from typing import Optional

from fedora_update_feedback.core import NotificationError, NotificationService

logger = logging.getLogger(__name__)


class DesktopNotifier(NotificationService):
    """Show notifications through the freedesktop notify-send helper."""

    def __init__(
        self,
        app_name: str = "fedora-update-feedback",
        icon: str = "dialog-information",
        command: Optional[str] = None,
    ) -> None:
        """Initialize desktop notifier.

        Args:
            app_name: Application name reported to the notification daemon
            icon: Icon name from the desktop icon theme
            command: Notification helper; looked up on PATH when None
        """
        self.app_name = app_name
        self.icon = icon
        self.command = command

    def _find_command(self) -> str:
        command = self.command or shutil.which("notify-send")
        if not command:
            raise NotificationError("notify-send was not found; install libnotify")
        return command

    def send(self, summary: str, body: str) -> None:
        """Display a notification.

        Raises:
            NotificationError: If the helper is missing or fails
        """
        args = [
            self._find_command(),
            f"--app-name={self.app_name}",
            f"--icon={self.icon}",
            summary,
            body,
        ]

        try:
            result = subprocess.run(args, capture_output=True, text=True, check=False)
        except OSError as e:
            raise NotificationError(f"Failed to show notification: {e}") from e

        if result.returncode != 0:
            raise NotificationError(
                f"Failed to show notification: {result.stderr.strip() or f'exit status {result.returncode}'}"
            )

        logger.debug("Notification shown: %s", summary)
