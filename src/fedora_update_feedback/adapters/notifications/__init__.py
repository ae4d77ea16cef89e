"""Notification adapters."""

from fedora_update_feedback.adapters.notifications.desktop_notifier import DesktopNotifier

__all__ = ["DesktopNotifier"]
