"""Notification payload and console summary formatting."""

from fedora_update_feedback.adapters.digest.payload_builder import (
    NotificationPayload,
    build_feedback_payload,
    build_interesting_payload,
    feedback_url,
    format_feedback_summary,
    format_interesting_summary,
    interests_url,
)

__all__ = [
    "NotificationPayload",
    "build_feedback_payload",
    "build_interesting_payload",
    "feedback_url",
    "format_feedback_summary",
    "format_interesting_summary",
    "interests_url",
]
