"""Shared filtering utilities for update records."""

from fedora_update_feedback.core import UpdateRecord


def is_authored_by(update: UpdateRecord, username: str) -> bool:
    """Check if the update was submitted by the user."""
    return update.user == username


def has_commented(update: UpdateRecord, username: str) -> bool:
    """
    Check if the user already left a comment on the update.

    Args:
        update: Update to inspect
        username: Identity to look for among comment authors

    Returns:
        True if any comment was written by ``username``; updates without
        comments never match
    """
    if not update.comments:
        return False
    return any(comment.user == username for comment in update.comments)
