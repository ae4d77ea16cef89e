"""Notification payloads and console summaries."""

from dataclasses import dataclass
from typing import Iterable
from urllib.parse import quote

from fedora_update_feedback.core import UpdateRecord

BODHI_WEB_URL = "https://bodhi.fedoraproject.org"

FEEDBACK_SUMMARY = "Installed updates are ready for feedback"
INTERESTING_SUMMARY = "Updates for interesting packages are available"


@dataclass(frozen=True)
class NotificationPayload:
    """Ready-to-send notification text."""

    summary: str
    body: str


def _updates_url(release: str, packages: Iterable[str], base_url: str) -> str:
    package_list = ",".join(quote(name, safe="") for name in packages)
    return (
        f"{base_url.rstrip('/')}/updates/"
        f"?release={quote(release, safe='')}&status=testing&packages={package_list}"
    )


def feedback_url(release: str, packages: list[str], base_url: str = BODHI_WEB_URL) -> str:
    """Build the link listing testing updates for the given installed packages."""
    return _updates_url(release, packages, base_url)


def interests_url(release: str, interests: Iterable[str], base_url: str = BODHI_WEB_URL) -> str:
    """Build the link listing testing updates for all watched packages."""
    return _updates_url(release, sorted(interests), base_url)


def build_feedback_payload(
    release: str, packages: list[str], base_url: str = BODHI_WEB_URL
) -> NotificationPayload:
    return NotificationPayload(
        summary=FEEDBACK_SUMMARY,
        body=feedback_url(release, packages, base_url),
    )


def build_interesting_payload(
    release: str, interests: Iterable[str], base_url: str = BODHI_WEB_URL
) -> NotificationPayload:
    return NotificationPayload(
        summary=INTERESTING_SUMMARY,
        body=interests_url(release, interests, base_url),
    )


def format_feedback_summary(packages: list[str]) -> str:
    """Format the console report for installed packages awaiting feedback."""
    if not packages:
        return "No installed updates are waiting for feedback."

    lines = [f"{FEEDBACK_SUMMARY} ({len(packages)}):"]
    lines.extend(f"  - {name}" for name in packages)
    return "\n".join(lines)


def format_interesting_summary(updates: list[UpdateRecord]) -> str:
    """Format the console report for updates of watched packages."""
    if not updates:
        return "No updates for interesting packages."

    lines = [f"{INTERESTING_SUMMARY} ({len(updates)}):"]
    for update in updates:
        builds = ", ".join(build.nvr for build in update.builds)
        lines.append(f"  - {update.alias}: {builds}")
        # Bodhi defaults the title to the space-separated build list
        if update.title and update.title != " ".join(build.nvr for build in update.builds):
            lines.append(f"    {update.title}")
        if update.url:
            lines.append(f"    {update.url}")
    return "\n".join(lines)
