"""Business logic use cases."""

import logging
import time
from typing import Optional

from fedora_update_feedback.adapters.digest import (
    NotificationPayload,
    build_feedback_payload,
    build_interesting_payload,
    format_feedback_summary,
    format_interesting_summary,
)
from fedora_update_feedback.adapters.sources.filters import has_commented, is_authored_by
from fedora_update_feedback.config import Settings
from fedora_update_feedback.core import (
    ClassificationResult,
    NotificationError,
    NotificationService,
    PackageIdentifier,
    PackageLister,
    ParseError,
    ReleaseResolver,
    UpdateRecord,
    UpdateSource,
    build_inventory,
    parse_nvr,
)

logger = logging.getLogger(__name__)


class UpdateClassifier:
    """Match updates in testing against the local package inventory."""

    def __init__(self, settings: Settings) -> None:
        self.username = settings.username
        self.interests = settings.interests
        self.strict_parsing = settings.strict_parsing

    def relevant_updates(self, updates: list[UpdateRecord]) -> list[UpdateRecord]:
        """Drop updates the user submitted or already commented on."""
        not_own = [u for u in updates if not is_authored_by(u, self.username)]
        relevant = [u for u in not_own if not has_commented(u, self.username)]

        logger.debug(
            "%d updates total, %d not submitted by %s, %d without their comments",
            len(updates), len(not_own), self.username, len(relevant),
        )
        return relevant

    def classify(
        self, inventory: frozenset[PackageIdentifier], updates: list[UpdateRecord]
    ) -> ClassificationResult:
        relevant = self.relevant_updates(updates)
        return ClassificationResult(
            feedback_pending=self.feedback_pending(inventory, relevant),
            interesting_pending=self.interesting_pending(inventory, relevant),
        )

    def feedback_pending(
        self, inventory: frozenset[PackageIdentifier], relevant: list[UpdateRecord]
    ) -> list[str]:
        """Names of packages from updates that are already installed here.

        One installed build is enough to pull in the names of every build of
        that update.
        """
        candidates: list[str] = []

        for update in relevant:
            nvrs = self._parse_builds(update)
            if any(nvr in inventory for nvr in nvrs):
                candidates.extend(nvr.name for nvr in nvrs)

        return sorted(set(candidates))

    def interesting_pending(
        self, inventory: frozenset[PackageIdentifier], relevant: list[UpdateRecord]
    ) -> list[UpdateRecord]:
        """Updates of watched packages that are installed by name but not yet updated.

        Decisions are made per update, not per build: a single build that is
        installed excludes the update, and a single build that is installed by
        name or watched sets the respective flag for the whole update.
        """
        installed_names = {package.name for package in inventory}
        selected: dict[str, UpdateRecord] = {}

        for update in relevant:
            pending_nvrs = self._parse_builds(update)

            if any(nvr in inventory for nvr in pending_nvrs):
                continue

            is_installed = any(nvr.name in installed_names for nvr in pending_nvrs)
            is_interesting = any(nvr.name in self.interests for nvr in pending_nvrs)

            if is_installed and is_interesting:
                selected.setdefault(update.alias, update)

        return [selected[alias] for alias in sorted(selected)]

    def _parse_builds(self, update: UpdateRecord) -> list[PackageIdentifier]:
        nvrs: list[PackageIdentifier] = []

        for build in update.builds:
            try:
                nvrs.append(parse_nvr(build.nvr))
            except ParseError as e:
                if self.strict_parsing:
                    raise ParseError(f"Update {update.alias}: {e}", build.nvr) from e
                logger.warning("Ignoring build %r of %s: %s", build.nvr, update.alias, e)

        return nvrs


class FeedbackService:
    """Run one check: collect packages and updates, report and notify."""

    def __init__(
        self,
        settings: Settings,
        release_resolver: ReleaseResolver,
        package_lister: PackageLister,
        update_source: UpdateSource,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.settings = settings
        self.release_resolver = release_resolver
        self.package_lister = package_lister
        self.update_source = update_source
        self.notification_service = notification_service
        self.classifier = UpdateClassifier(settings)

    def resolve_release(self) -> str:
        if self.settings.release:
            return self.settings.release
        return self.release_resolver.get_release()

    def collect_inventory(self) -> frozenset[PackageIdentifier]:
        raw_output = self.package_lister.list_installed()
        return build_inventory(raw_output, strict=self.settings.strict_parsing)

    def run(self) -> ClassificationResult:
        """Execute the check and return what was found."""
        release = self.resolve_release()
        logger.info("Checking updates in testing for %s", release)

        inventory = self.collect_inventory()
        updates = self.update_source.fetch_updates(release)
        result = self.classifier.classify(inventory, updates)

        print(format_feedback_summary(result.feedback_pending))
        print()
        print(format_interesting_summary(result.interesting_pending))

        self.send_notifications(release, result)
        return result

    def send_notifications(self, release: str, result: ClassificationResult) -> None:
        """Send one notification per non-empty result, spaced by the configured delay."""
        if not self.notification_service or not self.settings.notifications.enabled:
            return
        if result.is_empty:
            logger.info("Nothing to notify about")
            return

        payloads: list[NotificationPayload] = []
        if result.feedback_pending:
            payloads.append(
                build_feedback_payload(release, result.feedback_pending, self.settings.bodhi_url)
            )
        if result.interesting_pending:
            payloads.append(
                build_interesting_payload(release, self.settings.interests, self.settings.bodhi_url)
            )

        for i, payload in enumerate(payloads):
            if i > 0:
                # The notification daemon drops bursts sent back to back
                time.sleep(self.settings.notification_delay)
            self._send(payload)

    def _send(self, payload: NotificationPayload) -> None:
        try:
            self.notification_service.send(payload.summary, payload.body)
        except NotificationError as e:
            if self.settings.strict_notifications:
                raise
            logger.warning("Notification not shown: %s", e)
