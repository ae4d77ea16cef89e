"""CLI entry point for fedora-update-feedback."""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from fedora_update_feedback.adapters.notifications import DesktopNotifier
from fedora_update_feedback.adapters.packages import DnfPackageLister, RpmReleaseResolver
from fedora_update_feedback.adapters.sources import BodhiSource
from fedora_update_feedback.config import get_settings, with_overrides
from fedora_update_feedback.core import FeedbackError
from fedora_update_feedback.use_cases import FeedbackService

logger = logging.getLogger(__name__)


def main(
    username: Optional[str] = typer.Option(
        None, "--username", "-u", help="FAS username (overrides the config file)"
    ),
    interest: Optional[List[str]] = typer.Option(
        None, "--interest", "-i", help="Package to watch; added to the configured interests"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the YAML config file"
    ),
    release: Optional[str] = typer.Option(
        None, "--release", help="Release to check, e.g. F40 (default: detected with rpm)"
    ),
    no_notify: bool = typer.Option(False, "--no-notify", help="Only print, do not notify"),
    lenient: bool = typer.Option(
        False, "--lenient", help="Skip unparseable package names instead of failing"
    ),
    ignore_notification_errors: bool = typer.Option(
        False, "--ignore-notification-errors", help="Warn instead of failing when a notification cannot be shown"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Notify about installed Fedora updates in testing that wait for your feedback."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = get_settings(
            config_path=config,
            username=username,
            interests=interest or [],
            release=release,
        )
        settings = with_overrides(
            settings,
            strict_parsing=False if lenient else None,
            strict_notifications=False if ignore_notification_errors else None,
            notify=False if no_notify else None,
        )

        service = FeedbackService(
            settings=settings,
            release_resolver=RpmReleaseResolver(),
            package_lister=DnfPackageLister(),
            update_source=BodhiSource(
                base_url=settings.bodhi_url,
                timeout=settings.bodhi.timeout,
                rows_per_page=settings.bodhi.rows_per_page,
            ),
            notification_service=DesktopNotifier(
                app_name=settings.notifications.app_name,
                icon=settings.notifications.icon,
            ),
        )
        service.run()
    except FeedbackError as e:
        logger.debug("Run aborted", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def app() -> None:
    """CLI entry point."""
    typer.run(main)


if __name__ == "__main__":
    app()
