"""Shared fixtures for fedora-update-feedback tests."""

from typing import Optional

import pytest

from fedora_update_feedback.config import Settings
from fedora_update_feedback.core import Build, Comment, UpdateRecord, build_inventory


@pytest.fixture
def make_update():
    """Factory for update records with the given builds and comment authors."""

    def _make_update(
        alias: str,
        builds: list[str],
        user: str = "packager",
        commenters: Optional[list[str]] = None,
    ) -> UpdateRecord:
        comments = None
        if commenters is not None:
            comments = tuple(Comment(user=name) for name in commenters)
        return UpdateRecord(
            alias=alias,
            user=user,
            builds=tuple(Build(nvr=nvr) for nvr in builds),
            comments=comments,
        )

    return _make_update


@pytest.fixture
def settings() -> Settings:
    """Settings for user "tester" without interests."""
    return Settings(username="tester")


@pytest.fixture
def inventory():
    """Installed packages as dnf would list them."""
    return build_inventory(
        "foo-1.0-1.src.rpm\n"
        "bar-baz-2:3.1-2.fc40.src.rpm\n"
        "kernel-6.8.5-301.fc40.src.rpm\n"
    )
