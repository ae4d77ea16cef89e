"""Tests for configuration loading."""

from pathlib import Path

import pytest

from fedora_update_feedback.config import Settings, get_settings, load_config, with_overrides
from fedora_update_feedback.core import ConfigurationError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "username: alice\n"
        "interests:\n"
        "  - kernel\n"
        "  - mesa\n"
        "notifications:\n"
        "  delay: 0.5\n"
        "bodhi:\n"
        "  url: https://bodhi.stg.fedoraproject.org/\n",
        encoding="utf-8",
    )
    return path


def test_file_values(config_file: Path) -> None:
    settings = get_settings(config_file)

    assert settings.username == "alice"
    assert settings.interests == {"kernel", "mesa"}
    assert settings.notification_delay == 0.5
    assert settings.bodhi_url == "https://bodhi.stg.fedoraproject.org"
    assert settings.strict_parsing is True
    assert settings.strict_notifications is True


def test_cli_username_overrides_file(config_file: Path) -> None:
    assert get_settings(config_file, username="bob").username == "bob"


def test_cli_interests_are_appended(config_file: Path) -> None:
    settings = get_settings(config_file, interests=["firefox", "kernel"])

    assert settings.interests == {"kernel", "mesa", "firefox"}


def test_missing_file_with_cli_username(tmp_path: Path) -> None:
    settings = get_settings(tmp_path / "missing.yaml", username="bob")

    assert settings.username == "bob"
    assert settings.interests == frozenset()


def test_no_username_anywhere(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="No username configured"):
        get_settings(tmp_path / "missing.yaml")


def test_env_var_selects_file(config_file: Path, monkeypatch) -> None:
    monkeypatch.setenv("FEDORA_UPDATE_FEEDBACK_CONFIG", str(config_file))

    assert get_settings().username == "alice"


@pytest.mark.parametrize(
    "content, message",
    [
        ("username: [unterminated\n", "Unable to parse"),
        ("- just\n- a list\n", "must contain a mapping"),
        ("username: alice\ninterests: 42\n", "list of package names"),
        ("username: alice\nbodhi: nope\n", "'bodhi' must be a mapping"),
        ("username: alice\nbodhi:\n  colour: red\n", "Invalid 'bodhi' section"),
        ("username: alice\nstrict_parsing: maybe\n", "true or false"),
        ("username: alice\nrelease: 40\n", "'release' must be a string"),
    ],
)
def test_malformed_config(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError, match=message):
        get_settings(path)


def test_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == {}


def test_with_overrides() -> None:
    settings = with_overrides(
        Settings(username="alice"),
        strict_parsing=False,
        strict_notifications=False,
        notify=False,
    )

    assert settings.strict_parsing is False
    assert settings.strict_notifications is False
    assert settings.notifications.enabled is False


def test_with_overrides_keeps_unset_values() -> None:
    original = Settings(username="alice", strict_parsing=False)

    assert with_overrides(original) == original
