"""Configuration management."""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml

from fedora_update_feedback.core.errors import ConfigurationError

CONFIG_ENV_VAR = "FEDORA_UPDATE_FEEDBACK_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/fedora-update-feedback.yaml")


@dataclass(frozen=True)
class BodhiConfig:
    """Update-tracking service settings."""
    url: str = "https://bodhi.fedoraproject.org"
    timeout: float = 60.0
    rows_per_page: int = 100


@dataclass(frozen=True)
class NotificationsConfig:
    """Desktop notification settings."""
    enabled: bool = True
    strict: bool = True
    delay: float = 1.0
    app_name: str = "fedora-update-feedback"
    icon: str = "dialog-information"


@dataclass(frozen=True)
class Settings:
    """Application settings, resolved once per run."""

    username: str
    interests: frozenset[str] = frozenset()
    release: Optional[str] = None
    strict_parsing: bool = True

    bodhi: BodhiConfig = field(default_factory=BodhiConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)

    def __post_init__(self) -> None:
        if not self.username:
            raise ConfigurationError(
                "No username configured; set 'username' in the config file or pass --username"
            )

    @property
    def bodhi_url(self) -> str:
        return self.bodhi.url.rstrip("/")

    @property
    def strict_notifications(self) -> bool:
        return self.notifications.strict

    @property
    def notification_delay(self) -> float:
        return self.notifications.delay


def default_config_path() -> Path:
    """Return the config path from the environment or the per-user default."""
    return Path(os.getenv(CONFIG_ENV_VAR, str(DEFAULT_CONFIG_PATH))).expanduser()


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    A missing file yields an empty mapping; an unreadable or malformed one
    raises ConfigurationError.
    """
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Unable to read configuration file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Unable to parse configuration file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
    return data


def _section(config: dict, key: str, section_type: type) -> Any:
    values = config.get(key) or {}
    if not isinstance(values, dict):
        raise ConfigurationError(f"'{key}' must be a mapping")
    try:
        return section_type(**values)
    except TypeError as e:
        raise ConfigurationError(f"Invalid '{key}' section: {e}") from e


def _string_list(config: dict, key: str) -> list[str]:
    values = config.get(key) or []
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ConfigurationError(f"'{key}' must be a list of package names")
    return values


def get_settings(
    config_path: Optional[Path] = None,
    username: Optional[str] = None,
    interests: Iterable[str] = (),
    release: Optional[str] = None,
) -> Settings:
    """Get application settings from YAML config merged with CLI overrides.

    The CLI username replaces the file username; CLI interests are added to
    the file interests.
    """
    config = load_config(config_path or default_config_path())

    file_username = config.get("username") or ""
    if not isinstance(file_username, str):
        raise ConfigurationError("'username' must be a string")

    file_release = config.get("release")
    if file_release is not None and not isinstance(file_release, str):
        raise ConfigurationError("'release' must be a string such as \"F40\"")

    strict_parsing = config.get("strict_parsing", True)
    if not isinstance(strict_parsing, bool):
        raise ConfigurationError("'strict_parsing' must be true or false")

    return Settings(
        username=username or file_username,
        interests=frozenset(_string_list(config, "interests")) | frozenset(interests),
        release=release or file_release,
        strict_parsing=strict_parsing,
        bodhi=_section(config, "bodhi", BodhiConfig),
        notifications=_section(config, "notifications", NotificationsConfig),
    )


def with_overrides(
    settings: Settings,
    strict_parsing: Optional[bool] = None,
    strict_notifications: Optional[bool] = None,
    notify: Optional[bool] = None,
) -> Settings:
    """Return a copy of settings with CLI switches applied."""
    notifications = settings.notifications
    if strict_notifications is not None:
        notifications = replace(notifications, strict=strict_notifications)
    if notify is not None:
        notifications = replace(notifications, enabled=notify)

    return replace(
        settings,
        strict_parsing=settings.strict_parsing if strict_parsing is None else strict_parsing,
        notifications=notifications,
    )
