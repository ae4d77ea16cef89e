"""Core domain entities."""

from dataclasses import dataclass, field
from typing import Optional

from fedora_update_feedback.core.errors import ParseError


@dataclass(frozen=True)
class PackageIdentifier:
    """Parsed package identifier.

    Only name, version and release take part in equality and hashing, so two
    identifiers that differ in epoch or architecture still match each other
    in an inventory lookup.
    """

    name: str
    version: str
    release: str
    epoch: str = field(default="0", compare=False)
    arch: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ParseError("Package name cannot be empty", self.nvr)
        if not self.version:
            raise ParseError("Package version cannot be empty", self.nvr)
        if not self.release:
            raise ParseError("Package release cannot be empty", self.nvr)

    @property
    def nvr(self) -> str:
        """Return the name-version-release string."""
        return f"{self.name}-{self.version}-{self.release}"


@dataclass(frozen=True)
class Comment:
    """Comment left on an update."""

    user: str
    text: str = ""


@dataclass(frozen=True)
class Build:
    """Build shipped by an update."""

    nvr: str


@dataclass(frozen=True)
class UpdateRecord:
    """Update as reported by the update-tracking service."""

    alias: str
    user: str
    builds: tuple[Build, ...] = ()
    comments: Optional[tuple[Comment, ...]] = None
    title: str = ""
    url: str = ""

    def __post_init__(self) -> None:
        if not self.alias:
            raise ValueError("Alias cannot be empty")


@dataclass
class ClassificationResult:
    """Updates the user should hear about."""

    feedback_pending: list[str] = field(default_factory=list)
    interesting_pending: list[UpdateRecord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.feedback_pending and not self.interesting_pending
