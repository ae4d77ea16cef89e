"""Core domain layer."""

from fedora_update_feedback.core.entities import (
    Build,
    ClassificationResult,
    Comment,
    PackageIdentifier,
    UpdateRecord,
)
from fedora_update_feedback.core.errors import (
    ConfigurationError,
    ExternalProcessError,
    FeedbackError,
    NotificationError,
    ParseError,
    RemoteServiceError,
)
from fedora_update_feedback.core.interfaces import (
    NotificationService,
    PackageLister,
    ReleaseResolver,
    UpdateSource,
)
from fedora_update_feedback.core.nevra import (
    build_inventory,
    parse_filename,
    parse_nevra,
    parse_nvr,
)

__all__ = [
    "Build",
    "ClassificationResult",
    "Comment",
    "PackageIdentifier",
    "UpdateRecord",
    "FeedbackError",
    "ConfigurationError",
    "ParseError",
    "ExternalProcessError",
    "RemoteServiceError",
    "NotificationError",
    "NotificationService",
    "PackageLister",
    "ReleaseResolver",
    "UpdateSource",
    "build_inventory",
    "parse_filename",
    "parse_nevra",
    "parse_nvr",
]
