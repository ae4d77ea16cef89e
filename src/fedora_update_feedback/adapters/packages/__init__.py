"""Local package manager adapters."""

from fedora_update_feedback.adapters.packages.dnf_lister import DnfPackageLister, RpmReleaseResolver

__all__ = ["DnfPackageLister", "RpmReleaseResolver"]
