"""Desktop notifications for Fedora updates waiting for feedback."""

__version__ = "0.1.0"
