"""Source adapters for fetching updates."""

from fedora_update_feedback.adapters.sources.bodhi_source import BodhiSource

__all__ = ["BodhiSource"]
