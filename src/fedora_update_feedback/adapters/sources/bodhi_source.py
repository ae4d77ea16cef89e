"""Bodhi source for updates currently in testing."""

import logging
from typing import Any, Optional

import httpx

from fedora_update_feedback.core import (
    Build,
    Comment,
    RemoteServiceError,
    UpdateRecord,
    UpdateSource,
)

logger = logging.getLogger(__name__)


class BodhiSource(UpdateSource):
    """Query Bodhi for RPM updates in the testing state."""

    name = "Bodhi"

    def __init__(
        self,
        base_url: str = "https://bodhi.fedoraproject.org",
        timeout: float = 60.0,
        rows_per_page: int = 100,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.rows_per_page = rows_per_page
        self._client = client

    def fetch_updates(self, release: str) -> list[UpdateRecord]:
        """Fetch every page of testing updates for the release."""
        if self._client is not None:
            return self._fetch_all(self._client, release)

        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            return self._fetch_all(client, release)

    def _fetch_all(self, client: httpx.Client, release: str) -> list[UpdateRecord]:
        updates: list[UpdateRecord] = []
        page = 1
        pages = 1

        while page <= pages:
            data = self._fetch_page(client, release, page)
            updates.extend(self._create_update(raw) for raw in data.get("updates", []))

            pages = int(data.get("pages", 1) or 1)
            logger.debug("Fetched page %d/%d from %s", page, pages, self.name)
            page += 1

        logger.info("Found %d updates in testing for %s", len(updates), release)
        return updates

    def _fetch_page(self, client: httpx.Client, release: str, page: int) -> dict[str, Any]:
        try:
            response = client.get(
                f"{self.base_url}/updates/",
                headers={"Accept": "application/json"},
                params={
                    "releases": release,
                    "content_type": "rpm",
                    "status": "testing",
                    "rows_per_page": self.rows_per_page,
                    "page": page,
                },
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise RemoteServiceError(
                f"{self.name} query for {release} failed with HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise RemoteServiceError(f"{self.name} query for {release} failed: {e}") from e
        except ValueError as e:
            raise RemoteServiceError(f"{self.name} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise RemoteServiceError(f"Unexpected response from {self.name}: {data!r:.200}")
        return data

    def _create_update(self, raw: dict[str, Any]) -> UpdateRecord:
        """Create an update record from a JSON object."""
        try:
            raw_comments = raw.get("comments")
            comments = None
            if raw_comments is not None:
                comments = tuple(
                    Comment(user=c["user"]["name"], text=c.get("text") or "")
                    for c in raw_comments
                )

            return UpdateRecord(
                alias=raw["alias"],
                user=raw["user"]["name"],
                builds=tuple(Build(nvr=b["nvr"]) for b in raw.get("builds", [])),
                comments=comments,
                title=raw.get("title") or "",
                url=raw.get("url") or "",
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteServiceError(
                f"Malformed update in {self.name} response: {type(e).__name__}: {e}"
            ) from e
