"""HTTP client for the Docker Hub tags API."""

from __future__ import annotations

import json
import logging
from importlib import resources
from typing import Any

import jsonschema
import requests

from docker_tags.config import Settings
from docker_tags.models import PageResult
from docker_tags.registry.parser import ImageReference

logger = logging.getLogger(__name__)

# JSON Schema of one page of the tags listing, inside ``docker_tags/schemas/``.
_PAGE_SCHEMA_FILE = "page.schema.json"


class RegistryError(Exception):
    """Raised when a registry API call fails."""


class RegistryRequestFailed(RegistryError):
    """Raised when the registry answers with a non-200 status."""

    def __init__(self, status: int, body: str, url: str = "") -> None:
        super().__init__(f"Registry returned {status} for {url}: {body}")
        self.status = status
        self.body = body
        self.url = url


class MalformedResponse(RegistryError):
    """Raised when a registry response does not look like a tags page."""


class HubClient:
    """Client for the Docker Hub repositories API.

    Args:
        settings: Run-wide :class:`~docker_tags.config.Settings`.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.timeout = settings.timeout
        self._session = requests.Session()
        self._schema: dict[str, Any] | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tags_url(self, ref: ImageReference) -> str:
        """Return the URL of the tags listing for *ref*."""
        return self.settings.registry_url + ref.tags_path

    def fetch_page(
        self,
        url: str,
        params: dict[str, int] | None = None,
    ) -> PageResult:
        """Fetch and parse one page of tags.

        Args:
            url: Listing URL, or a ``next`` cursor returned by a previous page.
            params: Extra query parameters (``page_size``, ``page``).

        Returns:
            The parsed :class:`PageResult`.

        Raises:
            RegistryRequestFailed: If the registry does not answer 200.
            MalformedResponse: If the body is not a valid tags page.
            RegistryError: If the request itself fails.
        """
        resp = self._request(url, params)

        if resp.status_code != 200:
            raise RegistryRequestFailed(resp.status_code, resp.text, resp.url or url)

        try:
            data = resp.json()
        except ValueError as exc:
            raise MalformedResponse(f"Response from {url} is not JSON: {exc}") from exc

        try:
            jsonschema.validate(instance=data, schema=self._load_schema())
        except jsonschema.ValidationError as exc:
            raise MalformedResponse(
                f"Response from {url} is not a tags page: {exc.message}"
            ) from exc

        return PageResult.from_dict(data)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _request(
        self,
        url: str,
        params: dict[str, int] | None,
    ) -> requests.Response:
        """Execute a single GET request."""
        logger.debug("GET %s %s", url, params or "")
        try:
            return self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RegistryError(f"Request to {url} failed: {exc}") from exc

    def _load_schema(self) -> dict[str, Any]:
        """Load the page JSON Schema from the ``docker_tags.schemas`` package."""
        if self._schema is None:
            schema_ref = resources.files("docker_tags.schemas").joinpath(
                _PAGE_SCHEMA_FILE
            )
            self._schema = json.loads(schema_ref.read_text(encoding="utf-8"))
        return self._schema
