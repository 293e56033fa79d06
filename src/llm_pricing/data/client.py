"""HTTP client for the remote model catalog.

One GET per run, no retries. Proxy settings come from the environment
through ``requests``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from types import TracebackType

import requests

from llm_pricing.config import Config
from llm_pricing.data.parser import parse_catalog
from llm_pricing.models.catalog import Model

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """The pricing catalog could not be retrieved or decoded."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CatalogClient:
    """Fetches and parses the model catalog."""

    def __init__(self, config: Config, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._session.headers["Accept"] = "application/json"

    def __enter__(self) -> CatalogClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch_models(self) -> list[Model]:
        """Fetch the full catalog.

        Raises:
            FetchError: On network failure, a non-2xx status, or a body that
                is not a JSON list of model records.
        """
        url = self._config.api_url
        logger.debug("Fetching model catalog from %s", url)
        try:
            response = self._session.get(url, timeout=self._config.timeout)
        except requests.RequestException as exc:
            raise FetchError(f"Failed to reach {url}: {exc}") from exc

        if not response.ok:
            raise FetchError(
                f"{url} returned HTTP {response.status_code}", response.status_code
            )

        try:
            payload = response.json(parse_float=Decimal)
        except ValueError as exc:
            raise FetchError(f"Invalid JSON from {url}: {exc}") from exc

        try:
            models = parse_catalog(payload)
        except ValueError as exc:
            raise FetchError(str(exc)) from exc

        logger.debug("Fetched %d models", len(models))
        return models
