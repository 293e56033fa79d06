"""Pricing service — catalog listing and cost calculation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from llm_pricing.config import Config
from llm_pricing.data.client import FetchError
from llm_pricing.models.catalog import Model
from llm_pricing.models.costs import CacheRequestParams, CostBreakdown
from llm_pricing.services.cost import InvalidInputError, compute_all, validate_params
from llm_pricing.services.filtering import filter_models

if TYPE_CHECKING:
    from llm_pricing.services.protocols import CatalogSource


class PricingService:
    """Service for model listing and request pricing."""

    def __init__(self, source: CatalogSource, config: Config | None = None) -> None:
        self._source = source
        self._config = config or Config()

    def list_models(self, filters: Sequence[str] = ()) -> Result[list[Model], str]:
        """Fetch the catalog and keep models matching any filter."""
        try:
            models = self._source.fetch_models()
        except FetchError as exc:
            return Err(f"Failed to fetch models: {exc}")
        return Ok(filter_models(models, filters))

    def calculate(
        self, params: CacheRequestParams, filters: Sequence[str] = ()
    ) -> Result[list[CostBreakdown], str]:
        """Price a request against every model matching the filters.

        Returns:
            Ok with one breakdown per matching model (possibly empty) or Err
            with an error message.
        """
        try:
            validate_params(params)
        except InvalidInputError as exc:
            return Err(str(exc))

        listed = self.list_models(filters)
        if isinstance(listed, Err):
            return listed

        breakdowns = compute_all(
            listed.ok_value,
            params,
            ttl_threshold_minutes=self._config.cache_ttl_threshold_minutes,
        )
        return Ok(breakdowns)
