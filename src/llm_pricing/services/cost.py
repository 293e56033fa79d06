"""Request cost calculation against catalog prices."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from llm_pricing.config import DEFAULT_CACHE_TTL_THRESHOLD_MINUTES
from llm_pricing.models.catalog import Model, ModelPricing
from llm_pricing.models.costs import CacheRequestParams, CostBreakdown

ZERO = Decimal(0)


class InvalidInputError(ValueError):
    """Request parameters that cannot be priced."""


def validate_params(params: CacheRequestParams) -> None:
    """Reject requests claiming more cached tokens than input tokens."""
    if params.cached_tokens is not None and params.cached_tokens > params.input_tokens:
        raise InvalidInputError(
            f"Cached tokens ({params.cached_tokens}) cannot exceed "
            f"input tokens ({params.input_tokens})"
        )


def cache_write_price_for_ttl(
    pricing: ModelPricing,
    ttl_minutes: int,
    threshold_minutes: int = DEFAULT_CACHE_TTL_THRESHOLD_MINUTES,
) -> Decimal | None:
    """Pick the cache write tier for a TTL: 5-minute up to the threshold, else 1-hour."""
    if ttl_minutes <= threshold_minutes:
        return pricing.cache_write_price_5m_per_token
    return pricing.cache_write_price_1h_per_token


def _cost(tokens: int, price: Decimal | None) -> Decimal:
    if price is None:
        return ZERO
    return tokens * price


def compute(
    model: Model,
    params: CacheRequestParams,
    *,
    ttl_threshold_minutes: int = DEFAULT_CACHE_TTL_THRESHOLD_MINUTES,
) -> CostBreakdown:
    """Compute the cost of one request against one model.

    Without cached tokens, input is billed at the base input price. Once
    cached tokens are given (even 0) the base input price no longer applies:
    cached tokens are billed as cache reads and the remaining input tokens
    as cache writes at the TTL's tier. Missing cache prices cost nothing.

    Raises:
        InvalidInputError: If cached tokens exceed input tokens.
    """
    validate_params(params)
    pricing = model.pricing

    output_cost = _cost(params.output_tokens, pricing.output_price_per_token)
    if params.cached_tokens is None:
        input_cost = _cost(params.input_tokens, pricing.input_price_per_token)
        cache_read_cost = ZERO
        cache_write_cost = ZERO
    else:
        uncached_tokens = params.input_tokens - params.cached_tokens
        write_price = cache_write_price_for_ttl(
            pricing, params.ttl_minutes, ttl_threshold_minutes
        )
        input_cost = ZERO
        cache_read_cost = _cost(params.cached_tokens, pricing.cache_read_price_per_token)
        cache_write_cost = _cost(uncached_tokens, write_price)

    return CostBreakdown(
        model_id=model.id,
        input_cost=input_cost,
        output_cost=output_cost,
        cache_read_cost=cache_read_cost,
        cache_write_cost=cache_write_cost,
        total_cost=input_cost + output_cost + cache_read_cost + cache_write_cost,
    )


def compute_all(
    models: Sequence[Model],
    params: CacheRequestParams,
    *,
    ttl_threshold_minutes: int = DEFAULT_CACHE_TTL_THRESHOLD_MINUTES,
) -> list[CostBreakdown]:
    """Compute one breakdown per model, in catalog order."""
    validate_params(params)
    return [
        compute(model, params, ttl_threshold_minutes=ttl_threshold_minutes)
        for model in models
    ]
