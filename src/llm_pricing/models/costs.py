"""Cost calculation models."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from llm_pricing.config import DEFAULT_CACHE_TTL_MINUTES


class CacheRequestParams(BaseModel):
    """Token counts for a hypothetical request.

    Setting ``cached_tokens``, even to 0, switches on cache pricing.
    """

    model_config = ConfigDict(frozen=True)

    input_tokens: int = Field(ge=0)
    output_tokens: int = Field(ge=0)
    cached_tokens: int | None = Field(default=None, ge=0)
    ttl_minutes: int = Field(default=DEFAULT_CACHE_TTL_MINUTES, ge=0)

    @property
    def cache_enabled(self) -> bool:
        return self.cached_tokens is not None


class CostBreakdown(BaseModel):
    """Cost of one request against one model, in USD."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_id: str
    input_cost: Decimal = Decimal(0)
    output_cost: Decimal = Decimal(0)
    cache_read_cost: Decimal = Decimal(0)
    cache_write_cost: Decimal = Decimal(0)
    total_cost: Decimal = Decimal(0)
