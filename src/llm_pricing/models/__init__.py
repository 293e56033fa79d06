"""Pydantic models for llm-pricing."""

from llm_pricing.models.catalog import (
    ONE_HOUR_WRITE_MULTIPLIER,
    PER_MILLION,
    Model,
    ModelPricing,
    price_per_million,
)
from llm_pricing.models.costs import CacheRequestParams, CostBreakdown

__all__ = [
    "CacheRequestParams",
    "CostBreakdown",
    "Model",
    "ModelPricing",
    "ONE_HOUR_WRITE_MULTIPLIER",
    "PER_MILLION",
    "price_per_million",
]
