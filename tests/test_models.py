"""Tests for catalog and calculation models."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from llm_pricing.models import CacheRequestParams, Model, ModelPricing, price_per_million


def test_from_per_million_scales_to_per_token() -> None:
    pricing = ModelPricing.from_per_million("15", 75, cache_read=1.5, cache_write_5m="18.75")
    assert pricing.input_price_per_token == Decimal("0.000015")
    assert pricing.output_price_per_token == Decimal("0.000075")
    assert pricing.cache_read_price_per_token == Decimal("0.0000015")
    assert pricing.cache_write_price_5m_per_token == Decimal("0.00001875")
    assert pricing.cache_write_price_1h_per_token is None
    assert price_per_million(pricing.cache_write_price_5m_per_token) == Decimal("18.75")


def test_absent_price_is_distinct_from_free() -> None:
    pricing = ModelPricing.from_per_million(0, 0, cache_read=0)
    assert pricing.cache_read_price_per_token == 0
    assert pricing.cache_write_price_5m_per_token is None


def test_negative_prices_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ModelPricing(input_price_per_token=Decimal("-1"), output_price_per_token=Decimal(0))
    with pytest.raises(ValidationError):
        ModelPricing(
            input_price_per_token=Decimal(0),
            output_price_per_token=Decimal(0),
            cache_read_price_per_token=Decimal("-0.1"),
        )


def test_model_is_immutable(opus: Model) -> None:
    with pytest.raises(ValidationError):
        opus.id = "other/model"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("model_id", "provider"),
    [
        ("anthropic/claude-opus-4", "anthropic"),
        ("meta-llama/llama-3.3-70b-instruct:free", "meta-llama"),
        ("a/b/c", "a"),
        ("standalone", "standalone"),
    ],
)
def test_provider_is_prefix_before_first_slash(model_id: str, provider: str) -> None:
    model = Model(id=model_id, pricing=ModelPricing.from_per_million(1, 1))
    assert model.provider == provider


def test_cache_request_params_defaults() -> None:
    params = CacheRequestParams(input_tokens=10, output_tokens=5)
    assert params.cached_tokens is None
    assert params.ttl_minutes == 5
    assert params.cache_enabled is False


def test_zero_cached_tokens_enables_cache_pricing() -> None:
    assert CacheRequestParams(input_tokens=10, output_tokens=5, cached_tokens=0).cache_enabled


def test_negative_token_counts_are_rejected() -> None:
    with pytest.raises(ValidationError):
        CacheRequestParams(input_tokens=-1, output_tokens=0)
    with pytest.raises(ValidationError):
        CacheRequestParams(input_tokens=1, output_tokens=0, cached_tokens=-1)
