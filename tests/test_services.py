"""Tests for the pricing service."""

from __future__ import annotations

from decimal import Decimal

from result import Err, Ok

from llm_pricing.config import Config
from llm_pricing.data.client import FetchError
from llm_pricing.models.costs import CacheRequestParams
from llm_pricing.services.pricing_service import PricingService


class TestListModels:
    def test_returns_filtered_models(self, fake_source) -> None:
        result = PricingService(fake_source).list_models(["anthropic"])
        assert isinstance(result, Ok)
        assert [m.id for m in result.ok_value] == [
            "anthropic/claude-opus-4",
            "anthropic/claude-sonnet-4",
        ]

    def test_no_match_is_ok_and_empty(self, fake_source) -> None:
        result = PricingService(fake_source).list_models(["nothing-here"])
        assert isinstance(result, Ok)
        assert result.ok_value == []

    def test_fetch_error_is_err(self, fake_source) -> None:
        fake_source.error = FetchError("boom")
        result = PricingService(fake_source).list_models()
        assert isinstance(result, Err)
        assert "boom" in result.err_value


class TestCalculate:
    def test_prices_matching_models(self, fake_source) -> None:
        params = CacheRequestParams(input_tokens=10000, output_tokens=200, cached_tokens=9500)
        result = PricingService(fake_source).calculate(params, ["opus"])
        assert isinstance(result, Ok)
        [breakdown] = result.ok_value
        assert breakdown.total_cost == Decimal("0.038625")

    def test_invalid_input_skips_fetch(self, fake_source) -> None:
        params = CacheRequestParams(input_tokens=10, output_tokens=0, cached_tokens=11)
        result = PricingService(fake_source).calculate(params)
        assert isinstance(result, Err)
        assert "cannot exceed" in result.err_value
        assert fake_source.calls == 0

    def test_fetch_error_is_err(self, fake_source) -> None:
        fake_source.error = FetchError("offline")
        params = CacheRequestParams(input_tokens=10, output_tokens=0)
        result = PricingService(fake_source).calculate(params)
        assert isinstance(result, Err)
        assert "offline" in result.err_value

    def test_uses_configured_ttl_threshold(self, fake_source) -> None:
        params = CacheRequestParams(
            input_tokens=10000, output_tokens=0, cached_tokens=0, ttl_minutes=60
        )
        default = PricingService(fake_source).calculate(params, ["opus"])
        widened = PricingService(fake_source, Config(cache_ttl_threshold_minutes=60)).calculate(
            params, ["opus"]
        )
        assert isinstance(default, Ok)
        assert isinstance(widened, Ok)
        assert default.ok_value[0].cache_write_cost == Decimal("0.3")
        assert widened.ok_value[0].cache_write_cost == Decimal("0.1875")
