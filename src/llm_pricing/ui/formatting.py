"""Text formatting helpers for prices, costs and TTLs."""

from __future__ import annotations

from decimal import Decimal

from llm_pricing.models.catalog import price_per_million

NOT_AVAILABLE = "N/A"


def format_price_per_million(price: Decimal | None) -> str:
    """Format a per-token price as USD per 1M tokens, or ``N/A`` if absent."""
    if price is None:
        return NOT_AVAILABLE
    return f"{price_per_million(price):.2f}"


def format_cost(amount: Decimal) -> str:
    """Format a dollar amount to six decimal places."""
    return f"${amount:.6f}"


def format_plain_price(price: Decimal) -> str:
    """Format a flat (non per-token) price without trailing zeros."""
    text = format(price.normalize(), "f")
    return f"${text}"


def format_ttl(minutes: int) -> str:
    """Format a TTL as whole hours (``1h``) or minutes (``5m``)."""
    if minutes and minutes % 60 == 0:
        return f"{minutes // 60}h"
    return f"{minutes}m"
