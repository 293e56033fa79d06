"""Catalog models for remote model pricing data."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

PER_MILLION = Decimal(1_000_000)

# The 1-hour cache write tier costs twice the base input price
ONE_HOUR_WRITE_MULTIPLIER = Decimal(2)

PriceInput = Decimal | int | float | str


def _per_token(price_per_million: PriceInput | None) -> Decimal | None:
    if price_per_million is None:
        return None
    return Decimal(str(price_per_million)) / PER_MILLION


class ModelPricing(BaseModel):
    """Per-token prices for one model.

    Optional prices are ``None`` when the provider does not offer the
    operation, which is not the same as a free (zero) price.
    """

    model_config = ConfigDict(frozen=True)

    input_price_per_token: Decimal = Field(ge=0)
    output_price_per_token: Decimal = Field(ge=0)
    cache_read_price_per_token: Decimal | None = Field(default=None, ge=0)
    cache_write_price_5m_per_token: Decimal | None = Field(default=None, ge=0)
    cache_write_price_1h_per_token: Decimal | None = Field(default=None, ge=0)
    request_price: Decimal | None = Field(default=None, ge=0)
    image_price: Decimal | None = Field(default=None, ge=0)

    @classmethod
    def from_per_million(
        cls,
        input_price: PriceInput,
        output_price: PriceInput,
        *,
        cache_read: PriceInput | None = None,
        cache_write_5m: PriceInput | None = None,
        cache_write_1h: PriceInput | None = None,
    ) -> ModelPricing:
        """Build a price table from USD-per-1M-token prices."""
        return cls(
            input_price_per_token=_per_token(input_price),
            output_price_per_token=_per_token(output_price),
            cache_read_price_per_token=_per_token(cache_read),
            cache_write_price_5m_per_token=_per_token(cache_write_5m),
            cache_write_price_1h_per_token=_per_token(cache_write_1h),
        )


def price_per_million(price: Decimal) -> Decimal:
    """Scale a per-token price to USD per 1M tokens."""
    return price * PER_MILLION


class Model(BaseModel):
    """A catalog entry. Immutable once fetched."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str | None = None
    description: str | None = None
    context_length: int | None = None
    modality: str | None = None
    tokenizer: str | None = None
    instruct_type: str | None = None
    max_completion_tokens: int | None = None
    moderated: bool | None = None
    pricing: ModelPricing

    @property
    def provider(self) -> str:
        """Identifier prefix before the first ``/``."""
        return self.id.split("/", 1)[0]
