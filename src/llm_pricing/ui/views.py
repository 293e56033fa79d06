"""Terminal views for model listings and cost calculations."""

from __future__ import annotations

import textwrap
from collections.abc import Sequence

from llm_pricing.models.catalog import Model
from llm_pricing.models.costs import CacheRequestParams, CostBreakdown
from llm_pricing.services.filtering import group_by_provider
from llm_pricing.ui.formatting import (
    format_cost,
    format_plain_price,
    format_price_per_million,
    format_ttl,
)
from llm_pricing.ui.table import render_table

MODEL_HEADERS = ("Model", "Input", "Output", "Cache Read", "Cache Write")
COST_HEADERS = ("Model", "Input", "Output", "Total")
CACHED_COST_HEADERS = ("Model", "Input", "Output", "Cache Read", "Cache Write", "Total")
DEFAULT_WRAP_WIDTH = 100


def _numeric(headers: Sequence[str]) -> set[int]:
    return set(range(1, len(headers)))


def render_model_table(models: Sequence[Model]) -> str:
    """Compact price table, USD per 1M tokens. Cache Write is the 5-minute tier."""
    rows = [
        (
            model.id,
            format_price_per_million(model.pricing.input_price_per_token),
            format_price_per_million(model.pricing.output_price_per_token),
            format_price_per_million(model.pricing.cache_read_price_per_token),
            format_price_per_million(model.pricing.cache_write_price_5m_per_token),
        )
        for model in models
    ]
    return render_table(MODEL_HEADERS, rows, numeric_columns=_numeric(MODEL_HEADERS))


def cost_heading(params: CacheRequestParams) -> str:
    heading = f"Cost calculation: {params.input_tokens} input + {params.output_tokens} output"
    if params.cache_enabled:
        heading += f" ({params.cached_tokens} cached, {format_ttl(params.ttl_minutes)} TTL)"
    return heading


def render_cost_table(breakdowns: Sequence[CostBreakdown], params: CacheRequestParams) -> str:
    """Heading plus cost table; cache columns only appear with cache pricing on."""
    if params.cache_enabled:
        headers = CACHED_COST_HEADERS
        rows = [
            (
                b.model_id,
                format_cost(b.input_cost),
                format_cost(b.output_cost),
                format_cost(b.cache_read_cost),
                format_cost(b.cache_write_cost),
                format_cost(b.total_cost),
            )
            for b in breakdowns
        ]
    else:
        headers = COST_HEADERS
        rows = [
            (
                b.model_id,
                format_cost(b.input_cost),
                format_cost(b.output_cost),
                format_cost(b.total_cost),
            )
            for b in breakdowns
        ]
    table = render_table(headers, rows, numeric_columns=_numeric(headers))
    return f"{cost_heading(params)}\n\n{table}"


def _model_block(model: Model, width: int) -> list[str]:
    lines = [f"Model: {model.id}"]
    if model.display_name:
        lines.append(f"  Name: {model.display_name}")
    if model.description:
        lines.append(
            textwrap.fill(
                model.description,
                width=width,
                initial_indent="  Description: ",
                subsequent_indent="    ",
                break_long_words=False,
                break_on_hyphens=False,
            )
        )

    pricing = model.pricing
    lines.append("  Pricing:")
    lines.append(
        f"    Input: ${format_price_per_million(pricing.input_price_per_token)} per 1M tokens"
    )
    lines.append(
        f"    Output: ${format_price_per_million(pricing.output_price_per_token)} per 1M tokens"
    )
    optional_prices = (
        ("Cache Read", pricing.cache_read_price_per_token),
        ("Cache Write (5m)", pricing.cache_write_price_5m_per_token),
        ("Cache Write (1h)", pricing.cache_write_price_1h_per_token),
    )
    for label, price in optional_prices:
        if price is not None:
            lines.append(f"    {label}: ${format_price_per_million(price)} per 1M tokens")
    if pricing.request_price is not None:
        lines.append(f"    Per Request: {format_plain_price(pricing.request_price)}")
    if pricing.image_price is not None:
        lines.append(f"    Image: {format_plain_price(pricing.image_price)}")

    if model.context_length is not None:
        lines.append(f"  Context Length: {model.context_length} tokens")
    if model.modality:
        lines.append(f"  Modality: {model.modality}")
    if model.tokenizer:
        lines.append(f"  Tokenizer: {model.tokenizer}")
    if model.instruct_type:
        lines.append(f"  Instruct Type: {model.instruct_type}")
    if model.max_completion_tokens is not None:
        lines.append(f"  Max Completion Tokens: {model.max_completion_tokens}")
    if model.moderated is not None:
        lines.append(f"  Moderated: {str(model.moderated).lower()}")
    return lines


def render_verbose(models: Sequence[Model], *, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """One block per model under an upper-cased provider heading."""
    lines: list[str] = []
    for provider, provider_models in group_by_provider(models).items():
        if lines:
            lines.append("")
        lines.append(f"=== {provider.upper()} ===")
        for model in provider_models:
            lines.append("")
            lines.extend(_model_block(model, width))
    return "\n".join(lines)
