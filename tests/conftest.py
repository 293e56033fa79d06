"""Shared fixtures for llm-pricing tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from llm_pricing.models.catalog import Model, ModelPricing

SAMPLE_MODELS_PATH = Path(__file__).parent / "data" / "models.json"


class FakeCatalogSource:
    """In-memory catalog standing in for the HTTP client."""

    def __init__(self, models: list[Model], error: Exception | None = None) -> None:
        self.models = models
        self.error = error
        self.calls = 0

    def fetch_models(self) -> list[Model]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.models)


@pytest.fixture
def opus_pricing() -> ModelPricing:
    """$15 / $75 / $1.50 / $18.75 per 1M tokens."""
    return ModelPricing.from_per_million(
        "15",
        "75",
        cache_read="1.50",
        cache_write_5m="18.75",
        cache_write_1h="30",
    )


@pytest.fixture
def opus(opus_pricing: ModelPricing) -> Model:
    return Model(
        id="anthropic/claude-opus-4",
        display_name="Anthropic: Claude Opus 4",
        description="Flagship model.",
        context_length=200000,
        modality="text+image->text",
        tokenizer="Claude",
        max_completion_tokens=32000,
        moderated=True,
        pricing=opus_pricing,
    )


@pytest.fixture
def catalog(opus: Model) -> list[Model]:
    """A fixed catalog: two Anthropic models, one OpenAI model, one free model."""
    return [
        opus,
        Model(
            id="openai/gpt-4o",
            display_name="OpenAI: GPT-4o",
            pricing=ModelPricing.from_per_million("2.50", "10", cache_read="1.25"),
        ),
        Model(
            id="anthropic/claude-sonnet-4",
            display_name="Anthropic: Claude Sonnet 4",
            pricing=ModelPricing.from_per_million(
                "3", "15", cache_read="0.30", cache_write_5m="3.75", cache_write_1h="6"
            ),
        ),
        Model(
            id="meta-llama/llama-3.3-70b-instruct:free",
            pricing=ModelPricing.from_per_million("0", "0"),
        ),
    ]


@pytest.fixture
def fake_source(catalog: list[Model]) -> FakeCatalogSource:
    return FakeCatalogSource(catalog)


@pytest.fixture
def sample_payload() -> dict[str, object]:
    """Decoded sample catalog response."""
    return json.loads(SAMPLE_MODELS_PATH.read_text())
