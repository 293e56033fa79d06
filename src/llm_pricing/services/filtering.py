"""Catalog filtering and grouping."""

from __future__ import annotations

from collections.abc import Sequence

from llm_pricing.models.catalog import Model


def filter_models(models: Sequence[Model], patterns: Sequence[str]) -> list[Model]:
    """Keep models whose identifier contains any pattern, ignoring case.

    No patterns keeps everything. Order is preserved.
    """
    if not patterns:
        return list(models)
    needles = [pattern.lower() for pattern in patterns]
    return [model for model in models if any(n in model.id.lower() for n in needles)]


def group_by_provider(models: Sequence[Model]) -> dict[str, list[Model]]:
    """Group models by provider prefix, providers in first-seen order."""
    grouped: dict[str, list[Model]] = {}
    for model in models:
        grouped.setdefault(model.provider, []).append(model)
    return grouped
