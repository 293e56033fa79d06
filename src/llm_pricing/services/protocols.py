"""Protocol definitions for services."""

from __future__ import annotations

from typing import Protocol

from llm_pricing.models.catalog import Model


class CatalogSource(Protocol):
    """Interface for anything that can produce the model catalog."""

    def fetch_models(self) -> list[Model]: ...
