"""Parser for the remote model catalog payload."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from llm_pricing.models.catalog import ONE_HOUR_WRITE_MULTIPLIER, Model, ModelPricing

logger = logging.getLogger(__name__)


def parse_catalog(payload: object) -> list[Model]:
    """Turn a decoded catalog response into models, in source order.

    Accepts either ``{"data": [...]}`` or a bare list of records. Records
    that cannot be priced are skipped with a warning.

    Raises:
        ValueError: If the payload does not contain a list of records.
    """
    records = _extract_records(payload)
    models: list[Model] = []
    for index, raw in enumerate(records):
        if not isinstance(raw, dict):
            logger.warning("Skipping catalog record %d: not an object", index)
            continue
        model = parse_model(raw)
        if model is not None:
            models.append(model)
    return models


def parse_model(raw: dict[str, object]) -> Model | None:
    """Parse one catalog record, or return None if it cannot be priced."""
    model_id = _as_str(raw.get("id")).strip()
    if not model_id:
        logger.warning("Skipping catalog record without an id")
        return None

    pricing = parse_pricing(_as_dict(raw.get("pricing")))
    if pricing is None:
        logger.warning("Skipping %s: missing or invalid prompt/completion price", model_id)
        return None

    architecture = _as_dict(raw.get("architecture"))
    top_provider = _as_dict(raw.get("top_provider"))
    moderated = top_provider.get("is_moderated")

    return Model(
        id=model_id,
        display_name=_as_optional_str(raw.get("name")),
        description=_as_optional_str(raw.get("description")),
        context_length=_optional_int(raw.get("context_length")),
        modality=_as_optional_str(architecture.get("modality")),
        tokenizer=_as_optional_str(architecture.get("tokenizer")),
        instruct_type=_as_optional_str(architecture.get("instruct_type")),
        max_completion_tokens=_optional_int(top_provider.get("max_completion_tokens")),
        moderated=moderated if isinstance(moderated, bool) else None,
        pricing=pricing,
    )


def parse_pricing(raw: dict[str, object]) -> ModelPricing | None:
    """Parse a per-token ``pricing`` object.

    ``input_cache_write`` is the 5-minute tier. Without an explicit
    ``input_cache_write_1h`` the 1-hour tier is derived from the input price,
    but only for models that offer cache writes at all.
    """
    input_price = _price(raw.get("prompt"))
    output_price = _price(raw.get("completion"))
    if input_price is None or output_price is None:
        return None

    write_5m = _price(raw.get("input_cache_write"))
    write_1h = _price(raw.get("input_cache_write_1h"))
    if write_1h is None and write_5m is not None:
        write_1h = input_price * ONE_HOUR_WRITE_MULTIPLIER

    return ModelPricing(
        input_price_per_token=input_price,
        output_price_per_token=output_price,
        cache_read_price_per_token=_price(raw.get("input_cache_read")),
        cache_write_price_5m_per_token=write_5m,
        cache_write_price_1h_per_token=write_1h,
        request_price=_price(raw.get("request")),
        image_price=_price(raw.get("image")),
    )


def _extract_records(payload: object) -> list[object]:
    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise ValueError("Unexpected catalog response: expected a list of models")
    return payload


def _price(value: object) -> Decimal | None:
    """Decode a price; malformed or negative values count as not offered."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, int):
        price = Decimal(value)
    elif isinstance(value, float):
        price = Decimal(str(value))
    elif isinstance(value, str):
        try:
            price = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not price.is_finite() or price < 0:
        return None
    return price


def _as_dict(value: object) -> dict[str, object]:
    return value if isinstance(value, dict) else {}


def _as_str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _as_optional_str(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _optional_int(val: object) -> int | None:
    if isinstance(val, bool):
        return None
    if isinstance(val, int):
        return val
    if isinstance(val, float | Decimal | str):
        try:
            return int(val)
        except (ValueError, OverflowError):
            return None
    return None
