"""Turn raw form values into numbers the pricing engine can use.

Form fields arrive as free text ("", "125", "$1,250.00", "8%"). By default
anything blank or unreadable counts as 0 so the table always renders. With
strict mode on, unreadable or negative values raise InvalidInput instead.

Usage:
    from core.inputs import parse_inputs

    inputs = parse_inputs(st.session_state, strict=settings.strict_input())
"""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Mapping

from .models import HaulMode, QuoteInputs

__all__ = ["InvalidInput", "to_number", "parse_inputs", "NUMERIC_FIELDS"]

logger = logging.getLogger(__name__)

NUMERIC_FIELDS = (
    "delivery_cost", "haul_cost", "rent_cost",
    "fuel_pct", "tax_pct",
    "expected_tons", "minimum_tons", "included_tons", "tonnage_cost",
)


class InvalidInput(ValueError):
    def __init__(self, field: str, value: Any, reason: str = "is not a number"):
        self.field = field
        self.value = value
        super().__init__(f"{field.replace('_', ' ').capitalize()} {reason}: {value!r}")


def _text_to_float(s: str) -> float:
    s = re.sub(r"[$,%\s]", "", s)
    if re.fullmatch(r"\(\d+(\.\d+)?\)", s):  # (123.45) accounting negative
        s = "-" + s.strip("()")
    return float(s)


def to_number(raw: Any, field: str = "value", strict: bool = False) -> float:
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return 0.0
    if isinstance(raw, bool):
        raw = str(raw)
    try:
        value = float(raw) if isinstance(raw, (int, float)) else _text_to_float(str(raw))
    except ValueError:
        value = float("nan")

    if not math.isfinite(value):
        if strict:
            raise InvalidInput(field, raw)
        logger.debug("coercing %s=%r to 0", field, raw)
        return 0.0
    if strict and value < 0:
        raise InvalidInput(field, raw, "must not be negative")
    return value


def parse_inputs(raw: Mapping[str, Any], strict: bool = False) -> QuoteInputs:
    numbers = {name: to_number(raw.get(name), name, strict) for name in NUMERIC_FIELDS}
    return QuoteInputs(
        rate_class=bool(raw.get("rate_class", False)),
        expedited=bool(raw.get("expedited", False)),
        haul_mode=HaulMode.parse(raw.get("haul_mode") or HaulMode.FLAT_RATE),
        **numbers,
    )
