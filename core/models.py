# core/models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class HaulMode(Enum):
    FLAT_RATE = "Flat Rate"
    HAUL_PLUS = "Haul Plus Rate"
    INCLUSION = "Inclusion Rate"

    @property
    def label(self) -> str:
        return self.value

    @property
    def uses_tonnage(self) -> bool:
        return self is not HaulMode.FLAT_RATE

    @classmethod
    def parse(cls, value) -> "HaulMode":
        """Accept a HaulMode, its label ("Haul Plus Rate") or its name ("HAUL_PLUS")."""
        if isinstance(value, cls):
            return value
        s = str(value).strip()
        for mode in cls:
            if s == mode.value or s.upper() == mode.name:
                return mode
        raise ValueError(f"Unknown haul mode: {value!r}")


@dataclass(frozen=True)
class PricingResult:
    ctu: float   # cost to us
    ptc: float   # price to customer


@dataclass(frozen=True)
class QuoteInputs:
    """Everything the form collects, in one place."""
    delivery_cost: float = 0.0
    haul_cost: float = 0.0
    rent_cost: float = 0.0
    fuel_pct: float = 0.0
    tax_pct: float = 0.0
    rate_class: bool = False
    expedited: bool = False
    haul_mode: HaulMode = HaulMode.FLAT_RATE
    expected_tons: float = 0.0
    minimum_tons: float = 0.0
    included_tons: float = 0.0
    tonnage_cost: float = 0.0


@dataclass(frozen=True)
class Quote:
    delivery: PricingResult
    haul: PricingResult
    rent: PricingResult

    def rows(self) -> Iterator[tuple[str, PricingResult]]:
        yield "Delivery", self.delivery
        yield "Haul", self.haul
        yield "Rent", self.rent
