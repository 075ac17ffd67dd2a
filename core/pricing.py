import logging
import math

from .inputs import to_number
from .models import HaulMode, PricingResult, Quote, QuoteInputs
from .settings import (
    STANDARD_MULTIPLIER, RCA_MULTIPLIER,
    DELIVERY_ADDITIONAL, DELIVERY_ADDITIONAL_RCA, DELIVERY_ADDITIONAL_ASAP,
    HAUL_ADDITIONAL, HAUL_ADDITIONAL_RCA,
    DELIVERY_ROUND_TO, HAUL_ROUND_TO, RENT_ROUND_TO,
)

logger = logging.getLogger(__name__)


def round_up(value: float, multiple: float) -> float:
    if multiple <= 0:
        raise ValueError(f"multiple must be positive, got {multiple!r}")
    if not math.isfinite(value):
        return value  # inf/nan have no next multiple
    return math.ceil(value / multiple) * multiple

def compute_ctu(cost: float, fuel_pct: float, tax_pct: float) -> float:
    return cost * (1 + fuel_pct / 100) * (1 + tax_pct / 100)

def multiplier(rate_class: bool) -> float:
    return RCA_MULTIPLIER if rate_class else STANDARD_MULTIPLIER

def _haul_price(ctu: float, rate_class: bool) -> PricingResult:
    additional = HAUL_ADDITIONAL_RCA if rate_class else HAUL_ADDITIONAL
    ptc = (ctu + additional) * multiplier(rate_class)
    return PricingResult(ctu=ctu, ptc=round_up(ptc, HAUL_ROUND_TO))

# -------------------------
# Delivery
# -------------------------
def delivery_standard(cost: float, fuel_pct: float, tax_pct: float, rate_class: bool) -> PricingResult:
    ctu = compute_ctu(cost, fuel_pct, tax_pct)
    additional = DELIVERY_ADDITIONAL_RCA if rate_class else DELIVERY_ADDITIONAL
    ptc = (ctu + additional) * multiplier(rate_class)
    return PricingResult(ctu=ctu, ptc=round_up(ptc, DELIVERY_ROUND_TO))

def delivery_expedited(cost: float, fuel_pct: float, tax_pct: float, rate_class: bool) -> PricingResult:
    ctu = compute_ctu(cost, fuel_pct, tax_pct)
    ptc = (ctu + DELIVERY_ADDITIONAL_ASAP) * multiplier(rate_class)
    return PricingResult(ctu=ctu, ptc=round_up(ptc, DELIVERY_ROUND_TO))

# -------------------------
# Haul
# -------------------------
def haul_flat(cost: float, fuel_pct: float, tax_pct: float, rate_class: bool) -> PricingResult:
    return _haul_price(compute_ctu(cost, fuel_pct, tax_pct), rate_class)

def haul_plus(cost: float, fuel_pct: float, tax_pct: float, rate_class: bool,
              expected_tons: float, minimum_tons: float, tonnage_cost: float) -> PricingResult:
    overage = max(0, expected_tons - minimum_tons)
    ctu = compute_ctu(cost + overage * tonnage_cost, fuel_pct, tax_pct)
    return _haul_price(ctu, rate_class)

def haul_inclusion(cost: float, fuel_pct: float, tax_pct: float, rate_class: bool,
                   expected_tons: float, included_tons: float, tonnage_cost: float) -> PricingResult:
    overage = expected_tons - included_tons if expected_tons > included_tons else 0
    if overage > 0:
        ctu = compute_ctu(cost + overage * tonnage_cost, fuel_pct, tax_pct)
    else:
        ctu = compute_ctu(cost, fuel_pct, tax_pct)
    return _haul_price(ctu, rate_class)

# -------------------------
# Rent
# -------------------------
def rent(cost: float, tax_pct: float, rate_class: bool) -> PricingResult:
    # Rent carries tax only, no fuel surcharge
    ctu = cost * (1 + tax_pct / 100)
    return PricingResult(ctu=ctu, ptc=round_up(ctu * multiplier(rate_class), RENT_ROUND_TO))

# -------------------------
# Public API
# -------------------------
# The compute_* entry points take raw form values: blanks and unreadable
# text count as 0 unless strict=True, which raises InvalidInput instead.
def compute_delivery(cost, fuel_pct, tax_pct, rate_class: bool, expedited: bool,
                     *, strict: bool = False) -> PricingResult:
    cost = to_number(cost, "delivery_cost", strict)
    fuel_pct = to_number(fuel_pct, "fuel_pct", strict)
    tax_pct = to_number(tax_pct, "tax_pct", strict)
    formula = delivery_expedited if expedited else delivery_standard
    logger.debug("delivery: %s cost=%s fuel=%s tax=%s rca=%s",
                 formula.__name__, cost, fuel_pct, tax_pct, rate_class)
    return formula(cost, fuel_pct, tax_pct, bool(rate_class))

def compute_haul(mode, cost, fuel_pct, tax_pct, rate_class: bool,
                 expected_tons=0, min_or_included_tons=0, tonnage_cost=0,
                 *, strict: bool = False) -> PricingResult:
    """Price the haul line for the selected haul mode.

    ``min_or_included_tons`` is the minimum tonnage for Haul Plus and the
    included tonnage for Inclusion; Flat Rate ignores the tonnage figures.
    """
    mode = HaulMode.parse(mode)
    cost = to_number(cost, "haul_cost", strict)
    fuel_pct = to_number(fuel_pct, "fuel_pct", strict)
    tax_pct = to_number(tax_pct, "tax_pct", strict)
    expected_tons = to_number(expected_tons, "expected_tons", strict)
    threshold_field = "included_tons" if mode is HaulMode.INCLUSION else "minimum_tons"
    threshold = to_number(min_or_included_tons, threshold_field, strict)
    tonnage_cost = to_number(tonnage_cost, "tonnage_cost", strict)
    rate_class = bool(rate_class)

    logger.debug("haul: %s cost=%s fuel=%s tax=%s rca=%s exp=%s threshold=%s per_ton=%s",
                 mode.name, cost, fuel_pct, tax_pct, rate_class,
                 expected_tons, threshold, tonnage_cost)
    if mode is HaulMode.FLAT_RATE:
        return haul_flat(cost, fuel_pct, tax_pct, rate_class)
    if mode is HaulMode.HAUL_PLUS:
        return haul_plus(cost, fuel_pct, tax_pct, rate_class,
                         expected_tons, threshold, tonnage_cost)
    if mode is HaulMode.INCLUSION:
        return haul_inclusion(cost, fuel_pct, tax_pct, rate_class,
                              expected_tons, threshold, tonnage_cost)
    raise ValueError(f"Unhandled haul mode: {mode!r}")

def compute_rent(cost, tax_pct, rate_class: bool, *, strict: bool = False) -> PricingResult:
    cost = to_number(cost, "rent_cost", strict)
    tax_pct = to_number(tax_pct, "tax_pct", strict)
    return rent(cost, tax_pct, bool(rate_class))

def quote(inputs: QuoteInputs) -> Quote:
    threshold = (inputs.included_tons if inputs.haul_mode is HaulMode.INCLUSION
                 else inputs.minimum_tons)
    return Quote(
        delivery=compute_delivery(inputs.delivery_cost, inputs.fuel_pct, inputs.tax_pct,
                                  inputs.rate_class, inputs.expedited),
        haul=compute_haul(inputs.haul_mode, inputs.haul_cost, inputs.fuel_pct, inputs.tax_pct,
                          inputs.rate_class, inputs.expected_tons, threshold,
                          inputs.tonnage_cost),
        rent=compute_rent(inputs.rent_cost, inputs.tax_pct, inputs.rate_class),
    )
