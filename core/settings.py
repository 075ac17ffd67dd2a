# Core settings and constants for the dumpster pricing calculator
import os

# Markup multipliers
STANDARD_MULTIPLIER = 1.04           # 4% markup on the standard rate class
RCA_MULTIPLIER = 1.03                # 3% markup when RCA is checked

# Delivery additional costs
DELIVERY_ADDITIONAL = 25             # standard delivery
DELIVERY_ADDITIONAL_RCA = 20         # standard delivery, RCA
DELIVERY_ADDITIONAL_ASAP = 75        # ASAP delivery, either rate class

# Haul additional costs (flat rate, haul plus and inclusion share these)
HAUL_ADDITIONAL = 125
HAUL_ADDITIONAL_RCA = 85

# Rounding
DELIVERY_ROUND_TO = 5                # delivery/haul prices land on $5 steps
HAUL_ROUND_TO = 5
RENT_ROUND_TO = 1                    # rent rounds up to the whole dollar

# -------------------------
# Runtime options (environment)
# -------------------------
_TRUTHY = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def strict_input() -> bool:
    """True when bad form input should be rejected instead of read as 0."""
    return env_flag("DUMPSTER_STRICT_INPUT")


def log_level() -> str:
    return os.environ.get("DUMPSTER_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"


def support_contact() -> str:
    return os.environ.get("DUMPSTER_SUPPORT_CONTACT", "").strip()
