# core/render.py
from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP

import pandas as pd

from .models import Quote

ITEM_COL = "🚛"
COLUMNS = (ITEM_COL, "Our Cost", "Price")


def fmt_money(value: float) -> str:
    """Whole-dollar currency string, halves round up ($102.5 -> $103)."""
    if math.isnan(value):
        return "$NaN"
    if math.isinf(value):
        return "$Infinity" if value > 0 else "$-Infinity"
    whole = Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if whole.is_zero():
        whole = Decimal(0)  # no "$-0"
    return f"${whole}"


def results_frame(quote: Quote) -> pd.DataFrame:
    rows = [
        {ITEM_COL: label, "Our Cost": fmt_money(r.ctu), "Price": fmt_money(r.ptc)}
        for label, r in quote.rows()
    ]
    return pd.DataFrame(rows, columns=list(COLUMNS))
