import math

import pytest

from core.models import PricingResult, Quote
from core.render import COLUMNS, fmt_money, results_frame


@pytest.mark.parametrize("value,expected", [
    (130, "$130"),
    (237.6, "$238"),
    (102.5, "$103"),
    (102.49, "$102"),
    (0, "$0"),
    (-0.4, "$0"),
    (-5, "$-5"),
])
def test_fmt_money(value, expected):
    assert fmt_money(value) == expected


def test_results_frame():
    quote = Quote(
        delivery=PricingResult(ctu=100, ptc=130),
        haul=PricingResult(ctu=237.6, ptc=380),
        rent=PricingResult(ctu=99.4, ptc=104),
    )

    df = results_frame(quote)

    assert tuple(df.columns) == COLUMNS
    assert df.to_dict("records") == [
        {"🚛": "Delivery", "Our Cost": "$100", "Price": "$130"},
        {"🚛": "Haul", "Our Cost": "$238", "Price": "$380"},
        {"🚛": "Rent", "Our Cost": "$99", "Price": "$104"},
    ]


@pytest.mark.parametrize("value,expected", [
    (math.inf, "$Infinity"),
    (-math.inf, "$-Infinity"),
    (math.nan, "$NaN"),
])
def test_fmt_money_non_finite(value, expected):
    assert fmt_money(value) == expected
