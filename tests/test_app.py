"""
Tests for the calculator page, driven through Streamlit's AppTest harness.

Run with: pytest tests/test_app.py -v
"""

import pytest
from streamlit.testing.v1 import AppTest


@pytest.fixture
def app(monkeypatch) -> AppTest:
    monkeypatch.delenv("DUMPSTER_STRICT_INPUT", raising=False)
    monkeypatch.delenv("DUMPSTER_SUPPORT_CONTACT", raising=False)
    at = AppTest.from_file("../Home.py", default_timeout=30)
    at.run()
    assert not at.exception
    return at


def prices(at: AppTest) -> list[str]:
    return list(at.dataframe[0].value["Price"])


def costs(at: AppTest) -> list[str]:
    return list(at.dataframe[0].value["Our Cost"])


class TestCalculatorPage:

    def test_blank_form_renders_three_rows(self, app):
        df = app.dataframe[0].value
        assert list(df["🚛"]) == ["Delivery", "Haul", "Rent"]
        assert costs(app) == ["$0", "$0", "$0"]
        assert prices(app) == ["$30", "$130", "$0"]

    def test_flat_rate_hides_tonnage_fields(self, app):
        keys = {w.key for w in app.text_input}
        assert keys == {"delivery_cost", "haul_cost", "rent_cost", "fuel_pct", "tax_pct"}

    def test_entering_costs_updates_table(self, app):
        app.text_input(key="delivery_cost").input("100")
        app.text_input(key="haul_cost").input("200")
        app.text_input(key="rent_cost").input("99.4")
        app.text_input(key="fuel_pct").input("10")
        app.text_input(key="tax_pct").input("8")
        app.run()

        assert costs(app) == ["$119", "$238", "$107"]

    def test_rca_and_asap(self, app):
        app.text_input(key="delivery_cost").input("100")
        app.checkbox(key="rate_class").check()
        app.checkbox(key="expedited").check()
        app.run()

        assert prices(app)[0] == "$185"

    def test_haul_plus_shows_minimum_tonnage(self, app):
        app.radio(key="haul_mode").set_value("Haul Plus Rate").run()

        keys = {w.key for w in app.text_input}
        assert {"expected_tons", "minimum_tons", "tonnage_cost"} <= keys
        assert "included_tons" not in keys

        app.text_input(key="haul_cost").input("200")
        app.text_input(key="expected_tons").input("12")
        app.text_input(key="minimum_tons").input("10")
        app.text_input(key="tonnage_cost").input("50")
        app.run()

        assert costs(app)[1] == "$300"
        assert prices(app)[1] == "$445"

    def test_inclusion_shows_included_tonnage(self, app):
        app.radio(key="haul_mode").set_value("Inclusion Rate").run()

        keys = {w.key for w in app.text_input}
        assert {"expected_tons", "included_tons", "tonnage_cost"} <= keys
        assert "minimum_tons" not in keys

        app.text_input(key="haul_cost").input("200")
        app.text_input(key="expected_tons").input("8")
        app.text_input(key="included_tons").input("10")
        app.text_input(key="tonnage_cost").input("50")
        app.run()

        assert costs(app)[1] == "$200"

    def test_garbage_reads_as_zero(self, app):
        app.text_input(key="delivery_cost").input("lots").run()

        assert not app.error
        assert prices(app)[0] == "$30"


def test_strict_mode_shows_error_instead_of_table(monkeypatch):
    monkeypatch.setenv("DUMPSTER_STRICT_INPUT", "1")
    at = AppTest.from_file("../Home.py", default_timeout=30)
    at.run()
    at.text_input(key="delivery_cost").input("lots").run()

    assert len(at.error) == 1
    assert "Delivery cost" in at.error[0].value
    assert len(at.dataframe) == 0


def test_support_contact_footer(monkeypatch):
    monkeypatch.setenv("DUMPSTER_SUPPORT_CONTACT", "dispatch@example.com")
    at = AppTest.from_file("../Home.py", default_timeout=30)
    at.run()

    assert at.caption[0].value == "support: dispatch@example.com"


def test_huge_surcharge_renders_infinity(monkeypatch):
    monkeypatch.delenv("DUMPSTER_STRICT_INPUT", raising=False)
    at = AppTest.from_file("../Home.py", default_timeout=30)
    at.run()
    at.text_input(key="haul_cost").input("1000")
    at.text_input(key="fuel_pct").input("1e308")
    at.run()

    assert not at.exception
    assert list(at.dataframe[0].value["Price"])[1] == "$Infinity"
