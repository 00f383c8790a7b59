"""Tests for printable pay statement text."""

from datetime import datetime
from decimal import Decimal

from balancebooks.core.config import CompanyInfo
from balancebooks.engine.calculations import generate_pay_statement
from balancebooks.engine.reports import (
    format_currency,
    format_date,
    format_miles,
    render_pay_statement_text,
)

GENERATED_AT = datetime(2024, 1, 8, 9, 30)


class TestFormatting:
    """Test value formatting helpers."""

    def test_format_currency(self):
        assert format_currency(Decimal("302.5")) == "$302.50"
        assert format_currency(Decimal("-480.5")) == "-$480.50"
        assert format_currency(Decimal("0")) == "$0.00"

    def test_negative_zero_is_plain_zero(self):
        assert format_currency(Decimal("-0")) == "$0.00"
        assert format_currency(Decimal("-0.00")) == "$0.00"

    def test_format_miles(self):
        assert format_miles(Decimal("800")) == "800"
        assert format_miles(Decimal("12500.50")) == "12,500.5"

    def test_format_date(self):
        assert format_date("2024-01-07") == "01/07/2024"
        assert format_date("2024-01-07T10:00:00") == "01/07/2024"
        assert format_date("last week") == "last week"
        assert format_date(None) == ""


class TestRenderPayStatement:
    """Test statement rendering."""

    def _statement(self, driver, loads, fuel_entries, clock, **kwargs):
        return generate_pay_statement(
            driver,
            loads,
            fuel_entries,
            "2024-01-01",
            "2024-01-07",
            clock=clock,
            id_factory=lambda: "ps_1704700000000_abc123",
            **kwargs,
        )

    def test_full_statement(self, per_mile_driver, driver_loads, fuel_entries, fixed_clock):
        statement = self._statement(
            per_mile_driver,
            driver_loads,
            fuel_entries,
            fixed_clock,
            additional_deductions=[{"description": "Toll", "amount": "45.50"}],
        )
        company = CompanyInfo(name="Red River Hauling", address="Tulsa, OK", phone="918-555-0142")

        text = render_pay_statement_text(statement, company, generated_at=GENERATED_AT)

        assert text.startswith("═" * 60 + "\nRed River Hauling\n")
        assert "Driver: Sam Rivera" in text
        assert "Period: 01/01/2024 - 01/07/2024" in text
        assert "Statement #: ps_1704700000000_abc123" in text
        assert "Status: DRAFT" in text
        assert "1. TX-4471 - 01/02/2024" in text
        assert "   Tulsa, OK → Dallas, TX" in text
        assert "   550 mi | Gross: $1200.00 | Pay: $302.50" in text
        assert "Total Loads: 2" in text
        assert "Total Miles: 800" in text
        assert "Total Driver Pay: $440.00" in text
        assert "DEDUCTIONS" in text
        assert "Fuel Advance (50%): -$175.00" in text
        assert "Insurance: -$700.00" in text
        assert "Toll: -$45.50" in text
        assert "Total Deductions: -$920.50" in text
        assert "NET PAY: -$480.50" in text
        assert "FUEL SUMMARY" in text
        assert "Transactions: 2" in text
        assert "Gallons: 150.0" in text
        assert "Total: $560.00" in text
        assert "Generated: 2024-01-08 09:30" in text

    def test_sections_omitted_when_empty(self, fixed_clock, config_manager, monkeypatch):
        monkeypatch.setattr("balancebooks.engine.reports.get_config", lambda: config_manager)
        driver = {"firstName": "Ana", "lastName": "Lopez", "paymentType": "flat_rate", "payRate": 500}
        statement = self._statement(driver, [{"loadNumber": "A-1"}], [], fixed_clock)

        text = render_pay_statement_text(statement, generated_at=GENERATED_AT)

        assert "DEDUCTIONS" not in text
        assert "FUEL SUMMARY" not in text
        assert "NET PAY: $500.00" in text
        assert text.startswith("═" * 60 + "\nRed River Hauling\n12 Depot Rd, Tulsa, OK\n918-555-0142\n")
