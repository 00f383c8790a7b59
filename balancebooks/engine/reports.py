"""
Printable pay statement text.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from balancebooks.core.config import CompanyInfo, get_config
from balancebooks.data.models import PayStatement
from balancebooks.engine.calculations import utc_now

PAGE_WIDTH = 60
SECTION_WIDTH = 40


def format_currency(value: Decimal) -> str:
    """Format as dollars and cents: $1234.50, -$12.00."""
    if not value:
        value = value.copy_abs()
    if value.is_signed():
        return f"-${abs(value):.2f}"
    return f"${value:.2f}"


def format_miles(value: Decimal) -> str:
    """Format miles with thousands separators and no trailing zeros."""
    return f"{value.normalize():,f}"


def format_date(value: Any) -> str:
    """Format an ISO date as MM/DD/YYYY, passing anything else through."""
    if isinstance(value, (date, datetime)):
        return value.strftime("%m/%d/%Y")
    if not value:
        return ""
    try:
        return date.fromisoformat(str(value)[:10]).strftime("%m/%d/%Y")
    except ValueError:
        return str(value)


def render_pay_statement_text(
    statement: PayStatement,
    company_info: Optional[CompanyInfo] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Render a pay statement as fixed-width text for printing.

    Args:
        statement: Generated pay statement
        company_info: Header details (defaults to the configured company)
        generated_at: Footer timestamp (defaults to now)

    Returns:
        Statement text
    """
    company = company_info or get_config().get_company_info()
    generated_at = generated_at or utc_now()
    page_rule = "═" * PAGE_WIDTH
    rule = "─" * SECTION_WIDTH
    double_rule = "═" * SECTION_WIDTH

    lines = [page_rule, company.name, company.address, company.phone, page_rule, ""]

    lines += [
        "DRIVER PAY STATEMENT",
        rule,
        f"Driver: {statement.driver_name}",
        f"Period: {format_date(statement.period_start)} - {format_date(statement.period_end)}",
        f"Statement #: {statement.id}",
        f"Status: {statement.status.value.upper()}",
        "",
    ]

    lines += ["EARNINGS", rule]
    for i, load in enumerate(statement.loads, start=1):
        lines += [
            f"{i}. {load.load_number} - {format_date(load.date)}",
            f"   {load.origin} → {load.destination}",
            f"   {format_miles(load.total_miles)} mi | "
            f"Gross: {format_currency(load.gross_pay)} | "
            f"Pay: {format_currency(load.driver_pay)}",
            "",
        ]
    lines += [
        rule,
        f"Total Loads: {statement.load_count}",
        f"Total Miles: {format_miles(statement.total_miles)}",
        f"Total Driver Pay: {format_currency(statement.total_driver_pay)}",
        "",
    ]

    if statement.deductions:
        lines += ["DEDUCTIONS", rule]
        for deduction in statement.deductions:
            lines.append(
                f"{deduction.description or deduction.type.value}: "
                f"-{format_currency(deduction.amount)}"
            )
        lines += [rule, f"Total Deductions: -{format_currency(statement.total_deductions)}", ""]

    lines += [double_rule, f"NET PAY: {format_currency(statement.net_pay)}", double_rule, ""]

    fuel = statement.fuel_summary
    if fuel.transactions > 0:
        lines += [
            "FUEL SUMMARY",
            rule,
            f"Transactions: {fuel.transactions}",
            f"Gallons: {fuel.gallons:.1f}",
            f"Total: {format_currency(fuel.amount)}",
            "",
        ]

    lines += [
        "",
        "─" * PAGE_WIDTH,
        f"Generated: {generated_at:%Y-%m-%d %H:%M}",
        company.name,
    ]
    return "\n".join(lines) + "\n"
