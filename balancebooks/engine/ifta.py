"""
IFTA quarterly fuel tax report.

Fuel tax is owed where fuel is burned, not where it is bought. Each state's
taxable gallons are its miles divided by the fleet MPG for the quarter;
the difference from gallons actually purchased there, times the state's
tax rate, is owed (positive) or credited (negative).
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Optional

from balancebooks.data.models import IftaEntry, IftaReport, IftaStateLine, IftaSummary
from balancebooks.data.models.parsing import ZERO


def generate_ifta_report(
    entries: Optional[Iterable[Any]], quarter: str, year: int
) -> IftaReport:
    """
    Calculate an IFTA report from per-state mileage and fuel rows.

    Args:
        entries: Rows with state, miles, gallons and tax_rate
        quarter: Quarter identifier (e.g., "Q1")
        year: Year

    Returns:
        IftaReport with states sorted by code
    """
    # Aggregate by state; the first tax rate seen for a state is used
    state_data: dict[str, dict[str, Decimal]] = {}
    for raw in entries or []:
        entry = IftaEntry.coerce(raw)
        if entry is None:
            continue
        data = state_data.setdefault(
            entry.state, {"miles": ZERO, "gallons": ZERO, "tax_rate": entry.tax_rate}
        )
        data["miles"] += entry.miles
        data["gallons"] += entry.gallons

    total_miles = sum((data["miles"] for data in state_data.values()), ZERO)
    total_gallons = sum((data["gallons"] for data in state_data.values()), ZERO)
    overall_mpg = total_miles / total_gallons if total_gallons > 0 else ZERO

    states = []
    for state, data in sorted(state_data.items()):
        taxable_gallons = data["miles"] / overall_mpg if overall_mpg > 0 else ZERO
        net_taxable_gallons = taxable_gallons - data["gallons"]
        states.append(
            IftaStateLine(
                state=state,
                miles=data["miles"],
                gallons=data["gallons"],
                tax_rate=data["tax_rate"],
                taxable_gallons=taxable_gallons,
                net_taxable_gallons=net_taxable_gallons,
                tax_owed=net_taxable_gallons * data["tax_rate"],
            )
        )

    return IftaReport(
        quarter=quarter,
        year=year,
        states=states,
        summary=IftaSummary(
            total_miles=total_miles,
            total_gallons=total_gallons,
            overall_mpg=overall_mpg,
            total_tax_owed=sum((line.tax_owed for line in states), ZERO),
        ),
    )
