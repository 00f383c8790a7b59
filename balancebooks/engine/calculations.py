"""
Driver pay calculations.

Pure functions over in-memory records:
- Per-load pay for each payment model
- Fuel advance and prorated weekly deductions
- Pay statement generation
- Driver and truck performance statistics

Nothing here raises on malformed records. Missing or unparseable numbers
count as zero, missing locations as "Unknown". Records may be passed as
models or as stored dicts.
"""

import math
import secrets
from collections.abc import Callable, Iterable
from datetime import date, datetime, timezone
from decimal import Decimal
from time import time
from typing import Any, Optional, Union

from balancebooks.data.models import (
    Deduction,
    DeductionType,
    Driver,
    DriverStats,
    FuelEntry,
    FuelSummary,
    Load,
    LoadPayDetail,
    PayStatement,
    PayType,
    Truck,
    TruckStats,
    parse_number,
)
from balancebooks.data.models.parsing import ZERO

SECONDS_PER_DAY = 86400
DAYS_PER_WEEK = Decimal("7")
NAN = Decimal("NaN")

PeriodBound = Union[date, datetime, str]
Clock = Callable[[], datetime]
IdFactory = Callable[[], str]

PAY_TYPE_LABELS = {
    PayType.PER_MILE: "Per Mile",
    PayType.PERCENTAGE: "Percentage",
    PayType.FLAT_RATE: "Flat Rate",
}


def utc_now() -> datetime:
    """Default statement clock."""
    return datetime.now(timezone.utc)


def make_statement_id(prefix: str = "ps") -> str:
    """Time-based statement id with a random suffix."""
    return f"{prefix}_{int(time() * 1000)}_{secrets.token_hex(6)}"


def fuel_entry_amount(entry: Any) -> Decimal:
    """
    Dollar amount of a fuel purchase.

    Uses the receipt total when recorded, else gallons x price per gallon,
    else zero.
    """
    entry = FuelEntry.coerce(entry)
    if entry is None:
        return ZERO
    return entry.amount


def _loads(loads: Optional[Iterable[Any]]) -> list[Load]:
    return [Load.coerce(load) for load in loads or [] if load is not None]


def _fuel_entries(fuel_entries: Optional[Iterable[Any]]) -> list[FuelEntry]:
    return [FuelEntry.coerce(entry) for entry in fuel_entries or [] if entry is not None]


def _safe_ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    if not denominator:
        return ZERO
    return numerator / denominator


def _format_number(value: Decimal) -> str:
    """Render 25 as "25" and 2.50 as "2.5"."""
    if value == value.to_integral_value():
        return str(int(value))
    return str(value.normalize())


def calculate_load_pay(load: Any, driver: Any) -> Decimal:
    """
    Calculate driver pay for a single load.

    Args:
        load: Load record
        driver: Driver record with payment_type and pay_rate

    Returns:
        Driver pay for the load; zero for a missing load or driver or an
        unknown payment type
    """
    load = Load.coerce(load)
    driver = Driver.coerce(driver)
    if load is None or driver is None:
        return ZERO

    if driver.payment_type == PayType.PER_MILE:
        return load.total_miles * driver.pay_rate
    if driver.payment_type == PayType.PERCENTAGE:
        return load.rate * (driver.pay_rate / 100)
    if driver.payment_type == PayType.FLAT_RATE:
        return driver.pay_rate
    return ZERO


def calculate_fuel_advance(fuel_entries: Optional[Iterable[Any]], advance_rate: Any) -> Decimal:
    """
    Calculate the fuel advance to recover from driver pay.

    Entries count toward the advance unless explicitly flagged otherwise.

    Args:
        fuel_entries: Fuel entries for the period
        advance_rate: Percent of advanced fuel to deduct (0-100)

    Returns:
        Fuel advance amount
    """
    rate = parse_number(advance_rate)
    if not fuel_entries or not rate:
        return ZERO

    total_fuel = sum(
        (entry.amount for entry in _fuel_entries(fuel_entries) if entry.is_fuel_advance),
        ZERO,
    )
    return total_fuel * (rate / 100)


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            moment = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    # Compare aware and naive bounds on the same UTC footing
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def calculate_proration_days(period_start: PeriodBound, period_end: PeriodBound) -> Optional[int]:
    """Days in a pay period counting both endpoints, None for unparseable bounds."""
    start = _to_datetime(period_start)
    end = _to_datetime(period_end)
    if start is None or end is None:
        return None
    return math.ceil((end - start).total_seconds() / SECONDS_PER_DAY) + 1


def calculate_prorated_deduction(
    weekly_amount: Any, period_start: PeriodBound, period_end: PeriodBound
) -> Decimal:
    """
    Scale a weekly deduction to the length of a pay period.

    A reversed period is not guarded and yields a zero or negative amount.

    Args:
        weekly_amount: Weekly deduction amount
        period_start: Period start date
        period_end: Period end date

    Returns:
        Prorated amount; NaN when either bound is not a date
    """
    amount = parse_number(weekly_amount)
    if not amount:
        return ZERO

    days = calculate_proration_days(period_start, period_end)
    if days is None:
        return NAN
    return amount * Decimal(days) / DAYS_PER_WEEK


def _period_label(value: PeriodBound) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _load_pay_detail(load: Load, driver: Driver) -> LoadPayDetail:
    return LoadPayDetail(
        load_id=load.id,
        load_number=load.load_number or "N/A",
        date=load.date,
        origin=load.origin_name,
        destination=load.destination_name,
        loaded_miles=load.loaded_miles,
        deadhead_miles=load.deadhead_miles,
        total_miles=load.total_miles,
        gross_pay=load.rate,
        driver_pay=calculate_load_pay(load, driver),
    )


def build_deductions(
    driver: Driver,
    fuel_entries: list[FuelEntry],
    period_start: PeriodBound,
    period_end: PeriodBound,
    additional_deductions: Optional[Iterable[Any]] = None,
) -> list[Deduction]:
    """
    Build the deduction lines for a statement.

    Order is fixed: fuel advance, insurance, then additional deductions in
    the order given. Fuel advance is skipped when it comes to zero;
    insurance is kept even when the prorated amount is zero.
    """
    deductions: list[Deduction] = []

    if driver.fuel_advance_rate > 0:
        fuel_advance = calculate_fuel_advance(fuel_entries, driver.fuel_advance_rate)
        if fuel_advance > 0:
            deductions.append(
                Deduction(
                    type=DeductionType.FUEL_ADVANCE,
                    description=f"Fuel Advance ({_format_number(driver.fuel_advance_rate)}%)",
                    amount=fuel_advance,
                )
            )

    if driver.insurance_deduction > 0:
        deductions.append(
            Deduction(
                type=DeductionType.INSURANCE,
                description="Insurance",
                amount=calculate_prorated_deduction(
                    driver.insurance_deduction, period_start, period_end
                ),
            )
        )

    for extra in additional_deductions or []:
        deductions.append(Deduction.coerce(extra))

    return deductions


def summarize_fuel(fuel_entries: list[FuelEntry]) -> FuelSummary:
    """Fuel totals over every entry, advanced or not."""
    return FuelSummary(
        transactions=len(fuel_entries),
        gallons=sum((entry.gallons for entry in fuel_entries), ZERO),
        amount=sum((entry.amount for entry in fuel_entries), ZERO),
    )


def generate_pay_statement(
    driver: Any,
    loads: Optional[Iterable[Any]],
    fuel_entries: Optional[Iterable[Any]],
    period_start: PeriodBound,
    period_end: PeriodBound,
    additional_deductions: Optional[Iterable[Any]] = None,
    *,
    clock: Optional[Clock] = None,
    id_factory: Optional[IdFactory] = None,
) -> PayStatement:
    """
    Generate a complete pay statement for a driver and period.

    Args:
        driver: Driver record
        loads: Loads completed in the period
        fuel_entries: Fuel purchased in the period
        period_start: Period start date
        period_end: Period end date
        additional_deductions: Extra deductions (type, description, amount)
        clock: Source of the created/updated timestamps
        id_factory: Source of the statement id

    Returns:
        Draft PayStatement. Nothing is persisted.
    """
    driver = Driver.coerce(driver)
    if driver is None:
        raise ValueError("A driver is required to generate a pay statement")

    load_records = _loads(loads)
    fuel_records = _fuel_entries(fuel_entries)
    now = (clock or utc_now)()

    # Earnings
    load_details = [_load_pay_detail(load, driver) for load in load_records]
    total_miles = sum((detail.total_miles for detail in load_details), ZERO)
    total_gross_pay = sum((detail.gross_pay for detail in load_details), ZERO)
    total_driver_pay = sum((detail.driver_pay for detail in load_details), ZERO)

    # Deductions
    deductions = build_deductions(
        driver, fuel_records, period_start, period_end, additional_deductions
    )
    total_deductions = sum((deduction.amount for deduction in deductions), ZERO)

    return PayStatement(
        id=(id_factory or make_statement_id)(),
        driver_id=driver.id,
        driver_name=driver.full_name,
        period_start=_period_label(period_start),
        period_end=_period_label(period_end),
        payment_type=driver.payment_type,
        pay_rate=driver.pay_rate,
        loads=load_details,
        load_count=len(load_details),
        total_miles=total_miles,
        total_gross_pay=total_gross_pay,
        total_driver_pay=total_driver_pay,
        deductions=deductions,
        total_deductions=total_deductions,
        net_pay=total_driver_pay - total_deductions,
        fuel_summary=summarize_fuel(fuel_records),
        created_at=now,
        updated_at=now,
    )


def _fleet_totals(loads: list[Load], fuel_entries: list[FuelEntry]) -> dict[str, Any]:
    return {
        "total_loads": len(loads),
        "total_miles": sum((load.total_miles for load in loads), ZERO),
        "total_revenue": sum((load.rate for load in loads), ZERO),
        "total_fuel_gallons": sum((entry.gallons for entry in fuel_entries), ZERO),
        "total_fuel_cost": sum((entry.amount for entry in fuel_entries), ZERO),
    }


def calculate_driver_stats(
    driver: Any, loads: Optional[Iterable[Any]], fuel_entries: Optional[Iterable[Any]]
) -> DriverStats:
    """
    Calculate performance statistics for a driver.

    Only loads and fuel entries assigned to the driver are counted. Ratios
    with a zero denominator are reported as zero.
    """
    driver = Driver.coerce(driver)
    if driver is None:
        return DriverStats()

    driver_loads = [load for load in _loads(loads) if load.driver_id == driver.id]
    driver_fuel = [entry for entry in _fuel_entries(fuel_entries) if entry.driver_id == driver.id]
    totals = _fleet_totals(driver_loads, driver_fuel)

    return DriverStats(
        **totals,
        avg_mpg=_safe_ratio(totals["total_miles"], totals["total_fuel_gallons"]),
        revenue_per_mile=_safe_ratio(totals["total_revenue"], totals["total_miles"]),
        fuel_cost_per_mile=_safe_ratio(totals["total_fuel_cost"], totals["total_miles"]),
    )


def calculate_truck_stats(
    truck: Any, loads: Optional[Iterable[Any]], fuel_entries: Optional[Iterable[Any]]
) -> TruckStats:
    """
    Calculate performance statistics for a truck.

    mpg_variance is the percent above (positive) or below (negative) the
    truck's target MPG, zero when no target is set.
    """
    truck = Truck.coerce(truck)
    if truck is None:
        return TruckStats()

    truck_loads = [load for load in _loads(loads) if load.truck_id == truck.id]
    truck_fuel = [entry for entry in _fuel_entries(fuel_entries) if entry.truck_id == truck.id]
    totals = _fleet_totals(truck_loads, truck_fuel)

    actual_mpg = _safe_ratio(totals["total_miles"], totals["total_fuel_gallons"])
    target_mpg = truck.target_mpg
    mpg_variance = ((actual_mpg - target_mpg) / target_mpg) * 100 if target_mpg else ZERO

    return TruckStats(
        **totals,
        actual_mpg=actual_mpg,
        target_mpg=target_mpg,
        mpg_variance=mpg_variance,
        cost_per_mile=_safe_ratio(totals["total_fuel_cost"], totals["total_miles"]),
    )


def pay_type_label(pay_type: Any) -> str:
    """Display name for a payment type."""
    try:
        return PAY_TYPE_LABELS[PayType(pay_type)]
    except ValueError:
        return "Unknown"


def format_pay_rate(pay_type: Any, pay_rate: Any) -> str:
    """
    Format a pay rate for display.

    Examples: "$0.55/mi", "25%", "$500.00/load".
    """
    rate = parse_number(pay_rate)
    try:
        pay_type = PayType(pay_type)
    except ValueError:
        return _format_number(rate)

    if pay_type == PayType.PER_MILE:
        return f"${rate:.2f}/mi"
    if pay_type == PayType.PERCENTAGE:
        return f"{_format_number(rate)}%"
    return f"${rate:.2f}/load"
