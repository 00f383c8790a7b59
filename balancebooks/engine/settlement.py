"""
Settlement Engine - Driver pay statements and performance statistics.

This engine:
- Generates pay statements from a driver's contract terms, loads and fuel
- Applies fuel advance, prorated insurance and ad-hoc deductions
- Reports driver and truck performance statistics
- Keeps an audit trail of every calculation
"""

from collections.abc import Iterable
from datetime import datetime
from functools import partial
from time import time
from typing import Any, Optional

from balancebooks.data.models import DriverStats, PayStatement, TruckStats
from balancebooks.engine.base import BaseEngine, CalculationRecord
from balancebooks.engine.calculations import (
    Clock,
    IdFactory,
    PeriodBound,
    calculate_driver_stats,
    calculate_truck_stats,
    generate_pay_statement,
    make_statement_id,
    utc_now,
)
from balancebooks.engine.reports import render_pay_statement_text


class SettlementEngine(BaseEngine):
    """
    Settlement Engine for driver pay.

    Statement ids and timestamps come from the injected id factory and
    clock, so a fixed clock and id factory make generation reproducible.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        id_factory: Optional[IdFactory] = None,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the settlement engine.

        Args:
            clock: Source of statement timestamps (defaults to UTC now)
            id_factory: Source of statement ids (defaults to the configured
                prefix plus a time-based id)
            **kwargs: Passed to BaseEngine
        """
        super().__init__(engine_name="settlement", **kwargs)

        self.clock = clock or utc_now
        if id_factory is None:
            prefix = self.config_manager.get_pay_statement_config().id_prefix
            id_factory = partial(make_statement_id, prefix)
        self.id_factory = id_factory

    def generate_statement(
        self,
        driver: Any,
        loads: Optional[Iterable[Any]],
        fuel_entries: Optional[Iterable[Any]],
        period_start: PeriodBound,
        period_end: PeriodBound,
        additional_deductions: Optional[Iterable[Any]] = None,
    ) -> PayStatement:
        """
        Generate a driver pay statement for a period.

        Args:
            driver: Driver record with contract terms
            loads: Loads completed in the period
            fuel_entries: Fuel purchased in the period
            period_start: Settlement period start
            period_end: Settlement period end
            additional_deductions: Extra deductions for this statement

        Returns:
            Draft PayStatement; the caller persists it
        """
        start_time = time()
        loads = list(loads or [])
        fuel_entries = list(fuel_entries or [])
        additional_deductions = list(additional_deductions or [])

        self.logger.info(
            "generating_pay_statement",
            loads=len(loads),
            fuel_entries=len(fuel_entries),
            additional_deductions=len(additional_deductions),
            period_start=str(period_start),
            period_end=str(period_end),
        )

        try:
            statement = generate_pay_statement(
                driver,
                loads,
                fuel_entries,
                period_start,
                period_end,
                additional_deductions,
                clock=self.clock,
                id_factory=self.id_factory,
            )
        except Exception as e:
            self.logger.error("pay_statement_failed", error=str(e))
            raise

        self.logger.info(
            "pay_statement_generated",
            statement_id=statement.id,
            driver_id=statement.driver_id,
            total_driver_pay=str(statement.total_driver_pay),
            total_deductions=str(statement.total_deductions),
            net_pay=str(statement.net_pay),
        )

        self.log_calculation(
            CalculationRecord(
                timestamp=self.clock(),
                engine_name=self.engine_name,
                calculation_type="pay_statement",
                input_data={
                    "driver_id": statement.driver_id,
                    "loads": len(loads),
                    "fuel_entries": len(fuel_entries),
                    "period_start": statement.period_start,
                    "period_end": statement.period_end,
                },
                output_data={
                    "statement_id": statement.id,
                    "total_driver_pay": str(statement.total_driver_pay),
                    "total_deductions": str(statement.total_deductions),
                    "net_pay": str(statement.net_pay),
                },
                execution_time_seconds=time() - start_time,
            )
        )

        return statement

    def driver_stats(
        self, driver: Any, loads: Optional[Iterable[Any]], fuel_entries: Optional[Iterable[Any]]
    ) -> DriverStats:
        """Calculate performance statistics for a driver."""
        start_time = time()
        stats = calculate_driver_stats(driver, loads, fuel_entries)

        self.log_calculation(
            CalculationRecord(
                timestamp=self.clock(),
                engine_name=self.engine_name,
                calculation_type="driver_stats",
                input_data={"driver_id": _record_id(driver)},
                output_data=stats.model_dump(mode="json"),
                execution_time_seconds=time() - start_time,
            )
        )
        return stats

    def truck_stats(
        self, truck: Any, loads: Optional[Iterable[Any]], fuel_entries: Optional[Iterable[Any]]
    ) -> TruckStats:
        """Calculate performance statistics for a truck."""
        start_time = time()
        stats = calculate_truck_stats(truck, loads, fuel_entries)

        self.log_calculation(
            CalculationRecord(
                timestamp=self.clock(),
                engine_name=self.engine_name,
                calculation_type="truck_stats",
                input_data={"truck_id": _record_id(truck)},
                output_data=stats.model_dump(mode="json"),
                execution_time_seconds=time() - start_time,
            )
        )
        return stats

    def render_statement(
        self, statement: PayStatement, generated_at: Optional[datetime] = None
    ) -> str:
        """Render a statement as printable text with the configured company header."""
        return render_pay_statement_text(
            statement,
            company_info=self.config_manager.get_company_info(),
            generated_at=generated_at or self.clock(),
        )

    def execute(self, *args: Any, **kwargs: Any) -> PayStatement:
        """
        Execute statement generation (delegates to generate_statement).

        Args:
            *args: Positional arguments for generate_statement
            **kwargs: Keyword arguments for generate_statement

        Returns:
            PayStatement
        """
        return self.generate_statement(*args, **kwargs)


def _record_id(record: Any) -> Optional[str]:
    value = record.get("id") if isinstance(record, dict) else getattr(record, "id", None)
    return None if value is None else str(value)


def main() -> None:
    """Example usage of the settlement engine."""
    from balancebooks.core.logging import configure_logging

    configure_logging(fmt="console")

    engine = SettlementEngine()

    driver = {
        "id": "DRV-001",
        "firstName": "Sam",
        "lastName": "Rivera",
        "paymentType": "per_mile",
        "payRate": "0.55",
        "fuelAdvanceRate": 50,
        "insuranceDeduction": 175,
    }

    loads = [
        {
            "id": "L-1",
            "loadNumber": "TX-4471",
            "date": "2024-01-02",
            "stops": [{"location": "Tulsa, OK"}, {"location": "Dallas, TX"}],
            "loadedMiles": 257,
            "deadheadMiles": 18,
            "rate": 850,
            "driverId": "DRV-001",
        },
        {
            "id": "L-2",
            "loadNumber": "TX-4490",
            "date": "2024-01-04",
            "origin": "Dallas, TX",
            "destination": "Houston, TX",
            "loadedMiles": 239,
            "deadheadMiles": 12,
            "rate": 720,
            "driverId": "DRV-001",
        },
    ]

    fuel_entries = [
        {"gallons": 62.4, "pricePerGallon": 3.659, "driverId": "DRV-001"},
        {"gallons": 48, "pricePerGallon": 3.499, "totalAmount": 167.95, "driverId": "DRV-001"},
        {"gallons": 20, "pricePerGallon": 3.899, "isFuelAdvance": False, "driverId": "DRV-001"},
    ]

    statement = engine.generate_statement(
        driver,
        loads,
        fuel_entries,
        "2024-01-01",
        "2024-01-07",
        additional_deductions=[{"description": "Scale ticket", "amount": "12.50"}],
    )

    print(engine.render_statement(statement))

    stats = engine.driver_stats(driver, loads, fuel_entries)
    print("DRIVER STATS:")
    print(f"  Miles: {stats.total_miles:,}")
    print(f"  Revenue/mile: ${stats.revenue_per_mile:.2f}")
    print(f"  Avg MPG: {stats.avg_mpg:.2f}")
    print(f"  Fuel cost/mile: ${stats.fuel_cost_per_mile:.2f}")


if __name__ == "__main__":
    main()
