"""
Bookkeeping engines.

This module contains:
- Calculations: Pure driver pay and fleet statistics functions
- Settlement: Pay statement generation with logging and audit history
- IFTA: Quarterly fuel tax report
- Reports: Printable pay statement text
"""

from .base import BaseEngine, CalculationRecord
from .calculations import (
    calculate_driver_stats,
    calculate_fuel_advance,
    calculate_load_pay,
    calculate_prorated_deduction,
    calculate_truck_stats,
    format_pay_rate,
    fuel_entry_amount,
    generate_pay_statement,
    pay_type_label,
)
from .ifta import generate_ifta_report
from .reports import render_pay_statement_text
from .settlement import SettlementEngine

__all__ = [
    "BaseEngine",
    "CalculationRecord",
    "SettlementEngine",
    "calculate_load_pay",
    "calculate_fuel_advance",
    "calculate_prorated_deduction",
    "fuel_entry_amount",
    "generate_pay_statement",
    "calculate_driver_stats",
    "calculate_truck_stats",
    "pay_type_label",
    "format_pay_rate",
    "generate_ifta_report",
    "render_pay_statement_text",
]
