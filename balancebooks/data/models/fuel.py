"""
Fuel purchase records.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field

from balancebooks.data.models.base import RecordModel
from balancebooks.data.models.parsing import ZERO, LenientDecimal, LenientText, OptOutFlag


class FuelEntry(RecordModel):
    """A single fuel purchase."""

    id: Optional[str] = None
    date: LenientText = None
    location: LenientText = None
    state: LenientText = None

    gallons: LenientDecimal = ZERO
    price_per_gallon: LenientDecimal = ZERO
    total_amount: LenientDecimal = Field(ZERO, description="Receipt total, 0 when not recorded")

    # Paid up front by the company and recovered from the driver's pay
    is_fuel_advance: OptOutFlag = True

    driver_id: Optional[str] = None
    truck_id: Optional[str] = None

    @property
    def amount(self) -> Decimal:
        """Receipt total, else gallons x price."""
        if self.total_amount:
            return self.total_amount
        return self.gallons * self.price_per_gallon
