"""
Driver and truck profiles.
"""

from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field, computed_field

from balancebooks.data.models.base import RecordModel
from balancebooks.data.models.parsing import ZERO, LenientDecimal


class PayType(str, Enum):
    """Driver compensation model."""

    PER_MILE = "per_mile"
    PERCENTAGE = "percentage"
    FLAT_RATE = "flat_rate"


def parse_pay_type(value: Any) -> Optional[PayType]:
    """Map a stored payment type to PayType, None when unrecognized."""
    if isinstance(value, PayType):
        return value
    try:
        return PayType(value)
    except ValueError:
        return None


class Driver(RecordModel):
    """Driver profile with contract terms."""

    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    # Contract terms
    payment_type: Annotated[Optional[PayType], BeforeValidator(parse_pay_type)] = None
    pay_rate: LenientDecimal = Field(
        ZERO, description="Dollars per mile, percent of gross, or dollars per load"
    )
    fuel_advance_rate: LenientDecimal = Field(
        ZERO, description="Percent of advanced fuel recovered from pay (0-100)"
    )
    insurance_deduction: LenientDecimal = Field(ZERO, description="Weekly insurance amount")

    @computed_field
    @property
    def full_name(self) -> str:
        """First and last name."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class Truck(RecordModel):
    """Truck profile."""

    id: Optional[str] = None
    unit_number: Optional[str] = None
    target_mpg: LenientDecimal = Field(ZERO, alias="targetMPG")
