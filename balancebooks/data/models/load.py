"""
Load data model - represents a freight job.
"""

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BeforeValidator, Field, computed_field

from balancebooks.data.models.base import RecordModel
from balancebooks.data.models.parsing import ZERO, LenientDecimal, LenientText, parse_record_list


class Stop(RecordModel):
    """A pickup or delivery stop on a load."""

    location: LenientText = None
    stop_type: LenientText = Field(None, alias="type")
    date: LenientText = None


class Load(RecordModel):
    """
    Represents a completed freight load.

    Stops are ordered: the first is the origin, the last the destination.
    Older records carry plain origin/destination strings instead.
    """

    # Identification
    id: Optional[str] = Field(None, description="Unique load identifier")
    load_number: Optional[str] = Field(None, description="Broker/customer load number")
    date: LenientText = Field(None, description="Load date")

    # Locations
    stops: Annotated[list[Stop], BeforeValidator(parse_record_list)] = Field(default_factory=list)
    origin: LenientText = None
    destination: LenientText = None

    # Distance
    loaded_miles: LenientDecimal = Field(ZERO, description="Miles driven with cargo")
    deadhead_miles: LenientDecimal = Field(ZERO, description="Empty miles to pickup")

    # Financial
    rate: LenientDecimal = Field(ZERO, description="Gross revenue (USD)")

    # Assignment
    driver_id: Optional[str] = None
    truck_id: Optional[str] = None

    @computed_field
    @property
    def total_miles(self) -> Decimal:
        """Total miles including deadhead."""
        return self.loaded_miles + self.deadhead_miles

    @property
    def origin_name(self) -> str:
        """Origin from the first stop, then the origin field."""
        if self.stops and self.stops[0].location:
            return self.stops[0].location
        return self.origin or "Unknown"

    @property
    def destination_name(self) -> str:
        """Destination from the last stop, then the destination field."""
        if self.stops and self.stops[-1].location:
            return self.stops[-1].location
        return self.destination or "Unknown"
