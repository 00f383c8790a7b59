"""
Base model for stored bookkeeping records.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RecordModel(BaseModel):
    """
    Base class for records read from and written to the local store.

    Records are stored with camelCase keys (loadedMiles, pricePerGallon),
    accepted here alongside the snake_case field names. Keys the engine
    doesn't use are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        allow_inf_nan=True,
    )

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Return value as an instance of this model (dicts are validated)."""
        if value is None or isinstance(value, cls):
            return value
        return cls.model_validate(value)

    def to_record(self) -> dict[str, Any]:
        """Dump to the camelCase JSON-compatible record the store persists."""
        return self.model_dump(mode="json", by_alias=True)
