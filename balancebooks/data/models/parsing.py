"""
Lenient value parsing applied at the record boundary.

Stored records come from form input and older storage formats, so numbers
may arrive as strings, blanks or garbage. Every numeric field on the models
runs through parse_number so downstream code can assume a Decimal.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator

ZERO = Decimal("0")


def parse_number(value: Any) -> Decimal:
    """
    Parse a value into a Decimal, falling back to zero.

    Args:
        value: Number, numeric string, or anything else

    Returns:
        Decimal value, or Decimal("0") when the value is missing,
        unparseable, or a non-finite string or float
    """
    if value is None or isinstance(value, bool):
        return ZERO

    # Already-typed values pass through, including NaN from bad period dates
    if isinstance(value, Decimal):
        return value

    # str() keeps floats like 0.55 from expanding to their binary value
    text = str(value).strip().replace(",", "")
    if not text:
        return ZERO
    try:
        result = Decimal(text)
    except (InvalidOperation, ValueError):
        return ZERO

    if not result.is_finite():
        return ZERO
    return result


def parse_flag(value: Any) -> bool:
    """Parse an opt-out flag: only an explicit false turns it off."""
    if value is False:
        return False
    if isinstance(value, str) and value.strip().lower() == "false":
        return False
    return True


def parse_text(value: Any) -> Optional[str]:
    """
    Parse an optional text field such as a date or location.

    date/datetime values become ISO strings, numbers become their string
    form, and nested structures are treated as missing.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (dict, list, tuple, set)):
        return None
    return str(value)


def parse_record_list(value: Any) -> list[Any]:
    """Keep the record-shaped entries of a nested list; anything else is empty."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, (dict, BaseModel))]


LenientDecimal = Annotated[Decimal, BeforeValidator(parse_number)]
LenientText = Annotated[Optional[str], BeforeValidator(parse_text)]
OptOutFlag = Annotated[bool, BeforeValidator(parse_flag)]
