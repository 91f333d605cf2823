"""Amount parsing utilities."""

import math
from decimal import Decimal, InvalidOperation

from finance_wrapped.domain.errors import AmountParseError


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles the notations found in bank exports:
    - "123.45"
    - "$123.45"
    - "-12.3"
    - "-$123.45"
    - "1,234.56"
    - "(50.00)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        AmountParseError: If amount string cannot be parsed
    """
    cleaned = (amount_str or "").strip()
    cleaned = cleaned.replace("$", "")
    cleaned = cleaned.replace(",", "")

    # Handle parentheses notation (negative)
    if cleaned.startswith("(") and cleaned.endswith(")"):
        cleaned = "-" + cleaned[1:-1].strip()

    cleaned = cleaned.strip()
    if not cleaned:
        raise AmountParseError(f"Could not parse amount '{amount_str}': empty value")
    # Decimal() would otherwise accept "1_000"
    if "_" in cleaned:
        raise AmountParseError(f"Could not parse amount '{amount_str}'")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise AmountParseError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise AmountParseError(f"Could not parse amount '{amount_str}': not a finite number")
    if not math.isfinite(float(amount)):
        raise AmountParseError(f"Could not parse amount '{amount_str}': out of range")
    return amount
