"""
Fixed-point money helpers.

All amounts in the system are Decimals with exactly three
fractional digits (fils precision for KD).
"""

from decimal import Decimal, ROUND_HALF_UP

MONEY_SCALE = 3
MONEY_QUANTUM = Decimal("0.001")

# Integer digits a stored amount can hold (Numeric(15, 3)).
MONEY_INTEGER_DIGITS = 12


def to_money(value: Decimal | int | float | str) -> Decimal:
    """
    Quantize a number to three decimal places.

    Values too large to store are returned unquantized. Every
    limit in the system rejects them, and quantizing them would
    overflow the decimal context.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    if value.is_finite() and value.adjusted() >= MONEY_INTEGER_DIGITS:
        return value
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
