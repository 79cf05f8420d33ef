"""Currency rounding.

Every money computation in Bracketeer rounds through :func:`round_half_up`,
which rounds half away from zero on the decimal representation of the value.
The built-in :func:`round` uses banker's rounding on binary floats and would
turn 5.555 into 5.55.
"""

# Bracketeer
# Copyright (C) 2025  Bracketeer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from decimal import ROUND_HALF_UP, Decimal, localcontext

from bracketeer.constants import MONEY_DECIMAL_PLACES
from bracketeer.utils.validation import Number, ensure_finite


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal through its shortest repr.

    ``Decimal(5.555)`` carries the binary error of the float, while
    ``Decimal("5.555")`` is exact.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(repr(value)) if isinstance(value, float) else Decimal(value)


def quantize_half_up(value: Decimal, places: int = MONEY_DECIMAL_PLACES) -> Decimal:
    """Round a Decimal half away from zero to ``places`` decimals.

    Precision grows with the magnitude so large finite amounts keep every
    integer digit.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_half_up(value: Number, places: int = MONEY_DECIMAL_PLACES) -> float:
    """Round a monetary value half away from zero.

    Args:
        value: Amount to round
        places: Number of decimal places to keep (2 for cents)

    Returns:
        The rounded amount as a float

    Raises:
        ValidationError: If the value is NaN, infinite or not numeric

    Examples:
        >>> round_half_up(5.555)
        5.56
        >>> round_half_up(-2.345)
        -2.35
        >>> round_half_up(2.5, 0)
        3.0
    """
    ensure_finite(value, "amount")
    return float(quantize_half_up(to_decimal(value), places))


def percentage_of(amount: Number, percentage: Number) -> float:
    """Return ``amount * percentage / 100`` rounded to cents.

    The product is formed in decimal arithmetic so that 10% of 55.55 is
    exactly 5.555 before rounding.
    """
    ensure_finite(amount, "amount")
    ensure_finite(percentage, "percentage")
    amount, percentage = to_decimal(amount), to_decimal(percentage)
    with localcontext() as ctx:
        digits = len(amount.as_tuple().digits) + len(percentage.as_tuple().digits)
        ctx.prec = max(ctx.prec, digits + 2)
        raw = amount * percentage / Decimal(100)
    return float(quantize_half_up(raw))
