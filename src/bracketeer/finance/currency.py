"""Currency display formatting."""

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

from bracketeer.constants import CURRENCY_SYMBOLS, DEFAULT_CURRENCY
from bracketeer.utils.money import quantize_half_up, to_decimal
from bracketeer.utils.validation import Number, ensure_finite


def format_currency(amount: Number, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount with symbol, thousands separators and two decimals.

    Codes without a known symbol are written in front of the number.

    Examples:
        >>> format_currency(1234.56, "MXN")
        '$1,234.56'
        >>> format_currency(-5, "EUR")
        '-€5.00'
        >>> format_currency(12, "JPY")
        'JPY 12.00'
    """
    ensure_finite(amount, "amount")
    value = quantize_half_up(to_decimal(amount))
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"

    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code} {digits}"
    return f"{sign}{symbol}{digits}"
