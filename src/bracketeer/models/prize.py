"""Prize distribution and financial summary data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from bracketeer.constants import DEFAULT_CURRENCY, DEFAULT_PLATFORM_FEE_PERCENT
from bracketeer.exceptions import ValidationError
from bracketeer.utils.validation import ensure_finite

Position = Union[int, str]


@dataclass(frozen=True)
class PrizeDistribution:
    """Share of the net pool awarded to a finishing position.

    Attributes
    ----------
    position : int or str
        Ordinal ("1", 2) or a label such as "top8".
    percentage : float
        Share of the net pool, nominally 0-100.
    label : str or None
        Display label, e.g. "1er Lugar".
    """

    position: Position
    percentage: float
    label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize distribution to dictionary."""
        data = {"position": self.position, "percentage": self.percentage}
        if self.label is not None:
            data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PrizeDistribution":
        """Deserialize distribution from dictionary."""
        if "position" not in data or "percentage" not in data:
            raise ValidationError(
                "Prize distribution requires 'position' and 'percentage'"
            )
        return cls(
            position=data["position"],
            percentage=ensure_finite(data["percentage"], "percentage"),
            label=data.get("label"),
        )


DistributionLike = Union[PrizeDistribution, Mapping[str, Any]]


def to_distribution(value: DistributionLike) -> PrizeDistribution:
    if isinstance(value, PrizeDistribution):
        ensure_finite(value.percentage, "percentage")
        return value
    return PrizeDistribution.from_dict(value)


@dataclass(frozen=True)
class PrizeSplit:
    """A distribution entry with its computed monetary amount."""

    position: Position
    percentage: float
    amount: float
    label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "position": self.position,
            "percentage": self.percentage,
            "amount": self.amount,
        }
        if self.label is not None:
            data["label"] = self.label
        return data


@dataclass(frozen=True)
class FinancialConfig:
    """Fee settings shared by every calculation in one pipeline run.

    Attributes
    ----------
    platform_fee_percent : float
        Share of gross kept by the platform.
    currency : str
        ISO currency code used for display.
    """

    platform_fee_percent: float = DEFAULT_PLATFORM_FEE_PERCENT
    currency: str = DEFAULT_CURRENCY


@dataclass(frozen=True)
class FinancialSummary:
    """Derived breakdown of one tournament's money."""

    gross_amount: float
    platform_fee: float
    net_revenue: float
    prizes: List[PrizeSplit] = field(default_factory=list)
    organizer_residual: float = 0.0
    currency: str = DEFAULT_CURRENCY

    @property
    def total_prizes(self) -> float:
        return sum(p.amount for p in self.prizes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize summary to dictionary."""
        return {
            "gross_amount": self.gross_amount,
            "platform_fee": self.platform_fee,
            "net_revenue": self.net_revenue,
            "prizes": [p.to_dict() for p in self.prizes],
            "organizer_residual": self.organizer_residual,
            "currency": self.currency,
        }
