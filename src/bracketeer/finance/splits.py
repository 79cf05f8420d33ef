"""Platform fee, net revenue and prize split calculations.

Inputs accepted as given: negative gross amounts, percentages outside
0-100, and distributions whose percentages do not add up to 100 (the
remainder of the net pool stays with the organizer).

NaN, infinite and non-numeric values are rejected with ValidationError.
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

from typing import Iterable, List, Optional

from bracketeer.constants import DEFAULT_PLATFORM_FEE_PERCENT
from bracketeer.models.prize import (
    DistributionLike,
    FinancialConfig,
    FinancialSummary,
    PrizeSplit,
    to_distribution,
)
from bracketeer.utils import setup_logger
from bracketeer.utils.money import percentage_of, round_half_up
from bracketeer.utils.validation import Number, ensure_finite

logger = setup_logger(__name__)


def calculate_platform_fee(
    gross_amount: Number, fee_percent: Number = DEFAULT_PLATFORM_FEE_PERCENT
) -> float:
    """Return the platform's cut of a gross amount, rounded to cents.

    Examples:
        >>> calculate_platform_fee(55.55)
        5.56
        >>> calculate_platform_fee(99.99)
        10.0
    """
    ensure_finite(gross_amount, "gross_amount")
    ensure_finite(fee_percent, "fee_percent")
    return percentage_of(gross_amount, fee_percent)


def calculate_net_revenue(
    gross_amount: Number, fee_percent: Number = DEFAULT_PLATFORM_FEE_PERCENT
) -> float:
    """Return gross minus the platform fee, with no further rounding."""
    fee = calculate_platform_fee(gross_amount, fee_percent)
    return float(gross_amount) - fee


def calculate_prize_splits(
    net_revenue: Number, distributions: Iterable[DistributionLike]
) -> List[PrizeSplit]:
    """Apply each distribution's percentage to the net pool.

    Every amount is rounded on its own, so splits such as 33.33/33.33/33.34
    add back up exactly while awkward percentages may drift by a cent or two.

    Args:
        net_revenue: Pool to divide
        distributions: PrizeDistribution objects or mappings with
            ``position`` and ``percentage`` keys

    Returns:
        One PrizeSplit per distribution, in input order
    """
    ensure_finite(net_revenue, "net_revenue")
    splits = []
    for distribution in map(to_distribution, distributions):
        splits.append(
            PrizeSplit(
                position=distribution.position,
                percentage=distribution.percentage,
                amount=percentage_of(net_revenue, distribution.percentage),
                label=distribution.label,
            )
        )
    return splits


def calculate_organizer_residual(
    net_revenue: Number, prizes: Iterable[PrizeSplit]
) -> float:
    """Net revenue left after every prize is paid."""
    ensure_finite(net_revenue, "net_revenue")
    return round_half_up(float(net_revenue) - sum(p.amount for p in prizes))


def summarize(
    gross_amount: Number,
    distributions: Iterable[DistributionLike] = (),
    config: Optional[FinancialConfig] = None,
) -> FinancialSummary:
    """Run the full fee, net and prize pipeline with one fee setting.

    Args:
        gross_amount: Total collected
        distributions: Prize distribution entries
        config: Fee settings, defaults to FinancialConfig()

    Returns:
        FinancialSummary with every derived figure
    """
    config = config or FinancialConfig()
    fee = calculate_platform_fee(gross_amount, config.platform_fee_percent)
    net = calculate_net_revenue(gross_amount, config.platform_fee_percent)
    prizes = calculate_prize_splits(net, distributions)
    residual = calculate_organizer_residual(net, prizes)

    logger.debug(
        f"Summarized gross {gross_amount} {config.currency}: fee {fee}, "
        f"net {net}, {len(prizes)} prize(s), residual {residual}"
    )
    return FinancialSummary(
        gross_amount=gross_amount,
        platform_fee=fee,
        net_revenue=net,
        prizes=prizes,
        organizer_residual=residual,
        currency=config.currency,
    )
