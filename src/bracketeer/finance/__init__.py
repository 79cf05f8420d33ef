"""Tournament money: platform fee, net revenue and prize splits."""

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

from bracketeer.finance.currency import format_currency
from bracketeer.finance.prize_pool import (
    DISTRIBUTION_PRESETS,
    DistributionPreset,
    estimate_gross_pool,
    estimate_participants,
    get_preset,
)
from bracketeer.finance.splits import (
    calculate_net_revenue,
    calculate_organizer_residual,
    calculate_platform_fee,
    calculate_prize_splits,
    summarize,
)

__all__ = [
    "DISTRIBUTION_PRESETS",
    "DistributionPreset",
    "calculate_net_revenue",
    "calculate_organizer_residual",
    "calculate_platform_fee",
    "calculate_prize_splits",
    "estimate_gross_pool",
    "estimate_participants",
    "format_currency",
    "get_preset",
    "summarize",
]
