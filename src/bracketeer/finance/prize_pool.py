"""Prize pool estimation and distribution presets."""

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

from dataclasses import dataclass
from typing import Dict, List, Tuple

from bracketeer.constants import (
    EXPECTED_FILL_RATE,
    POOL_SOURCE_ENTRY_FEES,
    POOL_SOURCE_MANUAL,
)
from bracketeer.exceptions import ValidationError
from bracketeer.models.prize import PrizeDistribution
from bracketeer.utils.money import round_half_up, to_decimal
from bracketeer.utils.validation import Number, ensure_finite, ensure_non_negative_int


@dataclass(frozen=True)
class DistributionPreset:
    """A named, ready-made prize split."""

    name: str
    description: str
    distribution: Tuple[PrizeDistribution, ...]

    @property
    def total_percentage(self) -> float:
        return sum(d.percentage for d in self.distribution)


def _places(*entries: Tuple[str, str, float]) -> Tuple[PrizeDistribution, ...]:
    return tuple(
        PrizeDistribution(position=position, percentage=percentage, label=label)
        for position, label, percentage in entries
    )


DISTRIBUTION_PRESETS: Dict[str, DistributionPreset] = {
    preset.name: preset
    for preset in (
        DistributionPreset(
            "Winner Takes All",
            "100% para el campeón",
            _places(("1", "1er Lugar", 100)),
        ),
        DistributionPreset(
            "Top 3 Estándar",
            "50/30/20 split",
            _places(
                ("1", "1er Lugar", 50),
                ("2", "2do Lugar", 30),
                ("3", "3er Lugar", 20),
            ),
        ),
        DistributionPreset(
            "Top 4 Competitivo",
            "40/25/20/15 split",
            _places(
                ("1", "1er Lugar", 40),
                ("2", "2do Lugar", 25),
                ("3", "3er Lugar", 20),
                ("4", "4to Lugar", 15),
            ),
        ),
        DistributionPreset(
            "Top 8 Pro",
            "Distribución amplia para +32 jugadores",
            _places(
                ("1", "1er Lugar", 30),
                ("2", "2do Lugar", 20),
                ("3", "3er Lugar", 15),
                ("4", "4to Lugar", 10),
                ("top8", "5to-8vo", 25),
            ),
        ),
    )
}


def get_preset(name: str) -> List[PrizeDistribution]:
    """Return a copy of a preset's distribution list.

    Raises:
        ValidationError: If no preset has that name
    """
    try:
        return list(DISTRIBUTION_PRESETS[name].distribution)
    except KeyError:
        raise ValidationError(
            f"Unknown distribution preset {name!r} "
            f"(expected one of: {', '.join(DISTRIBUTION_PRESETS)})"
        )


def estimate_participants(current: int, maximum: int) -> int:
    """Expected field size: at least the current count, or 75% of the cap.

    Examples:
        >>> estimate_participants(10, 32)
        24
        >>> estimate_participants(30, 32)
        30
    """
    ensure_non_negative_int(current, "current")
    ensure_non_negative_int(maximum, "maximum")
    expected = int(
        round_half_up(to_decimal(maximum) * to_decimal(EXPECTED_FILL_RATE), 0)
    )
    return max(current, expected)


def estimate_gross_pool(
    entry_fee: Number,
    current: int,
    maximum: int,
    source: str = POOL_SOURCE_ENTRY_FEES,
    manual_amount: Number = 0,
) -> float:
    """Gross prize pool before the platform fee.

    Args:
        entry_fee: Fee per participant
        current: Participants registered so far
        maximum: Participant cap
        source: ``entry-fees`` to derive the pool, ``manual`` to use
            ``manual_amount`` as is
        manual_amount: Organizer supplied pool

    Raises:
        ValidationError: On an unknown source or non-finite amount
    """
    if source == POOL_SOURCE_MANUAL:
        return float(ensure_finite(manual_amount, "manual_amount"))
    if source != POOL_SOURCE_ENTRY_FEES:
        raise ValidationError(
            f"Prize pool source must be '{POOL_SOURCE_ENTRY_FEES}' or "
            f"'{POOL_SOURCE_MANUAL}', got {source!r}"
        )
    ensure_finite(entry_fee, "entry_fee")
    participants = estimate_participants(current, maximum)
    return round_half_up(to_decimal(entry_fee) * participants)
