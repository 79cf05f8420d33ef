"""TournamentConfig data class."""

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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from bracketeer.constants import (
    DEFAULT_ADVANCE_PER_GROUP,
    DEFAULT_CURRENCY,
    DEFAULT_FORMAT,
    DEFAULT_GROUP_CAPACITY,
    DEFAULT_PLATFORM_FEE_PERCENT,
)
from bracketeer.exceptions import BracketeerException, ConfigurationError
from bracketeer.models.prize import FinancialConfig, PrizeDistribution
from bracketeer.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    format : str
        Bracket format passed to the round generator.
    group_capacity : int
        Maximum players per free-for-all match.
    advance_per_group : int
        Players each free-for-all group sends to the next phase.
    platform_fee_percent : float
        Share of gross entry fees kept by the platform.
    currency : str
        ISO currency code for display.
    prize_distribution : list of PrizeDistribution
        Share of the net pool per finishing position.
    """

    name: str
    format: str = DEFAULT_FORMAT
    group_capacity: int = DEFAULT_GROUP_CAPACITY
    advance_per_group: int = DEFAULT_ADVANCE_PER_GROUP
    platform_fee_percent: float = DEFAULT_PLATFORM_FEE_PERCENT
    currency: str = DEFAULT_CURRENCY
    prize_distribution: List[PrizeDistribution] = field(default_factory=list)

    def financial_config(self) -> FinancialConfig:
        """Fee settings for the finance pipeline."""
        return FinancialConfig(
            platform_fee_percent=self.platform_fee_percent,
            currency=self.currency,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "format": self.format,
            "group_capacity": self.group_capacity,
            "advance_per_group": self.advance_per_group,
            "platform_fee_percent": self.platform_fee_percent,
            "currency": self.currency,
            "prize_distribution": [d.to_dict() for d in self.prize_distribution],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            format=data.get("format", DEFAULT_FORMAT),
            group_capacity=data.get("group_capacity", DEFAULT_GROUP_CAPACITY),
            advance_per_group=data.get(
                "advance_per_group", DEFAULT_ADVANCE_PER_GROUP
            ),
            platform_fee_percent=data.get(
                "platform_fee_percent", DEFAULT_PLATFORM_FEE_PERCENT
            ),
            currency=data.get("currency", DEFAULT_CURRENCY),
            prize_distribution=[
                PrizeDistribution.from_dict(d)
                for d in data.get("prize_distribution", [])
            ],
        )


def load_config(path: Union[str, Path]) -> TournamentConfig:
    """Read a TournamentConfig from a JSON file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration {path} must hold a JSON object")

    try:
        config = TournamentConfig.from_dict(data)
    except (KeyError, TypeError, BracketeerException) as e:
        raise ConfigurationError(f"Invalid configuration {path}: {e}")

    logger.debug(f"Loaded configuration '{config.name}' from {path}")
    return config
