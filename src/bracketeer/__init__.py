"""Bracketeer: tournament bracket generation and prize accounting.

Brackets are plain lists of :class:`~bracketeer.models.Round`; money is
handled as floats rounded half up to cents.
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

from bracketeer.brackets import (
    advance_byes,
    contiguous_groups,
    generate_rounds,
    next_swiss_round,
    report_score,
)
from bracketeer.exceptions import (
    BracketException,
    BracketeerException,
    ConfigurationError,
    InvalidFormatError,
    InvalidParticipantError,
    InvalidResultError,
    MatchNotFoundError,
    ParticipantCountMismatchError,
    ValidationError,
)
from bracketeer.finance import (
    calculate_net_revenue,
    calculate_organizer_residual,
    calculate_platform_fee,
    calculate_prize_splits,
    format_currency,
    summarize,
)
from bracketeer.models import (
    FinancialConfig,
    FinancialSummary,
    GroupMatch,
    Match,
    Participant,
    PrizeDistribution,
    PrizeSplit,
    Round,
    TournamentConfig,
    load_config,
)
from bracketeer.standings import StandingsEntry, calculate_standings

__version__ = "0.1.0"

__all__ = [
    "BracketException",
    "BracketeerException",
    "ConfigurationError",
    "FinancialConfig",
    "FinancialSummary",
    "GroupMatch",
    "InvalidFormatError",
    "InvalidParticipantError",
    "InvalidResultError",
    "Match",
    "MatchNotFoundError",
    "Participant",
    "ParticipantCountMismatchError",
    "PrizeDistribution",
    "PrizeSplit",
    "Round",
    "StandingsEntry",
    "TournamentConfig",
    "ValidationError",
    "advance_byes",
    "calculate_net_revenue",
    "calculate_organizer_residual",
    "calculate_platform_fee",
    "calculate_prize_splits",
    "calculate_standings",
    "contiguous_groups",
    "format_currency",
    "generate_rounds",
    "load_config",
    "next_swiss_round",
    "report_score",
    "summarize",
]
