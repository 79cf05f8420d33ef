"""Data classes shared by the bracket and finance layers."""

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

from bracketeer.models.match import AnyMatch, GroupMatch, Match, Slot, match_from_dict
from bracketeer.models.participant import (
    BYE,
    TBD,
    Participant,
    normalize_participants,
    placeholder,
    to_participant,
)
from bracketeer.models.prize import (
    FinancialConfig,
    FinancialSummary,
    PrizeDistribution,
    PrizeSplit,
)
from bracketeer.models.round import Round, rounds_from_list, rounds_to_list
from bracketeer.models.tournament_config import TournamentConfig, load_config

__all__ = [
    "AnyMatch",
    "BYE",
    "FinancialConfig",
    "FinancialSummary",
    "GroupMatch",
    "Match",
    "Participant",
    "PrizeDistribution",
    "PrizeSplit",
    "Round",
    "Slot",
    "TBD",
    "TournamentConfig",
    "load_config",
    "match_from_dict",
    "normalize_participants",
    "placeholder",
    "rounds_from_list",
    "rounds_to_list",
    "to_participant",
]
