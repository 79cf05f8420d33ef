"""Standings calculation for generated brackets.

This module turns reported match results into an ordered standings table.
BYE matches never count as a win or a loss for either side; they are tracked
separately so a sit-out round is still visible in the table.
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

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from bracketeer.constants import (
    FORMAT_ROUND_ROBIN,
    FORMAT_SWISS,
    POINTS_FOR_DRAW,
    POINTS_FOR_LOSS,
    POINTS_FOR_WIN,
)
from bracketeer.models import Match, Participant, Round
from bracketeer.utils import setup_logger

logger = setup_logger(__name__)

# Formats scored 3-1-0; everything else ranks on wins alone
LEAGUE_FORMATS = (FORMAT_SWISS, FORMAT_ROUND_ROBIN)


@dataclass
class StandingsEntry:
    """One row of the standings table.

    Attributes:
        name: Participant name
        rank: Competition rank (1, 1, 3, ...)
        wins: Matches won
        losses: Matches lost
        draws: Matches drawn
        byes: Rounds sat out against a BYE
        points: 3-1-0 points for league formats, wins otherwise
        buchholz: Sum of the wins of every opponent faced
        game_wins: Sum of the player's reported scores
        avatar: Avatar reference carried from the participant
    """

    name: str
    rank: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    byes: int = 0
    points: int = 0
    buchholz: int = 0
    game_wins: int = 0
    avatar: Optional[str] = None
    opponents: List[str] = field(default_factory=list, repr=False)

    @property
    def played(self) -> int:
        return self.wins + self.losses + self.draws

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "byes": self.byes,
            "points": self.points,
            "buchholz": self.buchholz,
            "game_wins": self.game_wins,
            "avatar": self.avatar,
        }


def _points(entry: StandingsEntry, format_name: Optional[str]) -> int:
    if format_name in LEAGUE_FORMATS:
        return (
            entry.wins * POINTS_FOR_WIN
            + entry.draws * POINTS_FOR_DRAW
            + entry.losses * POINTS_FOR_LOSS
        )
    return entry.wins


def _register(table: Dict[str, StandingsEntry], participant: Participant) -> None:
    if participant.is_real and participant.name not in table:
        table[participant.name] = StandingsEntry(
            name=participant.name, avatar=participant.avatar
        )


def _tally(table: Dict[str, StandingsEntry], match: Match) -> None:
    top, bottom = match.top.participant, match.bottom.participant

    if match.is_bye:
        for participant in (top, bottom):
            if participant.is_real:
                table[participant.name].byes += 1
        return

    if not (top.is_real and bottom.is_real):
        return

    top_entry, bottom_entry = table[top.name], table[bottom.name]
    if not match.is_reported and match.winner is None:
        return

    top_entry.opponents.append(bottom.name)
    bottom_entry.opponents.append(top.name)
    top_entry.game_wins += match.top.score or 0
    bottom_entry.game_wins += match.bottom.score or 0

    if match.winner == top.name:
        top_entry.wins += 1
        bottom_entry.losses += 1
    elif match.winner == bottom.name:
        bottom_entry.wins += 1
        top_entry.losses += 1
    else:
        top_entry.draws += 1
        bottom_entry.draws += 1


def calculate_standings(
    rounds: Iterable[Round], format: Optional[str] = None
) -> List[StandingsEntry]:
    """Build the standings table for a bracket.

    Args:
        rounds: Generated rounds with whatever results have been reported
        format: Tournament format; swiss and round-robin use 3-1-0 points
            and swiss breaks ties on Buchholz

    Returns:
        Entries sorted by points, Buchholz (swiss only), game wins and
        fewest losses, ranked with shared positions for equal points (and equal
        Buchholz in swiss)
    """
    table: Dict[str, StandingsEntry] = {}
    for round_data in rounds:
        for match in round_data.matches:
            if not isinstance(match, Match):
                continue
            _register(table, match.top.participant)
            _register(table, match.bottom.participant)
            _tally(table, match)

    if not table:
        return []

    for entry in table.values():
        entry.points = _points(entry, format)
        entry.buchholz = sum(table[name].wins for name in entry.opponents)

    use_buchholz = format == FORMAT_SWISS
    ordered = sorted(
        table.values(),
        key=lambda e: (
            -e.points,
            -e.buchholz if use_buchholz else 0,
            -e.game_wins,
            e.losses,
        ),
    )

    rank = 0
    previous = None
    for index, entry in enumerate(ordered):
        key = (entry.points, entry.buchholz if use_buchholz else 0)
        if key != previous:
            rank = index + 1
        previous = key
        entry.rank = rank

    logger.debug(f"Calculated standings for {len(ordered)} participant(s)")
    return ordered
