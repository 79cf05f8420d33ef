"""Single and double elimination bracket generation."""

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

from typing import List

from bracketeer.brackets.base import MatchIds, make_match
from bracketeer.brackets.progression import advance_byes
from bracketeer.constants import (
    BRACKET_FINALS,
    BRACKET_LOSERS,
    BRACKET_WINNERS,
    ELIMINATION_ROUND_NAMES,
    GRAND_FINAL_LABEL,
    LOSERS_LABEL,
    ROUND_LABEL,
    WINNERS_PREFIX,
)
from bracketeer.models import BYE, TBD, Match, Participant, Round, Slot, placeholder


def bracket_size(num_participants: int) -> int:
    """Smallest power of two holding every participant (at least 2)."""
    size = 2
    while size < num_participants:
        size *= 2
    return size


def elimination_round_name(match_count: int, round_number: int) -> str:
    """Name a round by how many matches it holds.

    Examples:
        >>> elimination_round_name(1, 3)
        'Final'
        >>> elimination_round_name(16, 1)
        'Ronda 1'
    """
    return ELIMINATION_ROUND_NAMES.get(
        match_count, ROUND_LABEL.format(number=round_number)
    )


def _empty_round(ids: MatchIds, name: str, match_count: int, bracket: str) -> Round:
    matches = [
        Match(id=next(ids), top=Slot(TBD), bottom=Slot(TBD), bracket=bracket)
        for _ in range(match_count)
    ]
    return Round(name=name, matches=matches, bracket=bracket)


def build_winners_bracket(
    participants: List[Participant], ids: MatchIds, prefix: str = ""
) -> List[Round]:
    """Lay out the winners side without propagating any result.

    Seeds fill the slots in order and BYEs pad the bracket at the end, so
    with five players the first round reads P1-P2, P3-P4, P5-BYE, BYE-BYE.
    """
    size = bracket_size(len(participants))
    slots = list(participants) + [BYE] * (size - len(participants))

    first = [
        make_match(ids, slots[i], slots[i + 1], BRACKET_WINNERS)
        for i in range(0, size, 2)
    ]
    rounds = [
        Round(
            name=prefix + elimination_round_name(len(first), 1),
            matches=first,
            bracket=BRACKET_WINNERS,
        )
    ]

    match_count = len(first) // 2
    round_number = 2
    while match_count >= 1:
        rounds.append(
            _empty_round(
                ids,
                prefix + elimination_round_name(match_count, round_number),
                match_count,
                BRACKET_WINNERS,
            )
        )
        match_count //= 2
        round_number += 1
    return rounds


def generate_single_elimination(
    participants: List[Participant], ids: MatchIds
) -> List[Round]:
    """Generate a single elimination bracket with BYEs already advanced."""
    return advance_byes(build_winners_bracket(participants, ids))


def generate_double_elimination(
    participants: List[Participant], ids: MatchIds
) -> List[Round]:
    """Generate winners, losers and grand final rounds.

    With ``k`` winners rounds the losers bracket has ``2 * (k - 1)`` rounds.
    Losers round ``2j - 1`` pairs the survivors among themselves and losers
    round ``2j`` meets the players dropping from winners round ``j + 1``.
    """
    winners = build_winners_bracket(participants, ids, prefix=WINNERS_PREFIX)
    size = bracket_size(len(participants))

    losers: List[Round] = []
    for stage in range(1, len(winners)):
        match_count = size // 2 ** (stage + 1)
        for number in (2 * stage - 1, 2 * stage):
            losers.append(
                _empty_round(
                    ids, LOSERS_LABEL.format(number=number), match_count, BRACKET_LOSERS
                )
            )

    grand_final = Round(
        name=GRAND_FINAL_LABEL,
        matches=[
            Match(
                id=next(ids),
                top=Slot(placeholder("Winners")),
                bottom=Slot(placeholder("Losers")),
                bracket=BRACKET_FINALS,
            )
        ],
        bracket=BRACKET_FINALS,
    )
    return advance_byes(winners + losers + [grand_final])
