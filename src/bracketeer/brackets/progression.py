"""Score reporting and winner propagation.

Elimination brackets are wired implicitly by position: the winner of match
``i`` in a winners round feeds slot ``i % 2`` of match ``i // 2`` in the
next winners round. Double elimination adds the losers bracket, which
alternates between rounds fed by the previous losers round alone and rounds
that also take the losers dropping out of the next winners round. The
grand final takes the winners champion on top and the losers champion on
the bottom.
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

import copy
from typing import Iterable, List, NamedTuple, Optional, Tuple

from bracketeer.brackets.base import decide_bye
from bracketeer.constants import (
    BRACKET_FINALS,
    BRACKET_LOSERS,
    BRACKET_WINNERS,
    ELIMINATION_BRACKETS,
)
from bracketeer.exceptions import InvalidResultError, MatchNotFoundError
from bracketeer.models import GroupMatch, Match, Participant, Round
from bracketeer.utils import setup_logger

logger = setup_logger(__name__)

TOP = "top"
BOTTOM = "bottom"


class Destination(NamedTuple):
    """Slot that receives a participant once a match is decided."""

    round_index: int
    match_index: int
    slot: str


def _slot_for(match_index: int) -> str:
    return TOP if match_index % 2 == 0 else BOTTOM


def _indices(rounds: List[Round], bracket: str) -> List[int]:
    return [i for i, r in enumerate(rounds) if r.bracket == bracket]


def destinations(
    rounds: List[Round], round_index: int, match_index: int
) -> Tuple[Optional[Destination], Optional[Destination]]:
    """Return where the winner and the loser of a match go next.

    Args:
        rounds: The whole bracket
        round_index: Index of the match's round in ``rounds``
        match_index: Index of the match within its round

    Returns:
        Tuple of (winner destination, loser destination), either may be None
    """
    bracket = rounds[round_index].bracket
    winners = _indices(rounds, BRACKET_WINNERS)
    losers = _indices(rounds, BRACKET_LOSERS)
    finals = _indices(rounds, BRACKET_FINALS)

    if bracket == BRACKET_WINNERS:
        position = winners.index(round_index)
        if position + 1 < len(winners):
            win = Destination(
                winners[position + 1], match_index // 2, _slot_for(match_index)
            )
        elif finals:
            win = Destination(finals[0], 0, TOP)
        else:
            win = None

        lose = None
        if finals and losers:
            if position == 0:
                lose = Destination(losers[0], match_index // 2, _slot_for(match_index))
            else:
                lose = Destination(losers[2 * position - 1], match_index, BOTTOM)
        elif finals:
            # Two-player double elimination has no losers rounds
            lose = Destination(finals[0], 0, BOTTOM)
        return win, lose

    if bracket == BRACKET_LOSERS:
        position = losers.index(round_index)
        if position + 1 == len(losers):
            win = Destination(finals[0], 0, BOTTOM) if finals else None
        elif position % 2 == 0:
            win = Destination(losers[position + 1], match_index, TOP)
        else:
            win = Destination(
                losers[position + 1], match_index // 2, _slot_for(match_index)
            )
        return win, None

    return None, None


def _place(
    rounds: List[Round], destination: Optional[Destination], participant: Participant
) -> bool:
    """Fill a destination slot if it is still waiting. Returns True on change."""
    if destination is None or participant is None:
        return False
    target = rounds[destination.round_index].matches[destination.match_index]
    slot = target.top if destination.slot == TOP else target.bottom
    if not slot.participant.is_placeholder:
        return False
    slot.participant = participant
    return True


def advance_byes(rounds: List[Round]) -> List[Round]:
    """Propagate decided elimination matches until nothing changes.

    BYE matches that become ready are decided on the way. The rounds are
    updated in place and returned for convenience.
    """
    changed = True
    while changed:
        changed = False
        for round_index, round_data in enumerate(rounds):
            if round_data.bracket not in ELIMINATION_BRACKETS:
                continue
            for match_index, match in enumerate(round_data.matches):
                if match.winner is None and match.is_ready and match.is_bye:
                    decide_bye(match)
                    changed = True
                if match.winner is None:
                    continue
                win_to, lose_to = destinations(rounds, round_index, match_index)
                if _place(rounds, win_to, match.winner_participant()):
                    changed = True
                if _place(rounds, lose_to, match.loser_participant()):
                    changed = True
    return rounds


def find_match(rounds: Iterable[Round], match_id: int) -> Tuple[int, int]:
    """Locate a match by id.

    Returns:
        Tuple of (round index, match index)

    Raises:
        MatchNotFoundError: If no match carries the id
    """
    for round_index, round_data in enumerate(rounds):
        for match_index, match in enumerate(round_data.matches):
            if match.id == match_id:
                return round_index, match_index
    raise MatchNotFoundError(f"No match with id {match_id}")


def _check_score(score, side: str) -> int:
    if isinstance(score, bool) or not isinstance(score, int) or score < 0:
        raise InvalidResultError(
            f"{side} score must be a non-negative integer, got {score!r}"
        )
    return score


def report_score(
    rounds: List[Round], match_id: int, top_score: int, bottom_score: int
) -> List[Round]:
    """Record a result and return the updated bracket.

    The input rounds are left untouched; a deep copy is updated and returned.
    The higher score wins. A tie is a draw in round-robin and swiss rounds
    and is rejected in elimination rounds.

    Args:
        rounds: Bracket to update
        match_id: Id of the match being reported
        top_score: Score of the top slot
        bottom_score: Score of the bottom slot

    Returns:
        New list of rounds with the result applied and winners propagated

    Raises:
        MatchNotFoundError: If the match id is unknown
        InvalidResultError: If the match cannot take this result
    """
    top_score = _check_score(top_score, "Top")
    bottom_score = _check_score(bottom_score, "Bottom")

    updated = copy.deepcopy(list(rounds))
    round_index, match_index = find_match(updated, match_id)
    round_data = updated[round_index]
    match = round_data.matches[match_index]
    elimination = round_data.bracket in ELIMINATION_BRACKETS

    if isinstance(match, GroupMatch):
        raise InvalidResultError(
            f"Match {match_id} is a group match and has no head-to-head score"
        )
    if match.is_bye:
        raise InvalidResultError(f"Match {match_id} is a BYE and needs no result")
    if not match.is_ready:
        raise InvalidResultError(
            f"Match {match_id} is still waiting on an earlier result"
        )
    if elimination and match.winner is not None:
        raise InvalidResultError(f"Match {match_id} has already been decided")
    if elimination and top_score == bottom_score:
        raise InvalidResultError(
            f"Match {match_id} is an elimination match and cannot end in a draw"
        )

    _apply(match, top_score, bottom_score)
    if elimination:
        advance_byes(updated)

    logger.info(
        f"Reported match {match_id} ({round_data.name}): "
        f"{match.top.name} {top_score} - {bottom_score} {match.bottom.name}"
    )
    return updated


def _apply(match: Match, top_score: int, bottom_score: int) -> None:
    match.top.score = top_score
    match.bottom.score = bottom_score
    if top_score > bottom_score:
        match.winner = match.top.name
    elif bottom_score > top_score:
        match.winner = match.bottom.name
    else:
        match.winner = None
