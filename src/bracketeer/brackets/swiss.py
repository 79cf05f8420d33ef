"""Swiss system pairing.

Round 1 splits the field in half and pairs seed ``i`` with seed
``i + n / 2``. Later rounds rank players on the current standings and pair
each one with the best placed opponent they have not met yet.
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
from typing import Dict, List, Optional, Set, Tuple

from bracketeer.brackets.base import MatchIds, make_match, new_id_sequence
from bracketeer.constants import (
    BRACKET_SWISS,
    FORMAT_SWISS,
    MAX_PAIRING_STEPS,
    ROUND_LABEL,
)
from bracketeer.exceptions import InvalidResultError
from bracketeer.models import BYE, Match, Participant, Round
from bracketeer.standings import calculate_standings
from bracketeer.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PairingHistory:
    """Tracks who has met whom and who has already sat out.

    Attributes:
        previous_matches: Set of frozensets holding participant name pairs
        had_bye: Names of participants who already received a BYE
    """

    previous_matches: Set[frozenset] = field(default_factory=set)
    had_bye: Set[str] = field(default_factory=set)

    def add_pairing(self, first: str, second: str) -> None:
        """Record that two participants have been paired."""
        self.previous_matches.add(frozenset({first, second}))

    def have_played(self, first: str, second: str) -> bool:
        """Check if two participants have previously met."""
        return frozenset({first, second}) in self.previous_matches

    @classmethod
    def from_rounds(cls, rounds: List[Round]) -> "PairingHistory":
        history = cls()
        for round_data in rounds:
            for match in round_data.matches:
                if not isinstance(match, Match):
                    continue
                if match.is_bye:
                    for participant in match.participants:
                        if participant.is_real:
                            history.had_bye.add(participant.name)
                else:
                    history.add_pairing(match.top.name, match.bottom.name)
        return history


def _build_round(
    number: int,
    pairs: List[Tuple[Participant, Participant]],
    bye: Optional[Participant],
    ids: MatchIds,
) -> Round:
    matches = [make_match(ids, top, bottom, BRACKET_SWISS) for top, bottom in pairs]
    if bye is not None:
        matches.append(make_match(ids, bye, BYE, BRACKET_SWISS))
    return Round(
        name=ROUND_LABEL.format(number=number), matches=matches, bracket=BRACKET_SWISS
    )


def generate_swiss(participants: List[Participant], ids: MatchIds) -> List[Round]:
    """Generate the first swiss round.

    With an odd field the lowest seed receives the BYE.
    """
    pool = list(participants)
    if not pool:
        return []

    bye = pool.pop() if len(pool) % 2 else None
    half = len(pool) // 2
    pairs = [(pool[i], pool[i + half]) for i in range(half)]
    return [_build_round(1, pairs, bye, ids)]


def _pair_without_repeats(
    names: List[str], history: PairingHistory, max_steps: int = MAX_PAIRING_STEPS
) -> Optional[List[Tuple[str, str]]]:
    """Pair names top-down, backtracking to avoid rematches.

    Gives up and returns None once ``max_steps`` candidate pairs have been
    tried, as well as when no rematch-free pairing exists.
    """
    steps = 0

    def search(pool: List[str]) -> Optional[List[Tuple[str, str]]]:
        nonlocal steps
        if not pool:
            return []
        first, rest = pool[0], pool[1:]
        for index, candidate in enumerate(rest):
            if history.have_played(first, candidate):
                continue
            steps += 1
            if steps > max_steps:
                return None
            tail = search(rest[:index] + rest[index + 1 :])
            if tail is not None:
                return [(first, candidate)] + tail
            if steps > max_steps:
                return None
        return None

    return search(names)


def next_swiss_round(rounds: List[Round]) -> Round:
    """Pair the next swiss round from the results so far.

    Args:
        rounds: Swiss rounds already played, every match reported

    Returns:
        The next round, with match ids continuing after the highest existing id

    Raises:
        InvalidResultError: If there are no rounds yet or a match is unreported
    """
    swiss_rounds = [r for r in rounds if r.bracket == BRACKET_SWISS]
    if not swiss_rounds:
        raise InvalidResultError("Generate the first swiss round before pairing more")

    people: Dict[str, Participant] = {}
    last_id = 0
    for round_data in swiss_rounds:
        for match in round_data.matches:
            last_id = max(last_id, match.id)
            if not match.is_bye and not match.is_reported:
                raise InvalidResultError(
                    f"{round_data.name} still has unreported match {match.id}"
                )
            for participant in match.participants:
                if participant.is_real:
                    people.setdefault(participant.name, participant)

    history = PairingHistory.from_rounds(swiss_rounds)
    order = [entry.name for entry in calculate_standings(swiss_rounds, FORMAT_SWISS)]

    bye = None
    if len(order) % 2:
        candidates = [name for name in order if name not in history.had_bye]
        bye = (candidates or order)[-1]
        order.remove(bye)

    pairs = _pair_without_repeats(order, history)
    if pairs is None:
        logger.warning(
            f"No rematch-free pairing exists for round {len(swiss_rounds) + 1}; "
            f"pairing by rank"
        )
        pairs = [(order[i], order[i + 1]) for i in range(0, len(order), 2)]

    round_data = _build_round(
        len(swiss_rounds) + 1,
        [(people[a], people[b]) for a, b in pairs],
        people[bye] if bye else None,
        new_id_sequence(last_id + 1),
    )
    logger.info(f"Paired {round_data.name}: {len(round_data.matches)} match(es)")
    return round_data
