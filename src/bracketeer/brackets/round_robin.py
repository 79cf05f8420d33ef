"""Round robin schedule generation using the circle method."""

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
from bracketeer.constants import BRACKET_ROUND_ROBIN, ROUND_LABEL
from bracketeer.models import BYE, Participant, Round


def number_of_rounds(num_participants: int) -> int:
    """Rounds needed for everyone to meet everyone once."""
    if num_participants <= 0:
        return 0
    effective = num_participants + (num_participants % 2)
    return effective - 1


def generate_round_robin(
    participants: List[Participant], ids: MatchIds
) -> List[Round]:
    """Generate a full round robin schedule.

    The first entry stays fixed while the others rotate one place per round,
    and position ``i`` meets position ``n - 1 - i``. An odd field gets a BYE
    appended, so every round has exactly one sit-out.

    Args:
        participants: Entrants in seed order
        ids: Shared match id sequence

    Returns:
        ``n - 1`` rounds of ``n / 2`` matches, where ``n`` includes the BYE
    """
    circle = list(participants)
    if not circle:
        return []
    if len(circle) % 2:
        circle.append(BYE)

    size = len(circle)
    rounds = []
    for round_number in range(1, size):
        matches = [
            make_match(ids, circle[i], circle[size - 1 - i], BRACKET_ROUND_ROBIN)
            for i in range(size // 2)
        ]
        rounds.append(
            Round(
                name=ROUND_LABEL.format(number=round_number),
                matches=matches,
                bracket=BRACKET_ROUND_ROBIN,
            )
        )
        # Rotate everyone but the anchor one step clockwise
        circle = [circle[0], circle[-1]] + circle[1:-1]
    return rounds
