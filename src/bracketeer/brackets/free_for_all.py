"""Free-for-all (multi-player group) bracket generation."""

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

from collections import Counter
from typing import Callable, List

from bracketeer.brackets.base import MatchIds
from bracketeer.constants import (
    BRACKET_FREE_FOR_ALL,
    DEFAULT_ADVANCE_PER_GROUP,
    DEFAULT_GROUP_CAPACITY,
    FINAL_LABEL,
    PHASE_LABEL,
)
from bracketeer.exceptions import ValidationError
from bracketeer.models import TBD, GroupMatch, Participant, Round
from bracketeer.utils import setup_logger

logger = setup_logger(__name__)

# (participants in seed order, capacity) -> groups
GroupingStrategy = Callable[[List[Participant], int], List[List[Participant]]]


def contiguous_groups(
    participants: List[Participant], capacity: int
) -> List[List[Participant]]:
    """Slice the seed order into consecutive groups of ``capacity``.

    The last group holds the remainder.

    Examples:
        >>> [len(g) for g in contiguous_groups([TBD] * 19, 8)]
        [8, 8, 3]
    """
    return [
        participants[start : start + capacity]
        for start in range(0, len(participants), capacity)
    ]


def _check_groups(
    groups: List[List[Participant]], participants: List[Participant], capacity: int
) -> None:
    if any(not group or len(group) > capacity for group in groups):
        raise ValidationError(
            f"Grouping produced an empty group or one larger than {capacity}"
        )
    grouped = Counter(p.name for group in groups for p in group)
    if grouped != Counter(p.name for p in participants):
        raise ValidationError(
            "Grouping must place every participant in exactly one group"
        )


def generate_free_for_all(
    participants: List[Participant],
    ids: MatchIds,
    capacity: int = DEFAULT_GROUP_CAPACITY,
    advance_per_group: int = DEFAULT_ADVANCE_PER_GROUP,
    grouping: GroupingStrategy = contiguous_groups,
) -> List[Round]:
    """Generate group phases that funnel into a single Final.

    Phase 1 groups the real participants with ``grouping``. Each group sends
    up to ``advance_per_group`` players on, and later phases are laid out as
    TBD slots in contiguous groups until one group remains. That group is the
    Final; every earlier phase is labelled "Fase k".

    Args:
        participants: Entrants in seed order
        ids: Shared match id sequence
        capacity: Maximum players in one match
        advance_per_group: Players each group sends to the next phase
        grouping: Strategy assigning phase 1 groups

    Raises:
        ValidationError: If capacity or advance_per_group is out of range, or
            the grouping strategy drops, duplicates or overfills entries
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 2:
        raise ValidationError(f"Group capacity must be an integer >= 2, got {capacity}")
    if (
        isinstance(advance_per_group, bool)
        or not isinstance(advance_per_group, int)
        or not 1 <= advance_per_group < capacity
    ):
        raise ValidationError(
            f"Players advancing per group must be between 1 and {capacity - 1}, "
            f"got {advance_per_group}"
        )
    if not participants:
        return []

    groups = grouping(list(participants), capacity)
    _check_groups(groups, participants, capacity)

    rounds = []
    phase = 1
    while len(groups) > 1:
        rounds.append(
            Round(
                name=PHASE_LABEL.format(number=phase),
                matches=[_group_match(ids, group, capacity) for group in groups],
                bracket=BRACKET_FREE_FOR_ALL,
            )
        )
        advancing = sum(min(advance_per_group, len(group)) for group in groups)
        logger.debug(
            f"Phase {phase}: {len(groups)} group(s), {advancing} player(s) advance"
        )
        groups = contiguous_groups([TBD] * advancing, capacity)
        phase += 1

    rounds.append(
        Round(
            name=FINAL_LABEL,
            matches=[_group_match(ids, groups[0], capacity)],
            bracket=BRACKET_FREE_FOR_ALL,
        )
    )
    return rounds


def _group_match(ids: MatchIds, group: List[Participant], capacity: int) -> GroupMatch:
    return GroupMatch(
        id=next(ids),
        players=list(group),
        capacity=capacity,
        bracket=BRACKET_FREE_FOR_ALL,
    )
