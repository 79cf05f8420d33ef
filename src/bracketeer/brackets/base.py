"""Building blocks shared by the bracket generators."""

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

import itertools
from typing import Iterator, List

from bracketeer.exceptions import InvalidParticipantError
from bracketeer.models import Match, Participant, Slot

MatchIds = Iterator[int]


def new_id_sequence(start: int = 1) -> MatchIds:
    """Match ids are unique within a bracket and follow generation order."""
    return itertools.count(start)


def decide_bye(match: Match) -> None:
    """Give a BYE match to its real side (or to BYE when both sides are BYE)."""
    if match.top.participant.is_bye:
        match.winner = match.bottom.name
    else:
        match.winner = match.top.name


def make_match(
    ids: MatchIds, top: Participant, bottom: Participant, bracket: str
) -> Match:
    """Create a match, keeping any BYE in the bottom slot.

    A BYE match whose other side is already known is decided immediately.
    """
    if top.is_bye and not bottom.is_bye:
        top, bottom = bottom, top

    match = Match(id=next(ids), top=Slot(top), bottom=Slot(bottom), bracket=bracket)
    if match.is_bye and match.is_ready:
        decide_bye(match)
    return match


def ensure_unique_names(participants: List[Participant]) -> None:
    """Names identify winners, so two real entries may not share one.

    Raises:
        InvalidParticipantError: On the first repeated name
    """
    seen = set()
    for participant in participants:
        if participant.is_bye:
            continue
        if participant.is_placeholder:
            raise InvalidParticipantError(
                f"'{participant.name}' is reserved for unresolved slots"
            )
        if participant.name in seen:
            raise InvalidParticipantError(
                f"Duplicate participant name: {participant.name}"
            )
        seen.add(participant.name)


__all__ = [
    "MatchIds",
    "decide_bye",
    "ensure_unique_names",
    "make_match",
    "new_id_sequence",
]
