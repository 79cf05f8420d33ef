"""Bracket and round generation.

:func:`generate_rounds` is the single entry point; it validates the inputs
and dispatches to the generator for the requested format.
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

from typing import Iterable, List, Optional

from bracketeer.brackets.base import ensure_unique_names, new_id_sequence
from bracketeer.brackets.elimination import (
    generate_double_elimination,
    generate_single_elimination,
)
from bracketeer.brackets.free_for_all import (
    GroupingStrategy,
    contiguous_groups,
    generate_free_for_all,
)
from bracketeer.brackets.progression import advance_byes, report_score
from bracketeer.brackets.round_robin import generate_round_robin
from bracketeer.brackets.swiss import generate_swiss, next_swiss_round
from bracketeer.constants import (
    DEFAULT_FORMAT,
    FORMAT_DOUBLE_ELIMINATION,
    FORMAT_FREE_FOR_ALL,
    FORMAT_ROUND_ROBIN,
    FORMAT_SINGLE_ELIMINATION,
    FORMAT_SWISS,
    SUPPORTED_FORMATS,
)
from bracketeer.exceptions import InvalidFormatError, ParticipantCountMismatchError
from bracketeer.models import Round, TournamentConfig, normalize_participants
from bracketeer.models.participant import ParticipantLike
from bracketeer.utils import setup_logger
from bracketeer.utils.validation import ensure_non_negative_int

logger = setup_logger(__name__)


def generate_rounds(
    participant_count: int,
    participants: Optional[Iterable[ParticipantLike]] = None,
    format: str = DEFAULT_FORMAT,
    config: Optional[TournamentConfig] = None,
    grouping: GroupingStrategy = contiguous_groups,
) -> List[Round]:
    """Generate every round of a bracket in play order.

    Args:
        participant_count: Number of entrants; must equal the list length
        participants: Entrants in seed order, as names, mappings with
            ``name``/``avatar``/``email`` keys, or Participant objects
        format: One of ``single-elimination``, ``double-elimination``,
            ``round-robin``, ``swiss`` or ``free-for-all``
        config: Optional tournament settings (free-for-all group sizes)
        grouping: Strategy assigning free-for-all groups in phase 1

    Returns:
        Freshly built rounds; an empty list for zero participants

    Raises:
        InvalidFormatError: If the format is not supported
        ValidationError: If the count is invalid or disagrees with the list
        InvalidParticipantError: If an entry is malformed or duplicated
    """
    if format not in SUPPORTED_FORMATS:
        logger.error(f"Rejected unknown tournament format {format!r}")
        raise InvalidFormatError(format, SUPPORTED_FORMATS)

    ensure_non_negative_int(participant_count, "participant_count")
    players = normalize_participants(participants)
    if participant_count != len(players):
        logger.warning(
            f"Participant count {participant_count} disagrees with "
            f"{len(players)} supplied participant(s)"
        )
        raise ParticipantCountMismatchError(participant_count, len(players))
    ensure_unique_names(players)

    if not players:
        return []

    ids = new_id_sequence()
    if format == FORMAT_SINGLE_ELIMINATION:
        rounds = generate_single_elimination(players, ids)
    elif format == FORMAT_DOUBLE_ELIMINATION:
        rounds = generate_double_elimination(players, ids)
    elif format == FORMAT_ROUND_ROBIN:
        rounds = generate_round_robin(players, ids)
    elif format == FORMAT_SWISS:
        rounds = generate_swiss(players, ids)
    else:
        settings = config or TournamentConfig(name="", format=FORMAT_FREE_FOR_ALL)
        rounds = generate_free_for_all(
            players,
            ids,
            capacity=settings.group_capacity,
            advance_per_group=settings.advance_per_group,
            grouping=grouping,
        )

    logger.info(
        f"Generated {len(rounds)} {format} round(s) for "
        f"{participant_count} participant(s)"
    )
    return rounds


__all__ = [
    "GroupingStrategy",
    "advance_byes",
    "contiguous_groups",
    "generate_rounds",
    "next_swiss_round",
    "report_score",
]
