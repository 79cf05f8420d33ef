"""Match data classes."""

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
from typing import Any, Dict, List, Optional, Union

from bracketeer.models.participant import TBD, Participant


@dataclass
class Slot:
    """One side of a binary match.

    Attributes
    ----------
    participant : Participant
        Who occupies the slot. May be BYE or a TBD placeholder.
    score : int or None
        Reported score, None until a result is recorded.
    """

    participant: Participant = TBD
    score: Optional[int] = None

    @property
    def name(self) -> str:
        return self.participant.name

    def to_dict(self) -> Dict[str, Any]:
        """Serialize slot to dictionary."""
        data = self.participant.to_dict()
        data["score"] = self.score
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Slot":
        """Deserialize slot from dictionary."""
        return cls(
            participant=Participant.from_dict(data),
            score=data.get("score"),
        )


@dataclass
class Match:
    """A head-to-head contest between two slots.

    Attributes
    ----------
    id : int
        Identifier, unique within one generated bracket.
    top : Slot
        First side.
    bottom : Slot
        Second side. A generated BYE always sits here.
    winner : str or None
        Name of the winner, None while undecided or drawn.
    bracket : str
        Bracket tag of the owning round.
    """

    id: int
    top: Slot = field(default_factory=Slot)
    bottom: Slot = field(default_factory=Slot)
    winner: Optional[str] = None
    bracket: str = ""

    @property
    def is_bye(self) -> bool:
        """True when either side is the BYE sentinel."""
        return self.top.participant.is_bye or self.bottom.participant.is_bye

    @property
    def is_ready(self) -> bool:
        """True when neither side is waiting on an earlier result."""
        return not (
            self.top.participant.is_placeholder
            or self.bottom.participant.is_placeholder
        )

    @property
    def is_reported(self) -> bool:
        return self.top.score is not None and self.bottom.score is not None

    @property
    def participants(self) -> List[Participant]:
        return [self.top.participant, self.bottom.participant]

    def winner_participant(self) -> Optional[Participant]:
        """Return the Participant behind ``winner``."""
        if self.winner is None:
            return None
        for participant in self.participants:
            if participant.name == self.winner:
                return participant
        return None

    def loser_participant(self) -> Optional[Participant]:
        """Return the side that did not win, or None while undecided."""
        if self.winner is None:
            return None
        if self.top.name == self.winner:
            return self.bottom.participant
        return self.top.participant

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "top": self.top.to_dict(),
            "bottom": self.bottom.to_dict(),
            "winner": self.winner,
            "bracket": self.bracket,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            top=Slot.from_dict(data["top"]),
            bottom=Slot.from_dict(data["bottom"]),
            winner=data.get("winner"),
            bracket=data.get("bracket", ""),
        )


@dataclass
class GroupMatch:
    """A free-for-all contest holding an ordered group of players.

    Attributes
    ----------
    id : int
        Identifier, unique within one generated bracket.
    players : list of Participant
        Group members in seed order, TBD placeholders in later phases.
    capacity : int
        Maximum group size.
    bracket : str
        Bracket tag of the owning round.
    """

    id: int
    players: List[Participant] = field(default_factory=list)
    capacity: int = 0
    bracket: str = ""

    @property
    def is_bye(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group match to dictionary."""
        return {
            "id": self.id,
            "players": [p.to_dict() for p in self.players],
            "capacity": self.capacity,
            "bracket": self.bracket,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroupMatch":
        """Deserialize group match from dictionary."""
        return cls(
            id=data["id"],
            players=[Participant.from_dict(p) for p in data.get("players", [])],
            capacity=data.get("capacity", 0),
            bracket=data.get("bracket", ""),
        )


AnyMatch = Union[Match, GroupMatch]


def match_from_dict(data: Dict[str, Any]) -> AnyMatch:
    """Deserialize either match kind, keyed on the presence of ``players``."""
    if "players" in data:
        return GroupMatch.from_dict(data)
    return Match.from_dict(data)
