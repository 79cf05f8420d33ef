"""Data model for a tournament round."""

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
from typing import Any, Dict, Iterable, List

from bracketeer.models.match import AnyMatch, match_from_dict


@dataclass
class Round:
    """Container for the matches played in one round.

    Attributes
    ----------
    name : str
        Human readable label, e.g. "Fase 1", "Semifinales" or "Ronda 3".
    matches : list
        Matches in play order.
    bracket : str
        Bracket tag ("winners", "losers", "finals", "swiss", "round-robin"
        or "free-for-all").
    """

    name: str
    matches: List[AnyMatch] = field(default_factory=list)
    bracket: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "name": self.name,
            "bracket": self.bracket,
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary."""
        return cls(
            name=data["name"],
            bracket=data.get("bracket", ""),
            matches=[match_from_dict(m) for m in data.get("matches", [])],
        )


def rounds_to_list(rounds: Iterable[Round]) -> List[Dict[str, Any]]:
    """Serialize a whole bracket."""
    return [r.to_dict() for r in rounds]


def rounds_from_list(data: Iterable[Dict[str, Any]]) -> List[Round]:
    """Deserialize a whole bracket."""
    return [Round.from_dict(r) for r in data]
