"""Participant data class and sentinel entries."""

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

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from bracketeer.constants import BYE_NAME, TBD_NAME
from bracketeer.exceptions import InvalidParticipantError


@dataclass(frozen=True)
class Participant:
    """A tournament entrant.

    Attributes
    ----------
    name : str
        Display name. Also the identity used for winners and standings.
    avatar : str or None
        Avatar URL or reference.
    email : str or None
        Contact identifier.
    """

    name: str
    avatar: Optional[str] = None
    email: Optional[str] = None

    @property
    def is_bye(self) -> bool:
        """True for the absent-opponent sentinel."""
        return self.name == BYE_NAME

    @property
    def is_placeholder(self) -> bool:
        """True for slots still waiting on an earlier result."""
        # "TBD (Winners)" style placeholders carry a parenthesised source
        return self.name == TBD_NAME or self.name.startswith(TBD_NAME + " (")

    @property
    def is_real(self) -> bool:
        return not (self.is_bye or self.is_placeholder)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"name": self.name, "avatar": self.avatar, "email": self.email}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidParticipantError(
                f"Participant name must be a non-empty string, got {name!r}"
            )
        return cls(
            name=name.strip(),
            avatar=data.get("avatar"),
            email=data.get("email"),
        )


ParticipantLike = Union[str, Mapping[str, Any], Participant]

BYE = Participant(BYE_NAME)
TBD = Participant(TBD_NAME)


def placeholder(label: str) -> Participant:
    """Build a named TBD placeholder such as ``TBD (Winners)``."""
    return Participant(f"{TBD_NAME} ({label})")


def to_participant(value: ParticipantLike) -> Participant:
    """Coerce a name, a mapping or a Participant into a Participant.

    Raises:
        InvalidParticipantError: If the value cannot be interpreted
    """
    if isinstance(value, Participant):
        return value
    if isinstance(value, str):
        name = value.strip()
        if not name:
            raise InvalidParticipantError("Participant name must not be empty")
        return Participant(name)
    if isinstance(value, Mapping):
        return Participant.from_dict(value)
    raise InvalidParticipantError(
        f"Cannot build a participant from {type(value).__name__}"
    )


def normalize_participants(
    values: Optional[Iterable[ParticipantLike]],
) -> List[Participant]:
    """Coerce every entry, returning a fresh list."""
    if values is None:
        return []
    return [to_participant(value) for value in values]
