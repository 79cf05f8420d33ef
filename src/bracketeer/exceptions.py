"""Exceptions for use in Bracketeer"""

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


# ========== Base Application Exception ==========


class BracketeerException(Exception):
    """Base exception for all Bracketeer errors.

    All custom exceptions in the library inherit from this class, so callers
    can catch every domain error with a single except clause.
    """

    pass


# ========== Bracket Exceptions ==========


class BracketException(BracketeerException):
    """Base exception for bracket generation and progression errors."""

    pass


class InvalidFormatError(BracketException):
    """Raised when an unknown tournament format is requested."""

    def __init__(self, format_name: str, supported=None):
        self.format_name = format_name
        self.supported = tuple(supported or ())
        message = f"Unknown tournament format: {format_name!r}"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class MatchNotFoundError(BracketException):
    """Raised when a match id does not exist in the bracket."""

    pass


class InvalidResultError(BracketException):
    """Raised when a reported result cannot be applied to a match."""

    pass


# ========== Validation Exceptions ==========


class ValidationError(BracketeerException):
    """Raised when an input value is rejected before any computation."""

    pass


class ParticipantCountMismatchError(ValidationError):
    """Raised when the participant count disagrees with the participant list."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Participant count {expected} does not match the {actual} "
            f"participant(s) supplied"
        )


class InvalidParticipantError(ValidationError):
    """Raised when a participant entry cannot be interpreted."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationError(BracketeerException):
    """Raised when a tournament configuration file is missing or malformed."""

    pass
