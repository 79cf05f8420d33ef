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

# --- Constants ---

# Sentinel participant names
BYE_NAME = "BYE"
TBD_NAME = "TBD"

# Tournament formats
FORMAT_SINGLE_ELIMINATION = "single-elimination"
FORMAT_DOUBLE_ELIMINATION = "double-elimination"
FORMAT_ROUND_ROBIN = "round-robin"
FORMAT_SWISS = "swiss"
FORMAT_FREE_FOR_ALL = "free-for-all"

SUPPORTED_FORMATS = (
    FORMAT_SINGLE_ELIMINATION,
    FORMAT_DOUBLE_ELIMINATION,
    FORMAT_ROUND_ROBIN,
    FORMAT_SWISS,
    FORMAT_FREE_FOR_ALL,
)
DEFAULT_FORMAT = FORMAT_SINGLE_ELIMINATION

# Bracket tags carried by rounds and matches
BRACKET_WINNERS = "winners"
BRACKET_LOSERS = "losers"
BRACKET_FINALS = "finals"
BRACKET_SWISS = "swiss"
BRACKET_ROUND_ROBIN = "round-robin"
BRACKET_FREE_FOR_ALL = "free-for-all"

ELIMINATION_BRACKETS = (BRACKET_WINNERS, BRACKET_LOSERS, BRACKET_FINALS)

# Round labels
FINAL_LABEL = "Final"
GRAND_FINAL_LABEL = "Gran Final"
PHASE_LABEL = "Fase {number}"
ROUND_LABEL = "Ronda {number}"
WINNERS_PREFIX = "W "
LOSERS_LABEL = "L Ronda {number}"

# Elimination round names keyed by the number of matches in the round
ELIMINATION_ROUND_NAMES = {
    1: FINAL_LABEL,
    2: "Semifinales",
    4: "Cuartos",
    8: "Octavos",
}

# Free-for-all defaults
DEFAULT_GROUP_CAPACITY = 8
DEFAULT_ADVANCE_PER_GROUP = 4

# Swiss pairing: candidate pairs tried before falling back to rank order
MAX_PAIRING_STEPS = 10000

# Standings scoring (3-1-0 for league style formats)
POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1
POINTS_FOR_LOSS = 0

# Money
DEFAULT_PLATFORM_FEE_PERCENT = 10.0
DEFAULT_CURRENCY = "MXN"
MONEY_DECIMAL_PLACES = 2

CURRENCY_SYMBOLS = {
    "USD": "$",
    "MXN": "$",
    "ARS": "$",
    "COP": "$",
    "EUR": "€",
    "BRL": "R$",
}

# Prize pool sources
POOL_SOURCE_ENTRY_FEES = "entry-fees"
POOL_SOURCE_MANUAL = "manual"
# Share of the participant cap assumed to register when estimating a pool
EXPECTED_FILL_RATE = 0.75
