"""Command-line interface for Bracketeer.

Generates brackets, computes prize splits and prints standings as JSON.
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

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from bracketeer.brackets import generate_rounds
from bracketeer.constants import (
    BRACKET_ROUND_ROBIN,
    BRACKET_SWISS,
    DEFAULT_CURRENCY,
    DEFAULT_FORMAT,
    DEFAULT_PLATFORM_FEE_PERCENT,
    SUPPORTED_FORMATS,
)
from bracketeer.exceptions import BracketeerException, ConfigurationError
from bracketeer.finance import (
    DISTRIBUTION_PRESETS,
    format_currency,
    get_preset,
    summarize,
)
from bracketeer.models import (
    FinancialConfig,
    PrizeDistribution,
    Round,
    load_config,
    rounds_from_list,
    rounds_to_list,
)
from bracketeer.standings import calculate_standings
from bracketeer.utils import set_verbosity, setup_logger

logger = setup_logger(__name__)


def parse_split(value: str) -> List[PrizeDistribution]:
    """Parse a comma separated list of percentages into distributions.

    Args:
        value: Percentages in finishing order (e.g., "60,30,10")

    Returns:
        One PrizeDistribution per entry, positions numbered from 1

    Raises:
        argparse.ArgumentTypeError: If an entry is not a number

    Examples:
        >>> [d.percentage for d in parse_split("60,30,10")]
        [60.0, 30.0, 10.0]
    """
    distributions = []
    for position, part in enumerate(value.split(","), start=1):
        part = part.strip()
        try:
            percentage = float(part)
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"Invalid percentage '{part}'. Use numbers like '60,30,10'"
            )
        distributions.append(
            PrizeDistribution(position=str(position), percentage=percentage)
        )
    return distributions


def _read_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"File not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}")


def load_players(path: str) -> List[Any]:
    """Load participants from a JSON list or a text file with one name per line."""
    if Path(path).suffix.lower() == ".json":
        data = _read_json(path)
        if not isinstance(data, list):
            raise ConfigurationError(f"{path} must hold a JSON list of participants")
        return data

    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}")


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run_rounds(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else None
    format_name = args.format or (config.format if config else DEFAULT_FORMAT)

    if args.players:
        players = load_players(args.players)
        count = args.count if args.count is not None else len(players)
    else:
        count = args.count or 0
        players = [f"Player {i}" for i in range(1, count + 1)]

    rounds = generate_rounds(count, players, format=format_name, config=config)
    _print_json(rounds_to_list(rounds))
    return 0


def run_split(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else None
    settings = config.financial_config() if config else FinancialConfig()

    if args.preset:
        distributions = get_preset(args.preset)
    elif args.split is not None:
        distributions = args.split
    else:
        distributions = config.prize_distribution if config else []

    # Explicit flags override the config file
    summary = summarize(
        args.gross,
        distributions,
        FinancialConfig(
            platform_fee_percent=(
                args.fee if args.fee is not None else settings.platform_fee_percent
            ),
            currency=args.currency or settings.currency,
        ),
    )

    data = summary.to_dict()
    data["formatted"] = {
        "gross_amount": format_currency(summary.gross_amount, summary.currency),
        "platform_fee": format_currency(summary.platform_fee, summary.currency),
        "net_revenue": format_currency(summary.net_revenue, summary.currency),
        "organizer_residual": format_currency(
            summary.organizer_residual, summary.currency
        ),
        "prizes": [format_currency(p.amount, summary.currency) for p in summary.prizes],
    }
    _print_json(data)
    return 0


def _infer_format(rounds: List[Round]) -> Optional[str]:
    """League brackets carry their format in the round tags."""
    for round_data in rounds:
        if round_data.bracket in (BRACKET_SWISS, BRACKET_ROUND_ROBIN):
            return round_data.bracket
    return None


def run_standings(args: argparse.Namespace) -> int:
    data = _read_json(args.bracket)
    try:
        rounds = rounds_from_list(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ConfigurationError(f"{args.bracket} is not a valid bracket: {e}")

    table = calculate_standings(rounds, args.format or _infer_format(rounds))
    _print_json([entry.to_dict() for entry in table])
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="bracketeer",
        description="Generate tournament brackets and prize splits",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Eight player double elimination bracket
  bracketeer rounds --format double-elimination --count 8

  # Bracket from a player list and a tournament config
  bracketeer rounds --players players.json --config tournament.json

  # 60/30/10 split of 1600 collected with the default 10% fee
  bracketeer split --gross 1600 --split 60,30,10

  # Fee, currency and prizes from a tournament config
  bracketeer split --gross 1600 --config tournament.json

  # Standings of a saved swiss bracket
  bracketeer standings --bracket swiss.json
        """,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    rounds_parser = subparsers.add_parser("rounds", help="Generate a bracket")
    rounds_parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        help=f"Tournament format (default: config format or {DEFAULT_FORMAT})",
    )
    rounds_parser.add_argument(
        "--players", help="JSON list or text file with one participant per line"
    )
    rounds_parser.add_argument(
        "--count",
        type=int,
        help="Number of participants; named 'Player 1..N' without --players",
    )
    rounds_parser.add_argument("--config", help="Load tournament settings from JSON")
    rounds_parser.set_defaults(handler=run_rounds)

    split_parser = subparsers.add_parser("split", help="Compute fee and prize splits")
    split_parser.add_argument(
        "--gross", type=float, required=True, help="Total amount collected"
    )
    distribution = split_parser.add_mutually_exclusive_group()
    distribution.add_argument(
        "--split",
        type=parse_split,
        help="Prize percentages in finishing order (e.g., '60,30,10')",
    )
    distribution.add_argument(
        "--preset",
        choices=list(DISTRIBUTION_PRESETS),
        help="Use a named prize distribution",
    )
    split_parser.add_argument(
        "--fee",
        type=float,
        help=(
            "Platform fee percentage "
            f"(default: config value or {DEFAULT_PLATFORM_FEE_PERCENT})"
        ),
    )
    split_parser.add_argument(
        "--currency",
        help=(
            "Currency code for display "
            f"(default: config value or {DEFAULT_CURRENCY})"
        ),
    )
    split_parser.add_argument(
        "--config",
        help="Take fee, currency and prize distribution from a tournament config",
    )
    split_parser.set_defaults(handler=run_split)

    standings_parser = subparsers.add_parser(
        "standings", help="Print standings for a saved bracket"
    )
    standings_parser.add_argument(
        "--bracket", required=True, help="Bracket JSON as printed by 'rounds'"
    )
    standings_parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        help="Scoring format (default: inferred from the bracket)",
    )
    standings_parser.set_defaults(handler=run_standings)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)

    try:
        return args.handler(args)
    except BracketeerException as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
