"""Command-line interface for the train fare calculator."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from train_fare.adapters.config import AppConfig, DistanceTableLoader
from train_fare.adapters.console import FareFormatter, TerminalFarePrompter
from train_fare.application import (
    AdditionalFee,
    FareCalculationService,
    FareSettings,
    InteractiveFareSession,
    TableDistanceLookup,
    parse_fare_amount,
)
from train_fare.domain.errors import FareError

logger = logging.getLogger(__name__)

DEFAULT_FEE_NAME = "Additional fee"


def configure_logging(level: str) -> None:
    """Configure logging on stderr so it never mixes with fare output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="train-fare",
        description="Metro fare calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Ask for stations, VIP status and extra fees interactively
  train-fare

  # Quote a single journey
  train-fare quote 1s 3s

  # VIP journey with a festival surcharge, as JSON
  train-fare quote 1s 3s --vip --fee-name "festival surcharge" --fee 2.5 --json

  # List configured stations
  train-fare stations
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("interactive", help="Compute a fare interactively (default)")

    # Quote command
    quote_parser = subparsers.add_parser("quote", help="Compute the fare between two stations")
    quote_parser.add_argument("origin", help="Starting station name (e.g., 1s)")
    quote_parser.add_argument("destination", help="Destination station name (e.g., 3s)")
    quote_parser.add_argument("--vip", action="store_true", help="Apply the VIP discount")
    quote_parser.add_argument("--fee-name", help="Name of an additional fee")
    quote_parser.add_argument("--fee", help="Amount of the additional fee in yuan")
    quote_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Stations command
    stations_parser = subparsers.add_parser("stations", help="List configured stations")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    if args.config:
        return AppConfig(config_file=args.config)
    return AppConfig()


def _build_service(config: AppConfig) -> tuple[FareCalculationService, TableDistanceLookup]:
    table = DistanceTableLoader.load(config)
    lookup = TableDistanceLookup(table)
    settings = FareSettings(
        base_fare=config.base_fare,
        increment_rate=config.increment_rate,
        vip_discount=config.vip_discount,
    )
    return FareCalculationService(lookup, settings), lookup


def run_quote(args: argparse.Namespace, service: FareCalculationService) -> None:
    """Print a single non-interactive quote."""
    other_fee = None
    if args.fee is not None:
        other_fee = AdditionalFee(
            name=args.fee_name or DEFAULT_FEE_NAME, amount=parse_fare_amount(args.fee)
        )
    elif args.fee_name:
        raise ValueError("--fee-name requires --fee")

    quote = service.quote(args.origin, args.destination, vip=args.vip, other_fee=other_fee)
    formatter = FareFormatter()
    if args.json:
        print(json.dumps(formatter.quote_to_dict(quote), indent=2, ensure_ascii=False))
    else:
        print(formatter.format_quote(quote))


def run_stations(args: argparse.Namespace, lookup: TableDistanceLookup) -> None:
    """Print the station table with cumulative distances."""
    cumulative = lookup.cumulative_distances()
    if args.json:
        data = [{"id": station_id, "cumulative_km": round(km, 3)} for station_id, km in cumulative]
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return

    print(f"\n{len(cumulative)} station(s):\n")
    for station_id, km in cumulative:
        print(f"  {station_id:<8} {km:6.1f} KM")


def run_interactive(config: AppConfig, service: FareCalculationService) -> None:
    """Run the interactive fare session on the terminal."""
    session = InteractiveFareSession(
        service,
        TerminalFarePrompter(),
        FareFormatter(),
        max_attempts=config.max_prompt_attempts,
    )
    session.run()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
        configure_logging("DEBUG" if args.verbose else config.log_level)
        service, lookup = _build_service(config)

        if args.command == "quote":
            run_quote(args, service)
        elif args.command == "stations":
            run_stations(args, lookup)
        else:
            run_interactive(config, service)

    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    except (FareError, ValueError, FileNotFoundError) as e:
        logger.debug("Fare computation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
