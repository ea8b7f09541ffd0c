"""
Command-line interface for CNPJ validation and formatting.

Usage:
    cnpj-alfa validate 12.ABC.345/01DE-35 00.000.000/0001-91
    cnpj-alfa format 12ABC34501DE35
    cnpj-alfa dv 12ABC34501DE
    cnpj-alfa generate --count 5 --numeric
"""

import argparse
import json
import logging
import random
import sys

from cnpj_alfa.config import get_settings
from cnpj_alfa.domain import CnpjError, compute_dv, format_cnpj, generate, normalize
from cnpj_alfa.services.report import describe, describe_batch

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def setup_logging(level: str = "INFO"):
    """Configure logging for the command line."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def cmd_validate(args: argparse.Namespace) -> int:
    if args.json:
        batch = describe_batch(args.values)
        print(json.dumps([r.model_dump() for r in batch.results], indent=2))
        return EXIT_OK if batch.invalid_count == 0 else EXIT_INVALID

    all_valid = True
    for value in args.values:
        report = describe(value)
        all_valid = all_valid and report.valid
        print(f"{report.formatted}  {'valid' if report.valid else 'invalid'}")

    return EXIT_OK if all_valid else EXIT_INVALID


def cmd_format(args: argparse.Namespace) -> int:
    for value in args.values:
        print(format_cnpj(value))
    return EXIT_OK


def cmd_dv(args: argparse.Namespace) -> int:
    try:
        digits = compute_dv(args.body)
    except CnpjError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(f"Check digits: {digits}")
    print(f"CNPJ: {format_cnpj(normalize(args.body) + str(digits))}")
    return EXIT_OK


def cmd_generate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    for _ in range(args.count):
        value = generate(alphanumeric=not args.numeric, rng=rng)
        print(value if args.raw else format_cnpj(value))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cnpj-alfa",
        description="Validate and format Brazilian CNPJ (alphanumeric and numeric)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate formatted and raw values
  cnpj-alfa validate 12.ABC.345/01DE-35 59952259000185

  # Machine-readable output
  cnpj-alfa validate --json 12ABC34501DE35

  # Compute check digits for a 12-character body
  cnpj-alfa dv 12ABC34501DE
        """,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: CNPJ_ALFA_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Validate CNPJ values")
    validate_parser.add_argument("values", nargs="+", help="CNPJ values, formatted or raw")
    validate_parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Print a JSON report instead of one line per value",
    )
    validate_parser.set_defaults(func=cmd_validate)

    format_parser = subparsers.add_parser("format", help="Format CNPJ values")
    format_parser.add_argument("values", nargs="+", help="CNPJ values, formatted or raw")
    format_parser.set_defaults(func=cmd_format)

    dv_parser = subparsers.add_parser("dv", help="Compute check digits for a body")
    dv_parser.add_argument("body", help="The 12 leading alphanumeric characters")
    dv_parser.set_defaults(func=cmd_dv)

    generate_parser = subparsers.add_parser("generate", help="Generate valid CNPJ values")
    generate_parser.add_argument(
        "--count", "-n",
        type=int,
        default=1,
        help="How many values to generate (default: 1)",
    )
    generate_parser.add_argument(
        "--numeric",
        action="store_true",
        help="Generate legacy all-numeric values",
    )
    generate_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print without punctuation",
    )
    generate_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output",
    )
    generate_parser.set_defaults(func=cmd_generate)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or get_settings().log_level)
    logger.debug(f"Running command {args.command}")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
