"""
Command-line entry point.

    trimatrix                      # run the fixed demonstration input
    trimatrix JxF12TrwUP45BMd      # run another Base58 string
    trimatrix --grid --json
"""

from __future__ import annotations

import argparse
import logging
import sys

from trimatrix.config import DEFAULT_CODE, ConfigError, PipelineConfig
from trimatrix.core.base58 import InvalidCharacterError
from trimatrix.pipeline import print_report, run_pipeline

logger = logging.getLogger("trimatrix.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trimatrix",
        description="Base58 -> trinary -> residues -> CRT -> Base58 round trip",
    )
    parser.add_argument("code", nargs="?", default=DEFAULT_CODE, help="Base58 input string")
    parser.add_argument("--grid", action="store_true", help="Print each matrix as three rows")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = PipelineConfig(code=args.code, grid=args.grid)
    try:
        result = run_pipeline(config)
    except InvalidCharacterError as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print_report(result, grid=config.grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
