"""Command line entry point: ``json2swift -i input.json [-o out.swift]``."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from mcp_json2swift.context import DEFAULT_MODEL_NAME, GenerationOptions
from mcp_json2swift.emitter import generate_swift_code
from mcp_json2swift.errors import ModelGenerationError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json2swift",
        description="Generate Swift structs from a sample JSON document.",
    )
    parser.add_argument("-i", "--input", required=True, help="input JSON file")
    parser.add_argument("-o", "--output", help="write Swift code to this file")
    parser.add_argument(
        "-m",
        "--model",
        default=DEFAULT_MODEL_NAME,
        help=f"root struct name (default: {DEFAULT_MODEL_NAME})",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="model_type",
        default="Decodable",
        help="Decodable or Codable (default: Decodable)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log debug output to stderr"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("mcp_json2swift")
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = GenerationOptions(model_name=args.model, model_type=args.model_type)
    except ValidationError as e:
        print(f"Error: {e.errors()[0]['msg']}")
        return 1

    try:
        document = json.loads(Path(args.input).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Reading %s failed: %s", args.input, e)
        print("Error: Could not read or parse JSON file.")
        return 1

    try:
        swift_code = generate_swift_code(
            document,
            model_name=options.model_name,
            model_type=options.model_type,
            disambiguate=options.disambiguate,
        )
    except ModelGenerationError as e:
        print(f"Error: {e}")
        return 1

    if args.output:
        try:
            Path(args.output).write_text(swift_code, encoding="utf-8")
        except OSError as e:
            print(f"Error: {e}")
            return 1
        print(f"Swift model saved to {args.output}")
    else:
        print(swift_code, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
