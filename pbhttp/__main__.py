"""Entry point: python -m pbhttp

Reads a JSON descriptor file, generates <file>.pb.http.<ext>.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .builder import build
from .errors import GenerationError
from .loader import load_descriptors
from .naming import METHOD_NAMING_STYLES
from .targets import TARGETS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pbhttp",
        description="Generate an HTTP client class from endpoint descriptors",
    )
    parser.add_argument("descriptors", help="JSON file with the endpoint descriptors")
    parser.add_argument("--project", required=True, help="Client package (project) name")
    parser.add_argument(
        "--package-path", default="/", help="Path of the message files inside the package",
    )
    parser.add_argument("--target", default="dart", choices=sorted(TARGETS))
    parser.add_argument("--output-dir", default=".", help="Directory to write the client to")
    parser.add_argument(
        "--method-naming", default="literal", choices=METHOD_NAMING_STYLES,
        help="'literal' lowercases the first letter only; 'camel' normalizes the name",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        descriptors = load_descriptors(args.descriptors)
        result = build(
            descriptors,
            args.project,
            args.package_path,
            target=args.target,
            output_dir=args.output_dir,
            method_naming=args.method_naming,
        )
    except GenerationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated {result.path} ({len(result.methods)} methods)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
