#!/usr/bin/env python3
"""Parse numeric strings from the command line and print the results."""
import argparse
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from locale_number_parser.config import Settings
from locale_number_parser.parser import NumberParser
from locale_number_parser.utils.logging import get_logger, setup_logging


def main(argv: list[str] | None = None) -> int:
    """Parse every VALUE and print ``<input> -> <result>``; exit 1 if any is unresolved."""
    settings = Settings()
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("values", nargs="+", metavar="VALUE")
    ap.add_argument("--lang", default=settings.language_code)
    ap.add_argument("--region", default=settings.region_code)
    ap.add_argument("--prefer-locale", action="store_true", default=settings.prefer_locale_formatting)
    args = ap.parse_args(argv)

    setup_logging(settings.log_level, json_output=False)
    parser = NumberParser.create(args.lang or None, args.region or None, args.prefer_locale)

    unresolved = 0
    for value in args.values:
        result = parser.parse(value)
        if result is None:
            unresolved += 1
        print(f"{value!r} -> {result!r}")
    get_logger("parse_number").debug("values_parsed", total=len(args.values), unresolved=unresolved)
    return 1 if unresolved else 0


if __name__ == "__main__":
    sys.exit(main())
