"""
Look a pizza up from the command line.

Usage:
    python -m pizza_api regina
    python -m pizza_api            # reports that no name was provided

The JSON body is printed to stdout.  The exit code is 0 when the pizza
was found and 1 otherwise.
"""

import argparse
import sys
from typing import Optional, Sequence

from pizza_api.app.core.config import settings
from pizza_api.app.core.logging_config import setup_logging
from pizza_api.app.handlers.invocation import PIZZA_NAME_PARAM, handle


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pizza_api", description="Look up a pizza by name.")
    ap.add_argument("name", nargs="?", help="Pizza name, matched exactly (case-sensitive)")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file)
    descriptor = handle({PIZZA_NAME_PARAM: args.name})
    print(descriptor.body.decode("utf-8"))
    return 0 if descriptor.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
