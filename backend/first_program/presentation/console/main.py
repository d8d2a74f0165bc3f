"""
Run the console demonstrations.

Usage:
  first-program
  first-program --value 1e10 --question "Is it going to rain?"

Feature flags and logging come from the environment (or a .env file),
see EnvironmentConfig.
"""

import argparse
import sys
from typing import List, Optional

from first_program.core.di.service_locator import ServiceLocator
from first_program.core.utils.logger import get_logger, setup_logging
from first_program.presentation.console.application_host import (
    DEFAULT_CONVERSION_VALUE,
    DEFAULT_QUESTION,
    build_host,
)


logger = get_logger("console")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="first-program")
    parser.add_argument("--value", type=float, default=DEFAULT_CONVERSION_VALUE,
                        help="float value for the conversion demo")
    parser.add_argument("--question", type=str, default=DEFAULT_QUESTION,
                        help="question for the oracle demo")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        cfg = ServiceLocator.config().validate()
        setup_logging(level=cfg.log_level, log_dir=cfg.log_dir, to_file=cfg.log_to_file)
        build_host(cfg).run(value=args.value, question=args.question)
        return 0
    except Exception as e:
        logger.exception("An unexpected error occurred while running the application")
        # Logging might not be configured yet
        print(f"Application terminated unexpectedly: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
