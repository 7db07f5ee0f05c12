"""
Command-Line Interface for the grade tracker.

Resolves the semester, looks up the courses named on the command line,
reports the codes that could not be found and opens the interactive
tracker with the rest.

USAGE:
------
    uqgrade CSSE1001 MATH1051            # current semester
    uqgrade -s 2 -y 2024 CSSE1001        # Semester 2, 2024
    uqgrade -s 3 COMP3506                # Summer Semester, this year
    python -m uqgrade --debug CSSE1001   # debug log in CACHE_DIR/uqgrade.log

EXIT CODES:
-----------
    0  quit from the tracker
    1  invalid semester/year or the tracker could not start
"""

import argparse
import logging

from .config import CACHE_DIR, LOG_FILE
from .data import CourseLookup
from .engines import TabController, resolve_when, split_codes
from .ui import GradeApp, TerminalDisplay

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s.%(funcName)s():%(lineno)d %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uqgrade",
        description="Track your grades for this semester's UQ courses",
    )
    parser.add_argument("codes", nargs="*", metavar="CODES",
                        help="Course codes, e.g. CSSE1001 MATH1051")
    parser.add_argument("-d", "--debug", action="store_true",
                        help=f"Debug mode (log written to {LOG_FILE})")
    parser.add_argument("-s", "--semester", type=int, default=0,
                        help="Semester (0 = current, 1 = Sem 1, 2 = Sem 2, 3 = Summer)")
    parser.add_argument("-y", "--year", type=int, default=0,
                        help="Year (0 = current)")
    return parser


def configure_logging(debug: bool = False):
    """
    Send log records to LOG_FILE.

    The terminal belongs to the tracker while it runs, so nothing is logged
    to stdout or stderr.
    """
    try:
        CACHE_DIR.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        TerminalDisplay.print_error(f"cannot create {CACHE_DIR}: {e}")
        logging.basicConfig(handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        filename=str(LOG_FILE),
        level=logging.DEBUG if debug else logging.WARNING,
        format=DEBUG_LOG_FORMAT if debug else LOG_FORMAT,
    )


def main(argv=None) -> int:
    """
    Run the tracker.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    try:
        when = resolve_when(args.semester, args.year)
    except ValueError as e:
        TerminalDisplay.print_error(str(e))
        return 1

    lookup = CourseLookup(when)
    codes = split_codes(" ".join(args.codes))
    courses = []
    if codes:
        TerminalDisplay.print_lookup(codes, when.fully_qualified)
        courses, invalid = lookup(codes)
        TerminalDisplay.print_found([course.name for course in courses])
        if invalid:
            logger.warning("Invalid courses codes: %s", invalid)
            TerminalDisplay.print_invalid_codes(invalid)

    app = GradeApp(TabController(courses, when), lookup)
    try:
        app.run()
    except Exception as e:
        logger.exception("Error running program")
        TerminalDisplay.print_error(f"Error running program: {e}")
        return 1
    return app.return_code or 0


if __name__ == "__main__":
    raise SystemExit(main())
