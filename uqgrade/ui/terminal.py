"""
Plain terminal output.

Messages printed before the interactive tracker starts or after it fails:
lookup progress, invalid codes and fatal errors. Everything shown while the
tracker runs goes through ui.app instead.
"""

import sys


class TerminalDisplay:
    """
    Colored one-line messages around the interactive session.

    Warnings and errors go to stderr so they survive output redirection.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"

    @classmethod
    def print_lookup(cls, codes: list, semester_label: str):
        """Announce the startup lookup; scraping can take a few seconds."""
        print(f"{cls.BOLD}{cls.CYAN}{semester_label}{cls.RESET}")
        print(f"  {cls.DIM}Looking up {', '.join(codes)}...{cls.RESET}")

    @classmethod
    def print_found(cls, names: list):
        if names:
            print(f"  {cls.GREEN}✓ Found: {', '.join(names)}{cls.RESET}")

    @classmethod
    def print_invalid_codes(cls, codes: list):
        print(f"  {cls.YELLOW}⚠ Invalid course codes: {', '.join(codes)}{cls.RESET}",
              file=sys.stderr)

    @classmethod
    def print_error(cls, message: str):
        print(f"{cls.RED}Error: {message}{cls.RESET}", file=sys.stderr)
