"""
Argument parsing shared by plan.py and export_plan.py.
"""

import argparse
import sys


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"✗ {message}\n")


def usage_error(parser, error):
    """Report an invalid input the same way argparse reports bad arguments."""
    parser.print_usage(sys.stderr)
    print(f"✗ {error}", file=sys.stderr)
    return 1


def plan_error(error):
    print(f"✗ {error}", file=sys.stderr)
    return 1
