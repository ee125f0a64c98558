"""
Main entry point for `openinghours` command-line utility.

This is to enable `python -m openinghours` if that is needed for any reason,
normal use should be to use the `openinghours` command-line tool directly.
"""

from openinghours.cli import main

main()
