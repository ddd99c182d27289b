"""
Main interface for user/developer of minisql.

Utility to start repl and parse files.

Requires minisql to be installed.
"""

import sys

from minisql import parse_args_and_start


if __name__ == '__main__':
    sys.exit(parse_args_and_start(sys.argv[1:]))
