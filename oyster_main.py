""" Command-line entry point: run one block with -c, or start the interactive shell. """
import argparse
import logging
import sys

from constants import CAPTURE, DEFAULT_STRATEGY
from shell import Shell
from session import Session


def build_parser():
    parser = argparse.ArgumentParser(
        prog="oyster",
        description="Interactive expression shell with persistent variables"
    )
    parser.add_argument(
        "-c", "--command",
        metavar="TEXT",
        help="evaluate TEXT, print the result and exit"
    )
    parser.add_argument(
        "--capture",
        action="store_const",
        const=CAPTURE,
        default=DEFAULT_STRATEGY,
        dest="strategy",
        help="capture command output so it can be used in expressions"
    )
    parser.add_argument("--debug", action="store_true", help="log debug traces to stderr")
    parser.add_argument("--no-color", action="store_true", help="do not color error messages")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sh = Shell(Session(args.strategy), color=not args.no_color)

    if args.command is not None:
        return 0 if sh.execute(args.command) else 1

    return sh.run()


if __name__ == "__main__":
    sys.exit(main())
