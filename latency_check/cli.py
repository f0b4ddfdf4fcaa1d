"""
Command-line entry point.
Usage: latency-check [options] [method] <url>
"""

import argparse
import sys
from typing import List, Optional, Tuple

from . import __version__
from .config import configure_logging
from .errors import LatencyCheckError, UsageError
from .executor import build_request, send_request
from .formatting import build_report, render_report
from .output import emit
from .timing import synthesize


DEFAULT_METHOD = "GET"


class CheckArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def parse_header(value: str) -> Tuple[str, str]:
    """Split a "key:value" header argument on its first colon."""
    key, _, header_value = value.partition(":")
    key, header_value = key.strip(), header_value.strip()
    if not key or not header_value:
        raise argparse.ArgumentTypeError('Headers must be in "key:value" format')
    return key, header_value


def build_parser() -> argparse.ArgumentParser:
    parser = CheckArgumentParser(
        prog="latency-check",
        description="Measure HTTP response time with customizable options",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-d", "--decimal", action="store_true",
                        help="show timing with 2 decimal places")
    parser.add_argument("-o", "--output", action="store_true",
                        help="append output to latency-check-YYYY_MM_DD.txt")
    parser.add_argument("-b", "--body",
                        help='request body (e.g. \'{"key":"value"}\' or plain text)')
    parser.add_argument("-h", "--header", action="append", type=parse_header, default=[],
                        metavar="KEY:VALUE", help='header in "key:value" format (repeatable)')
    parser.add_argument("-t", "--timeout", metavar="SEC", help="timeout in seconds")
    parser.add_argument("target", nargs="+",
                        help="[method] url: HTTP method (GET, POST, PUT, etc., defaults to GET) and target URL")
    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line; options may appear before, between or after the positionals."""
    return build_parser().parse_intermixed_args(argv)


def split_target(target: List[str]) -> Tuple[str, str]:
    """Return (method, url) from the positional arguments."""
    if len(target) == 1:
        return DEFAULT_METHOD, target[0]
    if len(target) == 2:
        return target[0], target[1]
    raise UsageError(f"too many arguments: {' '.join(target[2:])}")


def main(argv: Optional[List[str]] = None) -> int:
    """Run one check and return the process exit status."""
    configure_logging()

    try:
        args = parse_arguments(argv)
        method, url = split_target(args.target)
        spec = build_request(
            method,
            url,
            headers=dict(args.header),
            body=args.body,
            timeout=args.timeout,
        )
        exchange = send_request(spec)
        breakdown = synthesize(spec, exchange)
        text = render_report(build_report(breakdown, decimal=args.decimal))
        emit(text, append=args.output)
    except LatencyCheckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0

