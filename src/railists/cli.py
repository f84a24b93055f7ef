"""
Command line interface for the collection manager.

Usage:
    railists collection list -f collection.yaml
    railists collection csv -f collection.yaml -o collection.csv
    railists collection stats -f collection.yaml
    railists collection depot -f collection.yaml
    railists wishlist list -f wish_list.yaml
    railists wishlist budget -f wish_list.yaml

Every subcommand has a single letter alias (l, c, s, d, b). The command
exits with status 0 on success, 1 when the report fails and 2 on invalid
arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from railists import __version__
from railists.api.formatters import render_table
from railists.api.models import ReportRequest, ReportResponse
from railists.api.service import RailistsService

logger = logging.getLogger(__name__)

Handler = Callable[[RailistsService, ReportRequest], ReportResponse]


def _add_report(
    subparsers: argparse._SubParsersAction,
    name: str,
    alias: str,
    help_text: str,
    handler: Handler,
    with_output: bool = False,
) -> None:
    parser = subparsers.add_parser(name, aliases=[alias], help=help_text, description=help_text)
    parser.add_argument(
        "-f",
        "--file",
        required=True,
        metavar="FILE",
        help="The YAML document to read (required)",
    )
    if with_output:
        parser.add_argument(
            "-o",
            "--output",
            required=True,
            metavar="FILE",
            help="The output file name (required)",
        )
    parser.set_defaults(handler=handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the collection and wishlist commands."""
    parser = argparse.ArgumentParser(
        prog="railists",
        description="Model railway collection manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    collection = commands.add_parser(
        "collection",
        help="Reports on a collection",
        description="Reports on a collection",
    )
    collection_reports = collection.add_subparsers(dest="report", metavar="REPORT", required=True)
    _add_report(
        collection_reports, "list", "l",
        "List the collection elements",
        RailistsService.list_collection,
    )
    _add_report(
        collection_reports, "csv", "c",
        "Export the collection as csv file",
        RailistsService.export_collection,
        with_output=True,
    )
    _add_report(
        collection_reports, "stats", "s",
        "Calculate the collection statistics",
        RailistsService.collection_stats,
    )
    _add_report(
        collection_reports, "depot", "d",
        "Extract the depot information for locomotives",
        RailistsService.collection_depot,
    )

    wish_list = commands.add_parser(
        "wishlist",
        help="Reports on a wish list",
        description="Reports on a wish list",
    )
    wish_list_reports = wish_list.add_subparsers(dest="report", metavar="REPORT", required=True)
    _add_report(
        wish_list_reports, "list", "l",
        "List the wish list elements",
        RailistsService.list_wish_list,
    )
    _add_report(
        wish_list_reports, "budget", "b",
        "Calculate the wish list budget by priority",
        RailistsService.wish_list_budget,
    )

    return parser


def print_response(response: ReportResponse) -> int:
    """
    Print a report response.

    Summary lines and the table go to stdout, errors go to stderr.

    Returns:
        The process exit status
    """
    if not response.success:
        for error in response.errors:
            print(f"ERROR: {error}", file=sys.stderr)
        return 1

    for line in response.summary:
        print(line)
    if response.table is not None:
        print(render_table(response.table))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    request = ReportRequest(file_path=args.file, output_path=getattr(args, "output", None))
    logger.debug("Running %s %s on %s", args.command, args.report, request.path)

    response = args.handler(RailistsService(), request)
    return print_response(response)


if __name__ == "__main__":
    sys.exit(main())
