"""Command-line interface: link, unlink, list and status."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable, Sequence

from pave.linker import LinkError, create_link, list_links, remove_link, status_link
from pave.registry import RegistryError

VERSION = "dev"

_FAILURES = (LinkError, RegistryError, OSError)


class _UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class _CommandError(Exception):
    """Raised when a command fails; its message is shown to the user."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _UsageError(message)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _run_link(args: argparse.Namespace) -> None:
    if args.verbose:
        print(f"Linking {args.name} -> {args.path} (dry-run={str(args.dry_run).lower()})")
    if args.dry_run:
        print(f"[DRY-RUN] Would link {args.name} -> {args.path}")
        return
    try:
        create_link(args.name, args.path, args.verbose)
    except _FAILURES as exc:
        raise _CommandError(f"failed to create link: {exc}") from exc
    if args.verbose:
        print("Link created successfully")


def _run_unlink(args: argparse.Namespace) -> None:
    if args.verbose:
        print(f"Unlinking {args.name} (dry-run={str(args.dry_run).lower()})")
    if args.dry_run:
        print(f"[DRY-RUN] Would unlink {args.name}")
        return
    try:
        remove_link(args.name, args.verbose)
    except _FAILURES as exc:
        raise _CommandError(f"failed to remove link: {exc}") from exc
    if args.verbose:
        print("Link removed successfully")


def _all_links(verbose: bool):
    try:
        return list_links(verbose)
    except _FAILURES as exc:
        raise _CommandError(f"failed to list links: {exc}") from exc


def _run_list(args: argparse.Namespace) -> None:
    links = _all_links(args.verbose)
    if not links:
        print("No links found")
        return
    print("Managed links:")
    for link in links:
        print(f"  {link.name} -> {link.path} [{link.status or 'valid'}]")


def _run_status(args: argparse.Namespace) -> None:
    if not args.name:
        links = _all_links(args.verbose)
        if not links:
            print("No links found")
            return
        print("Link status:")
        for link in links:
            print(f"  {link.name}: {link.path} -> {link.target} [{link.status or 'valid'}]")
        return

    try:
        link = status_link(args.name, args.verbose)
    except _FAILURES as exc:
        raise _CommandError(f"failed to get status: {exc}") from exc
    if link is None:
        print(f"Link {_quote(args.name)} not found")
        return
    print(f"Name: {link.name}")
    print(f"Path: {link.path}")
    print(f"Target: {link.target}")
    print(f"Status: {link.status}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``pave`` command."""
    # Options shared by every subcommand; SUPPRESS keeps a value given before
    # the subcommand from being reset when it is not repeated after it.
    shared = _Parser(add_help=False)
    shared.add_argument(
        "--verbose", action="store_true", default=argparse.SUPPRESS, help="Enable verbose output"
    )
    shared.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Preview changes without applying them",
    )

    parser = _Parser(
        prog="pave",
        description=(
            "Pave is a CLI tool that helps manage symbolic links "
            "and generate installation scripts."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--dry-run", dest="dry_run", action="store_true", help="Preview changes without applying them"
    )
    parser.add_argument("-V", "--version", action="store_true", help="Print version information")
    parser.set_defaults(handler=None)

    commands = parser.add_subparsers(dest="command", metavar="command", parser_class=_Parser)

    link = commands.add_parser(
        "link",
        parents=[shared],
        help="Create a symbolic link",
        description="Create a symbolic link with the specified name and path.",
    )
    link.add_argument("--name", required=True, help="Name of the link")
    link.add_argument("--path", required=True, help="Path for the link")
    link.set_defaults(handler=_run_link)

    unlink = commands.add_parser(
        "unlink",
        parents=[shared],
        help="Remove a symbolic link",
        description="Remove a symbolic link by name.",
    )
    unlink.add_argument("--name", required=True, help="Name of the link to remove")
    unlink.set_defaults(handler=_run_unlink)

    listing = commands.add_parser(
        "list",
        parents=[shared],
        help="List all symbolic links",
        description="List all managed symbolic links.",
    )
    listing.set_defaults(handler=_run_list)

    status = commands.add_parser(
        "status",
        parents=[shared],
        help="Show status of a symbolic link",
        description="Show the status of a specific symbolic link or all links.",
    )
    status.add_argument("--name", default="", help="Name of the link to check")
    status.set_defaults(handler=_run_status)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``pave`` command and return its exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except _UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(parser.format_usage(), end="", file=sys.stderr)
        return 1

    if args.version:
        print(VERSION)
        return 0

    handler: Callable[[argparse.Namespace], None] | None = args.handler
    if handler is None:
        parser.print_help()
        return 0

    try:
        handler(args)
    except _CommandError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())