"""
Command dispatcher: contactbook add <name> <email> | list | help.
Run: contactbook <command> (installed script) or python -m cli.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from contactbook.application import (
    ContactService,
    FormatError,
    Invalid,
    StoreIOError,
    UsageError,
)
from contactbook.domain import Contact
from contactbook.infrastructure import DEFAULT_FILENAME, JsonContactStore

logger = logging.getLogger(__name__)

# Repo root: from src/cli/dispatcher.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

FILE_ENV = "CONTACTBOOK_FILE"
PHONE_REGION_ENV = "CONTACTBOOK_PHONE_REGION"

EXIT_OK = 0
EXIT_STORE_ERROR = 1
EXIT_USAGE = 2


class _ArgumentParser(argparse.ArgumentParser):
    """Raises UsageError instead of printing usage and exiting."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="contactbook",
        description="Keep a list of contacts (name, email) in a local JSON file.",
    )
    parser.add_argument(
        "-f",
        "--file",
        metavar="FILE",
        help=f"Data file (default: ${FILE_ENV} or ./{DEFAULT_FILENAME}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log store activity to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add a contact.")
    add_parser.add_argument("name", help="Contact name.")
    add_parser.add_argument("email", help="Contact email address.")
    add_parser.add_argument(
        "-p",
        "--phone",
        help="Optional phone number, stored in E.164 form when it parses.",
    )

    subparsers.add_parser("list", help="List all contacts.")
    subparsers.add_parser("help", help="Show this help.")
    return parser


def resolve_data_file(cli_value: str | None) -> Path:
    """--file wins, then $CONTACTBOOK_FILE, then contacts.json in the working directory."""
    value = (cli_value or "").strip() or os.environ.get(FILE_ENV, "").strip()
    return Path(value or DEFAULT_FILENAME)


def format_contact(contact: Contact) -> str:
    line = f"{contact.id} | {contact.name} | {contact.email}"
    if contact.phone:
        line += f" | {contact.phone}"
    return line


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # basicConfig does nothing when the root logger already has handlers.
    logging.getLogger().setLevel(logging.INFO if verbose else logging.WARNING)


def _cmd_add(service: ContactService, args: argparse.Namespace) -> int:
    result = service.add_contact(args.name, args.email, args.phone)
    if isinstance(result, Invalid):
        print(f"error: {result.reason}", file=sys.stderr)
        return EXIT_USAGE
    contact = result.contact
    print(f"Adding contact: {contact.name} <{contact.email}>")
    print("Saved.")
    return EXIT_OK


def _cmd_list(service: ContactService, args: argparse.Namespace) -> int:
    contacts = service.list_contacts()
    for contact in contacts:
        print(format_contact(contact))
    print(f"Total: {len(contacts)}")
    return EXIT_OK


_COMMANDS = {
    "add": _cmd_add,
    "list": _cmd_list,
}


def main(argv: list[str] | None = None) -> int:
    """Parse argv, run one command and return the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        print(parser.format_usage(), end="", file=sys.stderr)
        return EXIT_USAGE

    _configure_logging(args.verbose)

    if args.command == "help":
        print(parser.format_help(), end="")
        return EXIT_OK

    region = os.environ.get(PHONE_REGION_ENV, "").strip().upper() or None
    store = JsonContactStore(resolve_data_file(args.file), phone_region=region)
    service = ContactService(store)
    try:
        return _COMMANDS[args.command](service, args)
    except (StoreIOError, FormatError) as exc:
        logger.debug("Command %s failed on %s", args.command, store.path, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_STORE_ERROR


def run() -> None:
    """Console-script entrypoint: load .env, then exit with main()'s status."""
    # Load .env from repo root or current dir
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break
    sys.exit(main())
