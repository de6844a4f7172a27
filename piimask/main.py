import argparse
import json
import sys
from collections.abc import Sequence
from typing import TextIO

from piimask.anonymization.models import AnonymizeOptions
from piimask.config.settings import Settings
from piimask.database.connection import close_pool, init_pool
from piimask.database.repositories.history_repository import HistoryRepository
from piimask.logging.logger import Log
from piimask.processor.exceptions import InputValidationError
from piimask.processor.processor import build_processor
from piimask.sanitization.factory import HtmlSanitizerFactory
from piimask.sanitization.html import sanitize_html
from piimask.sanitization.uri import sanitize_uri

_CATEGORY_FLAGS = (
    ("names", "replace_names", "names (surname with initials or full name)"),
    ("emails", "replace_emails", "e-mail addresses"),
    ("phones", "replace_phones", "phone numbers"),
    ("dates", "replace_dates", "numeric dates"),
    ("addresses", "replace_addresses", "street addresses"),
    ("ips", "replace_ips", "IPv4 addresses"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="piimask",
        description="Mask personal data in Russian-language text and sanitize markup.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    anonymize = subparsers.add_parser("anonymize", help="Replace PII with category markers.")
    anonymize.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )
    defaults = AnonymizeOptions()
    for flag, option_field, label in _CATEGORY_FLAGS:
        anonymize.add_argument(
            f"--{flag}",
            dest=option_field,
            action=argparse.BooleanOptionalAction,
            default=getattr(defaults, option_field),
            help=f"Replace {label}.",
        )
    anonymize.add_argument(
        "--json",
        action="store_true",
        help="Print the full result with metadata as JSON.",
    )

    html = subparsers.add_parser("sanitize-html", help="Keep only allow-listed HTML.")
    html.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )

    uri = subparsers.add_parser("sanitize-uri", help="Neutralize dangerous URI schemes.")
    uri.add_argument("uri", help="URI to sanitize.")
    return parser


def _read(stream: TextIO) -> str:
    try:
        return stream.read()
    finally:
        if stream is not sys.stdin:
            stream.close()


def _run_anonymize(args: argparse.Namespace, settings: Settings) -> int:
    options = AnonymizeOptions(
        **{option_field: getattr(args, option_field) for _, option_field, _ in _CATEGORY_FLAGS}
    )
    text = _read(args.input)

    if settings.history_enabled:
        init_pool(settings)
    try:
        history_repo = None
        if settings.history_enabled:
            history_repo = HistoryRepository()
            history_repo.ensure_schema()
        processor = build_processor(settings, history_repo=history_repo)
        try:
            result = processor.process(text, options)
        except InputValidationError as exc:
            print(f"piimask: {exc}", file=sys.stderr)
            return 2
    finally:
        if settings.history_enabled:
            close_pool()

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(result.anonymized_text)
    if result.status_message:
        print(f"piimask: {result.status_message}", file=sys.stderr)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse arguments -> configure logging -> run the subcommand."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.resolved_log_level(), stream=sys.stderr)

    if args.command == "anonymize":
        return _run_anonymize(args, settings)
    if args.command == "sanitize-html":
        sanitizer = HtmlSanitizerFactory.create(settings)
        print(sanitize_html(_read(args.input), sanitizer=sanitizer))
        return 0
    print(sanitize_uri(args.uri, base_origin=settings.uri_base_origin))
    return 0


if __name__ == "__main__":
    sys.exit(main())
