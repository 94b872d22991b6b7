# SPDX-License-Identifier: Apache-2.0
"""
DeepL API - CLI Tool

Calls one DeepL v2 endpoint per invocation and prints the result record
(errno_curl, errmsg_curl, errno_http, errmsg_http, response) as JSON.

Usage:
    deepl-api <command> [options]

Examples:
    deepl-api usage
    deepl-api translate "Hello" -t DE
    deepl-api document-upload paper.pdf -t JA
    deepl-api document-download <id> <key> -o paper_ja.pdf
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, NoReturn

from dotenv import load_dotenv

from deepl_api.client.base import ConfigurationError
from deepl_api.client.deepl import DeepLClient
from deepl_api.transport.errors import TransportErrorCode
from deepl_api.transport.models import TransportResult

logger = logging.getLogger(__name__)

AUTH_KEY_ENV = "DEEPL_API_KEY"
SERVER_URL_ENV = "DEEPL_SERVER_URL"


def parse_args() -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="deepl-api",
        description="DeepL API client - calls one DeepL v2 endpoint and prints the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s usage                                  # Usage of the billing period
  %(prog)s languages --type target                # Supported target languages
  %(prog)s translate "Hello" "World" -t DE        # Batch text translation
  %(prog)s glossary-create terms EN DE --entries-file terms.tsv
  %(prog)s document-status <id> <key>             # Document translation status

Environment Variables:
  {AUTH_KEY_ENV}     DeepL authentication key (":fx" suffix selects DeepL API Free)
  {SERVER_URL_ENV}  Override the API base URL
""",
    )

    parser.add_argument(
        "--auth-key",
        help=f"DeepL authentication key (or set {AUTH_KEY_ENV})",
    )
    parser.add_argument(
        "--server-url",
        help=f"API base URL override (or set {SERVER_URL_ENV})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    commands = parser.add_subparsers(dest="command", required=True, metavar="command")

    commands.add_parser("usage", help="Show usage and limits")

    languages = commands.add_parser("languages", help="List supported languages")
    languages.add_argument(
        "--type",
        default="source",
        choices=["source", "target"],
        help="Language list to fetch (default: source)",
    )

    commands.add_parser("glossary-pairs", help="List glossary language pairs")
    commands.add_parser("glossaries", help="List glossaries")

    create = commands.add_parser("glossary-create", help="Create a glossary")
    create.add_argument("name", help="Glossary name")
    create.add_argument("source_lang", help="Source language code")
    create.add_argument("target_lang", help="Target language code")
    entries = create.add_mutually_exclusive_group(required=True)
    entries.add_argument("--entries", help="Glossary entries")
    entries.add_argument("--entries-file", type=Path, help="File containing glossary entries")
    create.add_argument(
        "--entries-format",
        default="tsv",
        choices=["tsv", "csv"],
        help="Entries format (default: tsv)",
    )

    for name, help_text in (
        ("glossary-show", "Show glossary details"),
        ("glossary-entries", "Export glossary entries as TSV"),
        ("glossary-delete", "Delete a glossary"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("glossary_id", help="Glossary ID")

    translate = commands.add_parser("translate", help="Translate text")
    translate.add_argument("text", nargs="+", help="Text(s) to translate")
    translate.add_argument("-t", "--target", required=True, help="Target language code")
    translate.add_argument(
        "-s",
        "--source",
        default="",
        help="Source language code (default: auto-detect)",
    )
    translate.add_argument("--formality", default="default", help="Formality (default: default)")
    translate.add_argument("--glossary-id", default="", help="Glossary ID")
    translate.add_argument("--tag-handling", default="", choices=["", "xml", "html"])

    upload = commands.add_parser("document-upload", help="Upload a document for translation")
    upload.add_argument("path", type=Path, help="Document to translate")
    upload.add_argument("-t", "--target", required=True, help="Target language code")
    upload.add_argument("-s", "--source", default="", help="Source language code")
    upload.add_argument("--formality", default="", help="Formality")
    upload.add_argument("--glossary-id", default="", help="Glossary ID")

    for name, help_text in (
        ("document-status", "Check document translation status"),
        ("document-download", "Download a translated document"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("document_id", help="Document ID")
        sub.add_argument("document_key", help="Document key")
    download = commands.choices["document-download"]
    download.add_argument("-o", "--output", type=Path, required=True, help="Output file path")

    return parser.parse_args()


def create_client(args: argparse.Namespace) -> DeepLClient:
    """Create a client from CLI arguments and environment.

    Args:
        args: Command line arguments.

    Returns:
        Client instance.

    Raises:
        ConfigurationError: If no authentication key is available.
    """
    auth_key = args.auth_key or os.environ.get(AUTH_KEY_ENV, "")
    server_url = args.server_url or os.environ.get(SERVER_URL_ENV)
    return DeepLClient(auth_key=auth_key, server_url=server_url)


async def call_endpoint(client: DeepLClient, args: argparse.Namespace) -> TransportResult:
    """Dispatch the selected subcommand to its client method.

    Args:
        client: DeepL client.
        args: Command line arguments.

    Returns:
        Result of the single API call.
    """
    command = args.command

    if command == "usage":
        return await client.get_usage()
    if command == "languages":
        if args.type == "target":
            return await client.get_target_languages()
        return await client.get_source_languages()
    if command == "glossary-pairs":
        return await client.get_glossaries_languages()
    if command == "glossaries":
        return await client.list_glossaries()
    if command == "glossary-create":
        if args.entries_file is not None:
            entries = args.entries_file.read_text(encoding="utf-8")
        else:
            entries = args.entries
        return await client.create_glossary(
            args.name, args.source_lang, args.target_lang, args.entries_format, entries
        )
    if command == "glossary-show":
        return await client.get_glossary_details(args.glossary_id)
    if command == "glossary-entries":
        return await client.get_glossary(args.glossary_id)
    if command == "glossary-delete":
        return await client.delete_glossary(args.glossary_id)
    if command == "translate":
        text = args.text[0] if len(args.text) == 1 else args.text
        return await client.translate_text(
            text,
            source_lang=args.source,
            target_lang=args.target,
            formality=args.formality,
            glossary_id=args.glossary_id,
            tag_handling=args.tag_handling,
        )
    if command == "document-upload":
        return await client.upload_document(
            args.source, args.target, args.formality, args.glossary_id, args.path
        )
    if command == "document-status":
        return await client.check_document_translation_status(
            args.document_id, args.document_key
        )
    if command == "document-download":
        return await client.download_document(args.document_id, args.document_key)

    raise ValueError(f"Unknown command: {command}")


def format_result(result: TransportResult) -> str:
    """Render a result record as indented JSON.

    Raw bodies are shown as text.
    """
    record: dict[str, Any] = result.to_dict()
    if isinstance(result.response, bytes):
        record["response"] = result.text
    return json.dumps(record, indent=2, ensure_ascii=False)


def is_success(result: TransportResult) -> bool:
    """Return True if the exchange completed with a non-error status."""
    return result.errno_curl == TransportErrorCode.OK and 0 < result.errno_http < 400


async def run(args: argparse.Namespace) -> int:
    """Execute the selected command.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    try:
        client = create_client(args)
    except ConfigurationError as e:
        print(
            f"Error: {e}.\n"
            f"  Set --auth-key option or {AUTH_KEY_ENV} environment variable.",
            file=sys.stderr,
        )
        return 1

    entries_file = getattr(args, "entries_file", None)
    if entries_file is not None and not entries_file.is_file():
        print(f"Error: Entries file not found: {entries_file}", file=sys.stderr)
        return 1

    result = await call_endpoint(client, args)

    if args.command == "document-download" and is_success(result):
        try:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_bytes(result.response)
        except OSError as e:
            print(f"Error: Cannot write output file {args.output}: {e}", file=sys.stderr)
            return 1
        logger.info("Wrote %d bytes to %s", len(result.response), args.output)
        result = TransportResult(
            result.errno_curl,
            result.errmsg_curl,
            result.errno_http,
            result.errmsg_http,
            str(args.output),
        )

    print(format_result(result))
    return 0 if is_success(result) else 1


def main() -> NoReturn:
    """Main entry point."""
    load_dotenv()
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
