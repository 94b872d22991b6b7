#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""DeepL API sample script.

Shows the basic calls of deepl-api: usage, text translation and a glossary
round trip. Edit the settings below to try other options.

Usage:
    cd examples
    python translate_text.py

Environment variables (read automatically from .env):
    DEEPL_API_KEY: DeepL authentication key (":fx" suffix for DeepL API Free)
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from deepl_api import DeepLClient, TransportResult

PROJECT_ROOT = Path(__file__).parent.parent

# Load .env file from project root
load_dotenv(PROJECT_ROOT / ".env")


# =============================================================================
# Settings
# =============================================================================

TEXTS = ["Hello, world!", "How are you today?"]
SOURCE_LANG = "EN"
TARGET_LANG = "DE"
FORMALITY = "more"

GLOSSARY_ENTRIES = "world\tErde"


def report(label: str, result: TransportResult) -> bool:
    """Print a one-line status and return True on success."""
    if result.errno_curl != 0:
        print(f"{label}: transport error {result.errno_curl} ({result.errmsg_curl})")
        return False
    if result.errno_http >= 400:
        print(f"{label}: HTTP {result.errno_http} {result.errmsg_http}")
        return False
    print(f"{label}: HTTP {result.errno_http} {result.errmsg_http}")
    return True


async def main() -> int:
    auth_key = os.environ.get("DEEPL_API_KEY", "")
    if not auth_key:
        print("Error: set DEEPL_API_KEY (or add it to .env)", file=sys.stderr)
        return 1

    client = DeepLClient(auth_key)
    print(f"Endpoint: {client.server_url}")

    usage = await client.get_usage()
    if report("Usage", usage):
        print(f"  {usage.response.get('character_count')} / {usage.response.get('character_limit')}")

    translated = await client.translate_text(
        TEXTS, source_lang=SOURCE_LANG, target_lang=TARGET_LANG, formality=FORMALITY
    )
    if report("Translate", translated):
        for original, item in zip(TEXTS, translated.response["translations"]):
            print(f"  {original} -> {item['text']}")

    created = await client.create_glossary(
        "example", SOURCE_LANG, TARGET_LANG, "tsv", GLOSSARY_ENTRIES
    )
    if not report("Create glossary", created):
        return 1

    glossary_id = created.response["glossary_id"]
    entries = await client.get_glossary(glossary_id)
    if report("Glossary entries", entries):
        print(f"  {entries.text!r}")

    with_glossary = await client.translate_text(
        TEXTS[0], source_lang=SOURCE_LANG, target_lang=TARGET_LANG, glossary_id=glossary_id
    )
    if report("Translate with glossary", with_glossary):
        print(f"  {with_glossary.response['translations'][0]['text']}")

    report("Delete glossary", await client.delete_glossary(glossary_id))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
