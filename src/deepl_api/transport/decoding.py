# SPDX-License-Identifier: Apache-2.0
"""JSON decoding of transport results.

Decoding never raises. A body that is not valid JSON (empty, truncated,
tab-separated glossary entries, a binary document) becomes an empty mapping,
so callers must branch on ``errno_http`` rather than on the decoded value.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from typing import Any

from deepl_api.transport.models import TransportResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeOutcome:
    """Result of parsing a raw body.

    Attributes:
        ok: True when the body parsed as JSON.
        value: Parsed value, or an empty dict when parsing failed.
        error: Parser message on failure.
    """

    ok: bool
    value: Any
    error: str | None = None


def decode_body(raw: bytes | str) -> DecodeOutcome:
    """Parse ``raw`` as JSON, falling back to an empty mapping."""
    try:
        return DecodeOutcome(ok=True, value=json.loads(raw))
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError both derive from ValueError;
        # RecursionError comes from pathologically nested arrays or objects
        return DecodeOutcome(ok=False, value={}, error=str(e))


def decode(result: TransportResult) -> TransportResult:
    """Replace the raw body of ``result`` with its decoded JSON value.

    Args:
        result: Result carrying a raw body.

    Returns:
        Copy of ``result`` with ``response`` set to the parsed value, or to
        ``{}`` when the body is not JSON. Other fields are left untouched.
    """
    outcome = decode_body(result.response)
    if not outcome.ok:
        logger.debug(
            "Response body is not JSON (HTTP %d, %d bytes): %s",
            result.errno_http,
            len(result.response),
            outcome.error,
        )
    return dataclasses.replace(result, response=outcome.value)
