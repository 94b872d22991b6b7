# SPDX-License-Identifier: Apache-2.0
"""Transport-level error codes.

Codes follow libcurl numbering so results stay comparable with other DeepL
clients that report ``errno_curl``. aiohttp exceptions are mapped onto them by
:func:`classify_exception`.
"""

from __future__ import annotations

import asyncio
from enum import IntEnum

import aiohttp


class TransportErrorCode(IntEnum):
    """Numeric transport outcome of a single request."""

    OK = 0
    URL_MALFORMAT = 3
    COULDNT_RESOLVE_HOST = 6
    COULDNT_CONNECT = 7
    READ_ERROR = 26
    OPERATION_TIMEDOUT = 28
    SSL_CONNECT_ERROR = 35
    GOT_NOTHING = 52
    SEND_ERROR = 55
    RECV_ERROR = 56


TRANSPORT_ERROR_MESSAGES: dict[TransportErrorCode, str] = {
    TransportErrorCode.OK: "No error",
    TransportErrorCode.URL_MALFORMAT: "URL using bad/illegal format or missing URL",
    TransportErrorCode.COULDNT_RESOLVE_HOST: "Couldn't resolve host name",
    TransportErrorCode.COULDNT_CONNECT: "Couldn't connect to server",
    TransportErrorCode.READ_ERROR: "Failed to open/read local data from file/application",
    TransportErrorCode.OPERATION_TIMEDOUT: "Timeout was reached",
    TransportErrorCode.SSL_CONNECT_ERROR: "SSL connect error",
    TransportErrorCode.GOT_NOTHING: "Server returned nothing (no headers, no data)",
    TransportErrorCode.SEND_ERROR: "Failed sending data to the peer",
    TransportErrorCode.RECV_ERROR: "Failure when receiving data from the peer",
}

# First match wins: subclasses must come before their bases.
_EXCEPTION_CODES: tuple[tuple[type[BaseException], TransportErrorCode], ...] = (
    (asyncio.TimeoutError, TransportErrorCode.OPERATION_TIMEDOUT),
    (aiohttp.ClientConnectorDNSError, TransportErrorCode.COULDNT_RESOLVE_HOST),
    (aiohttp.ClientSSLError, TransportErrorCode.SSL_CONNECT_ERROR),
    (aiohttp.ClientConnectorError, TransportErrorCode.COULDNT_CONNECT),
    (aiohttp.ServerDisconnectedError, TransportErrorCode.GOT_NOTHING),
    (aiohttp.InvalidURL, TransportErrorCode.URL_MALFORMAT),
    (aiohttp.ClientPayloadError, TransportErrorCode.RECV_ERROR),
    (aiohttp.ClientOSError, TransportErrorCode.SEND_ERROR),
    # aiohttp rejects control characters in header values before sending
    (ValueError, TransportErrorCode.SEND_ERROR),
)


def classify_exception(exc: BaseException) -> TransportErrorCode:
    """Map a request exception to its transport error code.

    Args:
        exc: Exception raised while sending the request or reading the body.

    Returns:
        Matching code, ``RECV_ERROR`` when nothing more specific applies.
    """
    for exc_type, code in _EXCEPTION_CODES:
        if isinstance(exc, exc_type):
            return code
    return TransportErrorCode.RECV_ERROR


def transport_strerror(code: int) -> str:
    """Return the message for a transport error code (``""`` if unknown)."""
    try:
        return TRANSPORT_ERROR_MESSAGES[TransportErrorCode(code)]
    except ValueError:
        return ""
