# SPDX-License-Identifier: Apache-2.0
"""Transport layer: request execution, encoding, status and decoding helpers."""

from deepl_api.transport.decoding import DecodeOutcome, decode, decode_body
from deepl_api.transport.encoding import encode_params
from deepl_api.transport.endpoint import FREE_API_URL, PRO_API_URL, resolve_base_url
from deepl_api.transport.errors import (
    TransportErrorCode,
    classify_exception,
    transport_strerror,
)
from deepl_api.transport.http import Transport
from deepl_api.transport.models import MultipartBody, Request, TransportResult
from deepl_api.transport.status import HTTP_STATUS_REASONS, http_reason

__all__ = [
    "FREE_API_URL",
    "HTTP_STATUS_REASONS",
    "PRO_API_URL",
    "DecodeOutcome",
    "MultipartBody",
    "Request",
    "Transport",
    "TransportErrorCode",
    "TransportResult",
    "classify_exception",
    "decode",
    "decode_body",
    "encode_params",
    "http_reason",
    "resolve_base_url",
    "transport_strerror",
]
