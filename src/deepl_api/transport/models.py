# SPDX-License-Identifier: Apache-2.0
"""Request and result records of the transport layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Literal

from deepl_api.transport.errors import TransportErrorCode, transport_strerror
from deepl_api.transport.status import http_reason

HttpMethod = Literal["GET", "POST", "DELETE"]
Header = tuple[str, str]


@dataclass(frozen=True)
class MultipartBody:
    """Multipart form payload with scalar fields and one uploaded file.

    Attributes:
        fields: Scalar form fields, sent in insertion order before the file.
        file_path: Local file to upload.
        file_field: Form field name of the file part.
    """

    fields: dict[str, str]
    file_path: Path
    file_field: str = "file"


@dataclass(frozen=True)
class Request:
    """A single outbound request.

    Attributes:
        method: HTTP method.
        path: Path relative to the API base URL (e.g. ``"glossaries/abc"``).
        headers: Extra headers, appended after the authorization header.
        body: Form-encoded string, multipart payload, or None.
    """

    method: HttpMethod
    path: str
    headers: tuple[Header, ...] = ()
    body: str | MultipartBody | None = None


@dataclass(frozen=True)
class TransportResult:
    """Outcome of exactly one HTTP attempt.

    Transport fields (``errno_curl``/``errmsg_curl``) and HTTP fields
    (``errno_http``/``errmsg_http``) are independent: a completed exchange can
    carry a 4xx/5xx status, a failed one carries status 0 and an empty body.

    Attributes:
        errno_curl: Transport error code (0 on success).
        errmsg_curl: Message for ``errno_curl``.
        errno_http: HTTP status code (0 when no response was received).
        errmsg_http: Reason phrase for ``errno_http``.
        response: Raw body bytes, or the decoded JSON value after
            :func:`deepl_api.transport.decoding.decode`.
    """

    errno_curl: int
    errmsg_curl: str
    errno_http: int
    errmsg_http: str
    response: Any = field(default=b"")

    @classmethod
    def completed(cls, status: int, body: bytes) -> TransportResult:
        """Build the result of an exchange that received a full response."""
        return cls(
            errno_curl=TransportErrorCode.OK,
            errmsg_curl=transport_strerror(TransportErrorCode.OK),
            errno_http=status,
            errmsg_http=http_reason(status),
            response=body,
        )

    @classmethod
    def failed(cls, code: TransportErrorCode, status: int = 0) -> TransportResult:
        """Build the result of an exchange interrupted at transport level."""
        return cls(
            errno_curl=code,
            errmsg_curl=transport_strerror(code),
            errno_http=status,
            errmsg_http=http_reason(status),
            response=b"",
        )

    @property
    def text(self) -> str:
        """Raw body decoded as UTF-8 (invalid bytes replaced)."""
        if isinstance(self.response, bytes):
            return self.response.decode("utf-8", errors="replace")
        return str(self.response)

    def to_dict(self) -> dict[str, Any]:
        """Return the five-key result mapping."""
        result = asdict(self)
        result["errno_curl"] = int(self.errno_curl)
        return result
