# SPDX-License-Identifier: Apache-2.0
"""Single-request HTTP transport for the DeepL API."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from contextlib import ExitStack

import aiohttp

from deepl_api.transport.errors import TransportErrorCode, classify_exception
from deepl_api.transport.models import (
    Header,
    HttpMethod,
    MultipartBody,
    Request,
    TransportResult,
)

logger = logging.getLogger(__name__)

# Seconds
CONNECT_TIMEOUT = 3
TOTAL_TIMEOUT = 30

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Transport:
    """Executes one request per call against a DeepL base URL.

    Every call opens its own session and closes it before returning, so an
    instance holds no per-call state and may be shared between tasks.

    Request policy is fixed: certificate verification off, environment proxies
    ignored, redirects not followed, 3 s connect and 30 s total timeouts.
    Failures never raise; they are reported in the returned
    :class:`TransportResult`.
    """

    def __init__(self, auth_key: str, base_url: str) -> None:
        """Initialize Transport.

        Args:
            auth_key: DeepL authentication key.
            base_url: API root, joined with each request path.
        """
        self._auth_key = auth_key
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        """Return the API root URL."""
        return self._base_url

    async def execute(
        self,
        method: HttpMethod,
        path: str,
        headers: Iterable[Header] | None = None,
        body: str | MultipartBody | None = None,
    ) -> TransportResult:
        """Send one request and capture its outcome.

        Args:
            method: "GET", "POST" or "DELETE".
            path: Path relative to the base URL.
            headers: Extra headers appended after the authorization header.
            body: Form-encoded string, multipart payload, or None.

        Returns:
            Transport result with the raw body.
        """
        request = Request(
            method=method,
            path=path,
            headers=tuple(headers or ()),
            body=body,
        )
        return await self.send(request)

    async def send(self, request: Request) -> TransportResult:
        """Send a prepared request and capture its outcome.

        Args:
            request: Request descriptor.

        Returns:
            Transport result with the raw body.
        """
        url = self._base_url + request.path
        headers = [("Authorization", f"DeepL-Auth-Key {self._auth_key}")]
        headers.extend(request.headers)

        status = 0
        try:
            with ExitStack() as files:
                try:
                    data = self._prepare_body(request.body, headers, files)
                except OSError as e:
                    logger.warning("Cannot read upload file: %s", e)
                    return TransportResult.failed(TransportErrorCode.READ_ERROR)

                logger.debug("%s %s", request.method, url)
                async with self._create_session() as session:
                    async with session.request(
                        request.method,
                        url,
                        headers=headers,
                        data=data,
                        allow_redirects=False,
                    ) as response:
                        status = response.status
                        body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            code = classify_exception(e)
            logger.warning(
                "%s %s failed (%s): %s",
                request.method,
                url,
                code.name,
                str(e) or type(e).__name__,
            )
            return TransportResult.failed(code, status)

        logger.debug("%s %s -> HTTP %d (%d bytes)", request.method, url, status, len(body))
        return TransportResult.completed(status, body)

    def _create_session(self) -> aiohttp.ClientSession:
        """Create a session carrying the fixed request policy."""
        return aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(ssl=False),
            timeout=aiohttp.ClientTimeout(total=TOTAL_TIMEOUT, connect=CONNECT_TIMEOUT),
            trust_env=False,
        )

    @staticmethod
    def _prepare_body(
        body: str | MultipartBody | None,
        headers: list[Header],
        files: ExitStack,
    ) -> str | aiohttp.FormData | None:
        """Convert a request body into aiohttp request data.

        A string body gets a form Content-Type unless one was given. A
        multipart body opens its file on ``files`` so it is closed with the
        request.

        Raises:
            OSError: If the upload file cannot be opened.
        """
        if body is None:
            return None

        if isinstance(body, str):
            if not any(name.lower() == "content-type" for name, _ in headers):
                headers.append(("Content-Type", FORM_CONTENT_TYPE))
            return body

        form = aiohttp.FormData()
        for name, value in body.fields.items():
            form.add_field(name, value)
        stream = files.enter_context(open(body.file_path, "rb"))
        form.add_field(
            body.file_field,
            stream,
            filename=body.file_path.name,
            content_type="application/octet-stream",
        )
        return form
