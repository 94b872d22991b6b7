# SPDX-License-Identifier: Apache-2.0
"""DeepL v2 API client.

Each method issues exactly one request through :class:`Transport` and returns
a :class:`TransportResult`. JSON endpoints return the decoded body in
``response`` (``{}`` if the body was not JSON); glossary entry export,
glossary deletion and document download return the raw body bytes.

Nothing is retried and nothing raises on failure: check ``errno_curl`` and
``errno_http`` before trusting ``response``.
"""

from __future__ import annotations

import os
from pathlib import Path

from deepl_api.client.base import ConfigurationError
from deepl_api.transport.decoding import decode
from deepl_api.transport.encoding import ParamValue, encode_params
from deepl_api.transport.endpoint import resolve_base_url
from deepl_api.transport.http import Transport
from deepl_api.transport.models import MultipartBody, TransportResult

TSV_CONTENT_TYPE = "text/tab-separated-values"


def _add_optional(params: dict[str, ParamValue], name: str, value: str) -> None:
    """Add a trimmed optional parameter, omitting it when empty."""
    value = value.strip()
    if value:
        params[name] = value


class DeepLClient:
    """Client for the DeepL v2 API.

    The base URL is chosen from the key: keys ending in ``:fx`` use the DeepL
    API Free endpoint, all others the Pro endpoint.

    Attributes:
        server_url: API base URL used for every request.
    """

    def __init__(self, auth_key: str, server_url: str | None = None) -> None:
        """Initialize DeepLClient.

        Args:
            auth_key: DeepL authentication key.
            server_url: Override for the API base URL (default: resolved
                from the key).

        Raises:
            ConfigurationError: If the authentication key is empty.
        """
        if not auth_key:
            raise ConfigurationError("DeepL authentication key is required")

        if server_url:
            base_url = server_url.rstrip("/") + "/"
        else:
            base_url = resolve_base_url(auth_key)

        self._transport = Transport(auth_key, base_url)

    @property
    def server_url(self) -> str:
        """Return the API base URL."""
        return self._transport.base_url

    # Other functions

    async def get_usage(self) -> TransportResult:
        """Get character and document usage of the current billing period.

        Implements ``GET /usage``.
        """
        return decode(await self._transport.execute("GET", "usage"))

    async def get_source_languages(self) -> TransportResult:
        """List supported source languages (``POST /languages``, ``type=source``)."""
        body = encode_params({"type": "source"})
        return decode(await self._transport.execute("POST", "languages", body=body))

    async def get_target_languages(self) -> TransportResult:
        """List supported target languages (``POST /languages``, ``type=target``)."""
        body = encode_params({"type": "target"})
        return decode(await self._transport.execute("POST", "languages", body=body))

    # Glossaries

    async def get_glossaries_languages(self) -> TransportResult:
        """List language pairs supported by glossaries.

        Implements ``GET /glossary-language-pairs``.
        """
        return decode(await self._transport.execute("GET", "glossary-language-pairs"))

    async def create_glossary(
        self,
        name: str,
        source_lang: str,
        target_lang: str,
        entries_format: str,
        entries: str,
    ) -> TransportResult:
        """Create a glossary.

        Implements ``POST /glossaries``.

        Args:
            name: Glossary name.
            source_lang: Source language code.
            target_lang: Target language code.
            entries_format: "tsv" or "csv".
            entries: Entries in ``entries_format``.

        Returns:
            Decoded result; ``response`` holds the glossary information,
            including its ``glossary_id``.
        """
        body = encode_params(
            {
                "name": name,
                "source_lang": source_lang,
                "target_lang": target_lang,
                "entries_format": entries_format,
                "entries": entries,
            }
        )
        return decode(await self._transport.execute("POST", "glossaries", body=body))

    async def list_glossaries(self) -> TransportResult:
        """List all glossaries and their meta-information (``GET /glossaries``)."""
        return decode(await self._transport.execute("GET", "glossaries"))

    async def get_glossary_details(self, glossary_id: str) -> TransportResult:
        """Get meta-information of one glossary (``GET /glossaries/{id}``)."""
        return decode(await self._transport.execute("GET", f"glossaries/{glossary_id}"))

    async def get_glossary(self, glossary_id: str) -> TransportResult:
        """Export the entries of one glossary as tab-separated values.

        Implements ``GET /glossaries/{id}/entries``. The body is returned
        raw, without JSON decoding.
        """
        return await self._transport.execute(
            "GET",
            f"glossaries/{glossary_id}/entries",
            headers=[("Accept", TSV_CONTENT_TYPE)],
        )

    async def delete_glossary(self, glossary_id: str) -> TransportResult:
        """Delete a glossary (``DELETE /glossaries/{id}``).

        Success is HTTP 204 with an empty raw body.
        """
        return await self._transport.execute("DELETE", f"glossaries/{glossary_id}")

    # Text translation

    async def translate_text(
        self,
        text: str | list[str],
        source_lang: str = "EN",
        target_lang: str = "",
        split_sentences: str = "1",
        preserve_formatting: str = "0",
        formality: str = "default",
        glossary_id: str = "",
        tag_handling: str = "",
        non_splitting_tags: str = "",
        outline_detection: str = "",
        splitting_tags: str = "",
        ignore_tags: str = "",
    ) -> TransportResult:
        """Translate text.

        Implements ``POST /translate``. ``text`` and ``target_lang`` are always
        sent; every other argument is trimmed and left out of the request when
        empty (an empty ``source_lang`` lets DeepL detect the language).

        Args:
            text: Text to translate, or a list of texts translated in order.
            source_lang: Source language code.
            target_lang: Target language code.
            split_sentences: "0", "1" or "nonewlines".
            preserve_formatting: "0" or "1".
            formality: "default", "more", "less", "prefer_more", "prefer_less".
            glossary_id: Glossary to apply.
            tag_handling: "xml" or "html".
            non_splitting_tags: Comma-separated XML tags.
            outline_detection: "0" to disable automatic outline detection.
            splitting_tags: Comma-separated XML tags.
            ignore_tags: Comma-separated XML tags.

        Returns:
            Decoded result; ``response["translations"]`` on success.
        """
        params: dict[str, ParamValue] = {
            "text": text,
            "target_lang": target_lang.strip(),
        }
        _add_optional(params, "source_lang", source_lang)
        _add_optional(params, "split_sentences", split_sentences)
        _add_optional(params, "preserve_formatting", preserve_formatting)
        _add_optional(params, "formality", formality)
        _add_optional(params, "glossary_id", glossary_id)
        _add_optional(params, "tag_handling", tag_handling)
        _add_optional(params, "non_splitting_tags", non_splitting_tags)
        _add_optional(params, "outline_detection", outline_detection)
        _add_optional(params, "splitting_tags", splitting_tags)
        _add_optional(params, "ignore_tags", ignore_tags)

        return decode(
            await self._transport.execute("POST", "translate", body=encode_params(params))
        )

    # Document translation

    async def upload_document(
        self,
        source_lang: str,
        target_lang: str,
        formality: str,
        glossary_id: str,
        document_filepath: str | os.PathLike[str],
    ) -> TransportResult:
        """Upload a document for translation.

        Implements ``POST /document`` as a multipart upload. Translation starts
        once the upload completes; DeepL accepts up to 10 MB per document.

        Args:
            source_lang: Source language code (omitted when empty).
            target_lang: Target language code.
            formality: Formality setting (omitted when empty).
            glossary_id: Glossary to apply (omitted when empty).
            document_filepath: Local path of the document.

        Returns:
            Decoded result; ``response`` holds ``document_id`` and
            ``document_key``. An unreadable file gives ``errno_curl`` 26.
        """
        fields: dict[str, ParamValue] = {}
        _add_optional(fields, "source_lang", source_lang)
        fields["target_lang"] = target_lang.strip()
        _add_optional(fields, "formality", formality)
        _add_optional(fields, "glossary_id", glossary_id)

        body = MultipartBody(
            fields={name: str(value) for name, value in fields.items()},
            file_path=Path(document_filepath),
        )
        return decode(await self._transport.execute("POST", "document", body=body))

    async def check_document_translation_status(
        self, document_id: str, document_key: str
    ) -> TransportResult:
        """Check the translation status of an uploaded document.

        Implements ``POST /document/{id}``.
        """
        body = encode_params({"document_key": document_key})
        return decode(
            await self._transport.execute("POST", f"document/{document_id}", body=body)
        )

    async def download_document(self, document_id: str, document_key: str) -> TransportResult:
        """Download a translated document once its status is "done".

        Implements ``POST /document/{id}/result``. The body holds the
        document bytes and is returned raw.
        """
        body = encode_params({"document_key": document_key})
        return await self._transport.execute("POST", f"document/{document_id}/result", body=body)
