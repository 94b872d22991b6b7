# SPDX-License-Identifier: Apache-2.0
"""Tests for the command line interface."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from deepl_api.cli import (
    AUTH_KEY_ENV,
    SERVER_URL_ENV,
    create_client,
    format_result,
    is_success,
    parse_args,
    run,
)
from deepl_api.client.base import ConfigurationError
from deepl_api.client.deepl import DeepLClient
from deepl_api.transport.errors import TransportErrorCode
from deepl_api.transport.models import TransportResult


def _args(*argv: str):
    with patch.object(sys, "argv", ["deepl-api", *argv]):
        return parse_args()


class TestParseArgs:
    """Tests for parse_args function."""

    def test_usage(self) -> None:
        """Test a command without options."""
        args = _args("usage")
        assert args.command == "usage"
        assert args.auth_key is None
        assert args.verbose is False

    def test_global_options(self) -> None:
        """Global options go before the command."""
        args = _args("--auth-key", "k:fx", "--server-url", "http://localhost/v2", "-v", "usage")
        assert args.auth_key == "k:fx"
        assert args.server_url == "http://localhost/v2"
        assert args.verbose is True

    def test_languages_default_type(self) -> None:
        """Test --type default is source."""
        assert _args("languages").type == "source"
        assert _args("languages", "--type", "target").type == "target"

    def test_translate(self) -> None:
        """Test translate arguments."""
        args = _args("translate", "Hello", "World", "-t", "DE", "--formality", "more")
        assert args.text == ["Hello", "World"]
        assert args.target == "DE"
        assert args.source == ""
        assert args.formality == "more"

    def test_translate_requires_target(self) -> None:
        """Test translate without -t exits."""
        with pytest.raises(SystemExit):
            _args("translate", "Hello")

    def test_glossary_create_requires_entries(self) -> None:
        """Test glossary-create needs --entries or --entries-file."""
        with pytest.raises(SystemExit):
            _args("glossary-create", "terms", "EN", "DE")

    def test_document_download(self) -> None:
        """Test document-download arguments."""
        args = _args("document-download", "d1", "k1", "-o", "out.pdf")
        assert args.document_id == "d1"
        assert args.document_key == "k1"
        assert args.output == Path("out.pdf")

    def test_command_required(self) -> None:
        """Test missing command exits."""
        with pytest.raises(SystemExit):
            _args()


class TestCreateClient:
    """Tests for create_client."""

    def test_flag_wins_over_environment(self) -> None:
        """Command line key should override the environment."""
        with patch.dict(os.environ, {AUTH_KEY_ENV: "env-key"}):
            client = create_client(_args("--auth-key", "flag-key:fx", "usage"))
        assert client.server_url == "https://api-free.deepl.com/v2/"

    def test_environment(self) -> None:
        """Key and server URL should be read from the environment."""
        env = {AUTH_KEY_ENV: "env-key", SERVER_URL_ENV: "http://localhost:8080/v2"}
        with patch.dict(os.environ, env):
            client = create_client(_args("usage"))
        assert client.server_url == "http://localhost:8080/v2/"

    def test_missing_key(self) -> None:
        """No key anywhere should raise ConfigurationError."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ConfigurationError):
                create_client(_args("usage"))


class TestFormatResult:
    """Tests for result rendering."""

    def test_decoded(self) -> None:
        """Decoded responses should be embedded as JSON."""
        result = TransportResult(0, "No error", 200, "OK", {"character_count": 3})
        assert json.loads(format_result(result)) == {
            "errno_curl": 0,
            "errmsg_curl": "No error",
            "errno_http": 200,
            "errmsg_http": "OK",
            "response": {"character_count": 3},
        }

    def test_raw_body_as_text(self) -> None:
        """Raw bodies should be shown as text."""
        result = TransportResult.completed(200, b"Hallo\tHello")
        assert json.loads(format_result(result))["response"] == "Hallo\tHello"

    def test_is_success(self) -> None:
        """Only completed exchanges below 400 count as success."""
        assert is_success(TransportResult.completed(200, b""))
        assert is_success(TransportResult.completed(204, b""))
        assert not is_success(TransportResult.completed(456, b""))
        assert not is_success(TransportResult.failed(TransportErrorCode.COULDNT_CONNECT))


class TestRun:
    """Tests for run."""

    @pytest.mark.asyncio
    async def test_missing_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing key should print an error and fail."""
        with patch.dict(os.environ, {}, clear=True):
            exit_code = await run(_args("usage"))
        assert exit_code == 1
        assert AUTH_KEY_ENV in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A successful call should print the record and exit 0."""
        result = TransportResult(0, "No error", 200, "OK", {"character_count": 3})
        with patch.object(DeepLClient, "get_usage", AsyncMock(return_value=result)):
            exit_code = await run(_args("--auth-key", "k:fx", "usage"))

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["response"] == {"character_count": 3}

    @pytest.mark.asyncio
    async def test_http_error_exit_code(self) -> None:
        """An HTTP error status should exit 1."""
        result = TransportResult(0, "No error", 456, "Quota exceeded", {})
        mock = AsyncMock(return_value=result)
        with patch.object(DeepLClient, "translate_text", mock):
            exit_code = await run(_args("--auth-key", "k:fx", "translate", "Hi", "-t", "DE"))

        assert exit_code == 1
        assert mock.call_args.args == ("Hi",)
        assert mock.call_args.kwargs["target_lang"] == "DE"

    @pytest.mark.asyncio
    async def test_glossary_create_from_file(self, tmp_path: Path) -> None:
        """Entries should be read from --entries-file."""
        entries = tmp_path / "terms.tsv"
        entries.write_text("Hello\tHallo\n", encoding="utf-8")
        mock = AsyncMock(return_value=TransportResult(0, "No error", 201, "Created", {}))
        with patch.object(DeepLClient, "create_glossary", mock):
            exit_code = await run(
                _args(
                    "--auth-key",
                    "k:fx",
                    "glossary-create",
                    "terms",
                    "EN",
                    "DE",
                    "--entries-file",
                    str(entries),
                )
            )

        assert exit_code == 0
        mock.assert_awaited_once_with("terms", "EN", "DE", "tsv", "Hello\tHallo\n")

    @pytest.mark.asyncio
    async def test_document_download_writes_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Downloaded bytes should be written to the output file."""
        output = tmp_path / "out" / "paper.pdf"
        result = TransportResult.completed(200, b"%PDF-1.4")
        with patch.object(DeepLClient, "download_document", AsyncMock(return_value=result)):
            exit_code = await run(
                _args("--auth-key", "k:fx", "document-download", "d1", "k1", "-o", str(output))
            )

        assert exit_code == 0
        assert output.read_bytes() == b"%PDF-1.4"
        assert json.loads(capsys.readouterr().out)["response"] == str(output)

    @pytest.mark.asyncio
    async def test_missing_entries_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A missing --entries-file should print an error without calling the API."""
        mock = AsyncMock()
        missing = tmp_path / "missing.tsv"
        with patch.object(DeepLClient, "create_glossary", mock):
            exit_code = await run(
                _args(
                    "--auth-key",
                    "k:fx",
                    "glossary-create",
                    "terms",
                    "EN",
                    "DE",
                    "--entries-file",
                    str(missing),
                )
            )

        assert exit_code == 1
        assert f"Entries file not found: {missing}" in capsys.readouterr().err
        mock.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_document_download_unwritable_output(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An output path that cannot be written should print an error and fail."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        output = blocker / "paper.pdf"
        result = TransportResult.completed(200, b"%PDF-1.4")
        with patch.object(DeepLClient, "download_document", AsyncMock(return_value=result)):
            exit_code = await run(
                _args("--auth-key", "k:fx", "document-download", "d1", "k1", "-o", str(output))
            )

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "Cannot write output file" in captured.err
        assert captured.out == ""
