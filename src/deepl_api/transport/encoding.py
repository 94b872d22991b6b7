# SPDX-License-Identifier: Apache-2.0
"""Form encoding of request parameters."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import quote_plus

ParamValue = str | int | Sequence[str] | None


def _quote(value: object) -> str:
    return quote_plus(str(value), safe="")


def encode_params(params: Mapping[str, ParamValue] | None) -> str:
    """Encode parameters as an ``application/x-www-form-urlencoded`` body.

    List values are expanded into one pair per element sharing the same name
    (DeepL reads repeated ``text`` fields as a batch). ``None`` values are
    skipped entirely rather than sent empty.

    Args:
        params: Parameter mapping. Iteration order is kept in the output.

    Returns:
        Encoded body, e.g. ``"text=a&text=b&target_lang=DE"``.
    """
    if not params:
        return ""

    fields: list[str] = []
    for key, value in params.items():
        if value is None:
            continue

        name = _quote(key)
        if isinstance(value, (list, tuple)):
            fields.extend(f"{name}={_quote(element)}" for element in value)
        else:
            fields.append(f"{name}={_quote(value)}")

    return "&".join(fields)
