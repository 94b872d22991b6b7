# SPDX-License-Identifier: Apache-2.0
"""Exceptions for the DeepL client.

Transport and HTTP failures are never raised; they are reported in the
returned result. These exceptions cover client misconfiguration only.
"""


class DeepLError(Exception):
    """Base exception for the deepl_api package."""

    pass


class ConfigurationError(DeepLError):
    """Configuration error (missing authentication key, etc.)."""

    pass
