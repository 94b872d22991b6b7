# SPDX-License-Identifier: Apache-2.0
"""DeepL API client.

Usage:
    from deepl_api.client import DeepLClient
    client = DeepLClient(auth_key="your-auth-key")
    usage = await client.get_usage()
"""

from deepl_api.client.base import ConfigurationError, DeepLError
from deepl_api.client.deepl import DeepLClient

__all__ = [
    "ConfigurationError",
    "DeepLClient",
    "DeepLError",
]
