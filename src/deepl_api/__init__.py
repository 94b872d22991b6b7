# SPDX-License-Identifier: Apache-2.0
"""DeepL v2 API client.

Usage:
    from deepl_api import DeepLClient
    client = DeepLClient("your-auth-key:fx")
    result = await client.translate_text("Hello", target_lang="DE")
    if result.errno_curl == 0 and result.errno_http == 200:
        print(result.response["translations"][0]["text"])
"""

from deepl_api.client import ConfigurationError, DeepLClient, DeepLError
from deepl_api.transport import TransportResult

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DeepLClient",
    "DeepLError",
    "TransportResult",
]
