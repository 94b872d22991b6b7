# SPDX-License-Identifier: Apache-2.0
"""Base URL selection from the shape of the authentication key."""

FREE_API_URL = "https://api-free.deepl.com/v2/"
PRO_API_URL = "https://api.deepl.com/v2/"

# Keys issued for DeepL API Free accounts carry this suffix
FREE_KEY_SUFFIX = ":fx"


def resolve_base_url(auth_key: str) -> str:
    """Return the API base URL matching the account tier of ``auth_key``."""
    if auth_key.endswith(FREE_KEY_SUFFIX):
        return FREE_API_URL
    return PRO_API_URL
