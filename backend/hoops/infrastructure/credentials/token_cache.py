"""Credential provider backed by a cached OAuth token file.

Obtaining the token (the authorization-code exchange) happens elsewhere;
this adapter only reads the cache it leaves behind. Both the snake_case
(``access_token``) and the older CamelCase (``AccessToken``) cache layouts
are understood.
"""

import json
import logging
from pathlib import Path

import httpx

from hoops.application.interfaces import CredentialProvider
from hoops.domain.exceptions import CredentialsUnavailableError

logger = logging.getLogger(__name__)

_TOKEN_KEYS = ("access_token", "AccessToken")


class TokenCacheCredentialProvider(CredentialProvider):
    """Builds bearer-authorized httpx clients from a token cache file."""

    def __init__(self, token_cache_file: str | Path, timeout: float = 30.0):
        self._token_cache_file = Path(token_cache_file)
        self._timeout = timeout

    def _read_token(self) -> str:
        try:
            cached = json.loads(self._token_cache_file.read_text("utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read OAuth token cache %s: %s", self._token_cache_file, exc)
            raise CredentialsUnavailableError(
                "Unable to get OAuth token. Run the oauthtoken command first"
            ) from exc

        if isinstance(cached, dict):
            for key in _TOKEN_KEYS:
                token = cached.get(key)
                if isinstance(token, str) and token:
                    return token
        raise CredentialsUnavailableError(
            f"OAuth token cache {self._token_cache_file} holds no access token"
        )

    async def get_client(self) -> httpx.AsyncClient:
        token = self._read_token()
        return httpx.AsyncClient(
            headers={"Authorization": f"Bearer {token}"},
            timeout=self._timeout,
        )
