"""Abstract credential provider interface."""

from abc import ABC, abstractmethod

import httpx


class CredentialProvider(ABC):
    """Port that yields an HTTP client already authorized for the spreadsheet API.

    The caller owns the returned client and must close it.
    """

    @abstractmethod
    async def get_client(self) -> httpx.AsyncClient:
        ...
