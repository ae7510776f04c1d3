import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.config import settings
from app.core.errors import NetworkTransportError, ResponseDecodeError
from app.schemas import JokeRecord

logger = logging.getLogger(__name__)


class JokeFetcher:
    """Fetches one joke per call from a fixed JSON endpoint."""

    def __init__(
        self,
        url: str = settings.joke_api_url,
        user_agent: str = settings.user_agent,
        client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.headers = {"Accept": "application/json", "User-Agent": user_agent}
        self._client = client
        self._owns_client = client is None
        self._transport = transport

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(transport=self._transport)
        return self._client

    async def fetch_joke(self) -> JokeRecord:
        try:
            response = await self.client.get(self.url, headers=self.headers)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NetworkTransportError("fetch_joke", f"{type(exc).__name__}: {exc}") from exc

        try:
            joke = JokeRecord.from_payload(response.json())
        except (ValueError, ValidationError) as exc:
            raise ResponseDecodeError("fetch_joke", str(exc)) from exc

        logger.debug("Fetched joke %s from %s", joke.id, self.url)
        return joke

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
