from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from aiohttp import ClientSession

from .exceptions import TankerkoenigTransportError
from .urls import redact_url

_LOGGER = logging.getLogger(__name__)


class TankerkoenigApi:
    """GET + JSON decode over a shared aiohttp session.

    Instances are awaitable callables, ``await api(url)``, which is the fetch
    contract the provider expects.
    """

    def __init__(
        self,
        session: ClientSession,
        on_api_call: Optional[Callable[[int], Awaitable[None]]] = None,
    ) -> None:
        self._session = session
        self._on_api_call = on_api_call

    async def _count_call(self) -> None:
        if self._on_api_call:
            await self._on_api_call(1)

    async def get_json(self, url: str) -> Dict[str, Any]:
        _LOGGER.debug("GET %s", redact_url(url))
        await self._count_call()
        async with self._session.get(url, headers={"Accept": "application/json"}) as resp:
            text = await resp.text()
            if resp.status >= 400:
                raise TankerkoenigTransportError(f"{resp.status} {text}")
        try:
            payload = json.loads(text)
        except ValueError as err:
            raise TankerkoenigTransportError(f"Invalid JSON body: {text[:200]!r}") from err
        if not isinstance(payload, dict):
            raise TankerkoenigTransportError(f"Unexpected response type: {type(payload).__name__}")
        return payload

    async def __call__(self, url: str) -> Dict[str, Any]:
        return await self.get_json(url)
