import httpx
from typing import Optional
from app.config import settings
from app.llms.base import OutboundRequest
import logging

log = logging.getLogger(__name__)


class ProviderClient:
    """One POST per chat request; no retries."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.REQUEST_TIMEOUT_S,
            transport=transport,
        )

    async def send(self, req: OutboundRequest) -> httpx.Response:
        # req.url may carry a credential in its query string; log the path only
        log.debug("Provider call: POST %s", httpx.URL(req.url).copy_with(query=None))
        return await self._client.post(req.url, headers=req.headers, json=req.body)

    async def aclose(self) -> None:
        await self._client.aclose()
