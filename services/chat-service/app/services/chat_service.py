# app/services/chat_service.py
from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from app.clients.provider_client import ProviderClient
from app.llms.registry import ProviderRegistry

log = logging.getLogger("app.services.chat")

UNSUPPORTED_MODEL = "Unsupported model."


def credential_missing(provider_id: str) -> str:
    return f"{provider_id} API key not configured."


def upstream_error(provider_id: str) -> str:
    return f"Error from {provider_id} API."


class ChatService:
    """
    One stateless request/reply cycle against a single provider.

    Handled failures (unknown provider, missing key, upstream non-2xx or transport
    error, reply not found in the payload) come back as diagnostic text so callers
    always have something to render. Anything else propagates.
    """

    def __init__(self, registry: ProviderRegistry, client: ProviderClient):
        self.registry = registry
        self.client = client

    async def reply(self, message: str, provider_id: Any) -> str:
        descriptor = self.registry.resolve(provider_id)
        if descriptor is None:
            log.info("chat.reply.unsupported", extra={"provider": provider_id})
            return UNSUPPORTED_MODEL

        # Pre-flight gate: never call out without a key
        if not self.registry.has_credential(descriptor):
            log.warning("chat.reply.no_credential", extra={"provider": descriptor.id})
            return credential_missing(descriptor.id)

        outbound = self.registry.build_request(descriptor, message)

        t0 = time.time()
        log.info(
            "chat.reply.start",
            extra={"provider": descriptor.id, "model": descriptor.model, "message_chars": len(message)},
        )
        try:
            resp = await self.client.send(outbound)
        except httpx.HTTPError as e:
            log.warning(
                "chat.upstream.error",
                extra={"provider": descriptor.id, "error": type(e).__name__},
            )
            return upstream_error(descriptor.id)

        if not resp.is_success:
            log.warning(
                "chat.upstream.error",
                extra={"provider": descriptor.id, "status_code": resp.status_code, "body": resp.text[:500]},
            )
            return upstream_error(descriptor.id)

        # A 2xx with a non-JSON body is not a handled case; let it reach the route boundary
        text = self.registry.extract_reply(descriptor, resp.json())
        log.info(
            "chat.reply.done",
            extra={
                "provider": descriptor.id,
                "duration_ms": int((time.time() - t0) * 1000),
                "reply_chars": len(text),
            },
        )
        return text
