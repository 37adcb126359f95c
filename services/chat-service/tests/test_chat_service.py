import asyncio

import httpx

from app.clients.provider_client import ProviderClient
from app.llms.credentials import StaticCredentials
from app.llms.registry import ProviderRegistry
from app.services.chat_service import ChatService, UNSUPPORTED_MODEL


def _service(handler, keys):
    registry = ProviderRegistry(credentials=StaticCredentials(keys))
    client = ProviderClient(transport=httpx.MockTransport(handler))
    return ChatService(registry, client)


def test_reply_uses_credential_present_at_call_time():
    keys: dict[str, str] = {}
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"content": [{"text": "late key"}]})

    service = _service(handler, keys)

    assert asyncio.run(service.reply("hi", "claude")) == "claude API key not configured."
    keys["ANTHROPIC_API_KEY"] = "ant-late"
    assert asyncio.run(service.reply("hi", "claude")) == "late key"
    assert len(seen) == 1
    assert seen[0].headers["x-api-key"] == "ant-late"


def test_unknown_provider_never_builds_request():
    def handler(request):  # pragma: no cover
        raise AssertionError("no upstream call expected")

    service = _service(handler, {"OPENAI_API_KEY": "sk"})
    assert asyncio.run(service.reply("hi", "nope")) == UNSUPPORTED_MODEL


def test_redirect_status_is_upstream_error():
    service = _service(lambda r: httpx.Response(302, headers={"location": "/elsewhere"}), {"XAI_API_KEY": "x"})
    assert asyncio.run(service.reply("hi", "grok")) == "Error from grok API."
