# app/llms/registry.py
from __future__ import annotations

from typing import Any, Iterable, List, Optional
from urllib.parse import quote

from .base import CREDENTIAL, CredentialSource, OutboundRequest, ProviderDescriptor
from .credentials import EnvironmentCredentials
from .providers import DEFAULT_PROVIDERS

NO_RESPONSE = "No response"


class DuplicateProviderError(ValueError):
    pass


class ProviderRegistry:
    """
    Dispatch table from provider id to its descriptor, plus the request/response
    adaptation around it. Descriptors are fixed at construction; credentials are
    read through the injected source on every call.
    """

    def __init__(
        self,
        providers: Iterable[ProviderDescriptor] = DEFAULT_PROVIDERS,
        credentials: Optional[CredentialSource] = None,
    ):
        self._providers: dict[str, ProviderDescriptor] = {}
        for p in providers:
            if p.id in self._providers:
                raise DuplicateProviderError(f"Provider {p.id!r} registered twice")
            self._providers[p.id] = p
        self._credentials = credentials or EnvironmentCredentials()

    def providers(self) -> List[ProviderDescriptor]:
        return list(self._providers.values())

    def resolve(self, provider_id: Any) -> Optional[ProviderDescriptor]:
        # ids come straight from request JSON; numbers, objects, null are simply unknown
        if not isinstance(provider_id, str) or not provider_id:
            return None
        return self._providers.get(provider_id)

    def has_credential(self, descriptor: ProviderDescriptor) -> bool:
        return bool(self._credentials.get(descriptor.credential_name))

    def build_request(self, descriptor: ProviderDescriptor, message: str) -> OutboundRequest:
        secret = self._credentials.get(descriptor.credential_name) or ""
        return OutboundRequest(
            url=descriptor.endpoint.replace(CREDENTIAL, quote(secret, safe="")),
            headers={k: v.replace(CREDENTIAL, secret) for k, v in descriptor.headers.items()},
            body=descriptor.body(message),
        )

    def extract_reply(self, descriptor: ProviderDescriptor, data: Any) -> str:
        """
        Walk descriptor.response_path through the decoded JSON. str steps index
        mappings, int steps index lists; the first miss returns NO_RESPONSE.
        """
        node = data
        for key in descriptor.response_path:
            if isinstance(key, int):
                if not isinstance(node, list) or not -len(node) <= key < len(node):
                    return NO_RESPONSE
            elif not isinstance(node, dict) or key not in node:
                return NO_RESPONSE
            node = node[key]
        if isinstance(node, str) and node:
            return node
        return NO_RESPONSE
