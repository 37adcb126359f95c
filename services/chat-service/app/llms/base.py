# app/llms/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Tuple, Union

# One step of a response path: a mapping key or a list index
PathKey = Union[str, int]

# Placeholder substituted with the provider credential in endpoint/header templates
CREDENTIAL = "{credential}"


class CredentialSource(Protocol):
    def get(self, name: str) -> Optional[str]: ...


@dataclass(frozen=True)
class ProviderDescriptor:
    """Static description of how to call one provider and where its reply text lives."""

    id: str
    label: str
    kind: str                      # payload family, e.g. "openai_chat"
    model: str                     # upstream model name
    endpoint: str
    headers: Mapping[str, str]
    body: Callable[[str], Dict[str, Any]]
    response_path: Tuple[PathKey, ...]
    credential_name: str


@dataclass(frozen=True)
class OutboundRequest:
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Dict[str, Any] = field(default_factory=dict)
