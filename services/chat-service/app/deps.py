# app/deps.py
from fastapi import Depends, Request

from app.clients.provider_client import ProviderClient
from app.llms.registry import ProviderRegistry
from app.services.chat_service import ChatService


def get_registry(request: Request) -> ProviderRegistry:
    return request.app.state.registry


def get_provider_client(request: Request) -> ProviderClient:
    return request.app.state.provider_client


def get_chat_service(
    registry: ProviderRegistry = Depends(get_registry),
    client: ProviderClient = Depends(get_provider_client),
) -> ChatService:
    return ChatService(registry, client)
