# app/routers/chat_routes.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import ORJSONResponse

from ..deps import get_chat_service, get_registry
from ..llms.registry import ProviderRegistry
from ..models.schemas import ChatRequest, ChatResponse, ErrorResponse, ProviderInfo
from ..services.chat_service import ChatService

log = logging.getLogger(__name__)

FAILED = "Failed to get response"

router = APIRouter(
    prefix="/api/chat",
    tags=["chat"],
    default_response_class=ORJSONResponse,
)


@router.post(
    "",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ChatRequest.model_json_schema()}},
        }
    },
)
async def chat(request: Request, service: ChatService = Depends(get_chat_service)):
    """
    Forward one message to the selected provider.

    Unknown model, missing key, upstream failure and unexpected reply shape all
    answer 200 with diagnostic text. Only unexpected errors (bad request JSON,
    unparseable upstream body, ...) answer 500.
    """
    # Body is parsed here rather than by FastAPI so malformed input lands in the same boundary
    try:
        req = ChatRequest.model_validate_json(await request.body())
        text = await service.reply(req.message, req.model)
    except Exception:
        log.exception("chat.failed")
        return ORJSONResponse(
            {"error": FAILED},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return ChatResponse(response=text)


@router.get("/models", response_model=List[ProviderInfo])
async def list_models(registry: ProviderRegistry = Depends(get_registry)):
    return [
        ProviderInfo(
            id=p.id,
            label=p.label,
            model=p.model,
            configured=registry.has_credential(p),
        )
        for p in registry.providers()
    ]
