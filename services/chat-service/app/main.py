# app/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.logging import setup_logging
from app.clients.provider_client import ProviderClient
from app.llms.registry import ProviderRegistry
from app.middleware.correlation import CorrelationIdMiddleware
from app.routers.chat_routes import router as chat_router

# Initialize logging early
setup_logging()

logger = logging.getLogger("app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: build the provider registry (credentials are read lazily per request)
    and the shared outbound HTTP client.
    Shutdown: close the client's connection pool.
    """
    app.state.registry = ProviderRegistry()
    app.state.provider_client = ProviderClient()
    logger.info(
        "chat.service.started",
        extra={"providers": [p.id for p in app.state.registry.providers()]},
    )
    try:
        yield
    finally:
        await app.state.provider_client.aclose()
        logger.info("Chat service shutdown complete")


app = FastAPI(title=settings.SERVICE_NAME, version="0.1.0", lifespan=lifespan)

app.add_middleware(CorrelationIdMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["x-request-id", "x-correlation-id"],
)


@app.get("/healthz")
async def health():
    return {"status": "ok", "service": settings.SERVICE_NAME}


app.include_router(chat_router)


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="info",
    )
