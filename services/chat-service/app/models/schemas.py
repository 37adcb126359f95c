from pydantic import BaseModel, Field
from typing import Any

from app.config import settings

class ChatRequest(BaseModel):
    message: str
    # provider id (openai, mistral, claude, gemini, ...); any non-string value is an unsupported model
    model: Any = Field(default_factory=lambda: settings.DEFAULT_MODEL)

class ChatResponse(BaseModel):
    response: str   # reply text or a diagnostic ("Unsupported model.", "... API key not configured.")

class ErrorResponse(BaseModel):
    error: str

class ProviderInfo(BaseModel):
    id: str
    label: str
    model: str
    configured: bool
