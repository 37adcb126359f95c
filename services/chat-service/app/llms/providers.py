# app/llms/providers.py
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List

from .base import CREDENTIAL, PathKey, ProviderDescriptor

JSON_CONTENT = {"Content-Type": "application/json"}
BEARER = {"Authorization": f"Bearer {CREDENTIAL}"}

OPENAI_CHAT_PATH: tuple[PathKey, ...] = ("choices", 0, "message", "content")

ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_MAX_TOKENS = 1024
HF_MAX_NEW_TOKENS = 200


def _user_messages(message: str) -> List[Dict[str, str]]:
    return [{"role": "user", "content": message}]


# --- payload families ---

def openai_chat(
    id: str, label: str, endpoint: str, model: str, credential_name: str
) -> ProviderDescriptor:
    """OpenAI-compatible /chat/completions (OpenAI, Mistral, Minimax, xAI, Together)."""

    def body(message: str) -> Dict[str, Any]:
        return {"model": model, "messages": _user_messages(message)}

    return ProviderDescriptor(
        id=id,
        label=label,
        kind="openai_chat",
        model=model,
        endpoint=endpoint,
        headers=MappingProxyType({**JSON_CONTENT, **BEARER}),
        body=body,
        response_path=OPENAI_CHAT_PATH,
        credential_name=credential_name,
    )


def anthropic_messages(
    id: str, label: str, endpoint: str, model: str, credential_name: str
) -> ProviderDescriptor:
    def body(message: str) -> Dict[str, Any]:
        return {
            "model": model,
            "max_tokens": ANTHROPIC_MAX_TOKENS,
            "messages": _user_messages(message),
        }

    return ProviderDescriptor(
        id=id,
        label=label,
        kind="anthropic_messages",
        model=model,
        endpoint=endpoint,
        headers=MappingProxyType({
            **JSON_CONTENT,
            "x-api-key": CREDENTIAL,
            "anthropic-version": ANTHROPIC_VERSION,
        }),
        body=body,
        response_path=("content", 0, "text"),
        credential_name=credential_name,
    )


def gemini_generate_content(
    id: str, label: str, model: str, credential_name: str
) -> ProviderDescriptor:
    # Gemini takes the key as a query parameter, not a header
    endpoint = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        f"{model}:generateContent?key={CREDENTIAL}"
    )

    def body(message: str) -> Dict[str, Any]:
        return {"contents": [{"parts": [{"text": message}]}]}

    return ProviderDescriptor(
        id=id,
        label=label,
        kind="gemini_generate_content",
        model=model,
        endpoint=endpoint,
        headers=MappingProxyType(dict(JSON_CONTENT)),
        body=body,
        response_path=("candidates", 0, "content", "parts", 0, "text"),
        credential_name=credential_name,
    )


def hf_text_generation(
    id: str, label: str, model: str, credential_name: str,
    max_new_tokens: int = HF_MAX_NEW_TOKENS,
) -> ProviderDescriptor:
    """Hugging Face inference API: single prompt + parameters, reply is a list of generations."""

    def body(message: str) -> Dict[str, Any]:
        return {"inputs": message, "parameters": {"max_new_tokens": max_new_tokens}}

    return ProviderDescriptor(
        id=id,
        label=label,
        kind="hf_text_generation",
        model=model,
        endpoint=f"https://api-inference.huggingface.co/models/{model}",
        headers=MappingProxyType(dict(BEARER)),
        body=body,
        response_path=(0, "generated_text"),
        credential_name=credential_name,
    )


DEFAULT_PROVIDERS: tuple[ProviderDescriptor, ...] = (
    openai_chat(
        "openai", "OpenAI GPT-3.5",
        "https://api.openai.com/v1/chat/completions",
        "gpt-3.5-turbo", "OPENAI_API_KEY",
    ),
    openai_chat(
        "mistral", "Mistral Large",
        "https://api.mistral.ai/v1/chat/completions",
        "mistral-large-latest", "MISTRAL_API_KEY",
    ),
    openai_chat(
        "minimax", "Minimax ABAB5.5",
        "https://api.minimax.chat/v1/chat/completions",
        "abab5.5-chat", "MINIMAX_API_KEY",
    ),
    anthropic_messages(
        "claude", "Anthropic Claude",
        "https://api.anthropic.com/v1/messages",
        "claude-3-5-sonnet-20241022", "ANTHROPIC_API_KEY",
    ),
    gemini_generate_content(
        "gemini", "Google Gemini", "gemini-1.5-flash", "GOOGLE_API_KEY",
    ),
    openai_chat(
        "grok", "xAI Grok",
        "https://api.x.ai/v1/chat/completions",
        "grok-beta", "XAI_API_KEY",
    ),
    openai_chat(
        "llama", "Meta Llama 3.1",
        "https://api.together.xyz/v1/chat/completions",
        "meta-llama/Meta-Llama-3.1-8B-Instruct-Turbo", "TOGETHER_API_KEY",
    ),
    hf_text_generation(
        "phi", "Microsoft Phi-3", "microsoft/Phi-3-mini-4k-instruct", "HF_TOKEN",
    ),
)
