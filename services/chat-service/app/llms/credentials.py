# app/llms/credentials.py
from __future__ import annotations

import os
from typing import Mapping, Optional

from app.config import Settings, settings as default_settings


class EnvironmentCredentials:
    """
    Looks credentials up at call time: process environment first, then whatever
    the settings layer loaded (e.g. from .env). Nothing is cached, so a key exported
    after startup is picked up on the next request.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings

    def get(self, name: str) -> Optional[str]:
        value = os.environ.get(name)
        if value:
            return value
        return getattr(self._settings, name, None)


class StaticCredentials:
    """Lookup over a caller-owned mapping; later changes to the mapping are visible."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values = values if values is not None else {}

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)
