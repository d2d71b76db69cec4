"""UrgeButton habit-resistance tracker package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .context import AppContext, create_app_context
from .store import UrgeStore

__all__ = ["AppContext", "BaseConfig", "DevConfig", "UrgeStore", "create_app_context"]
