"""Concrete repository implementations using SQLModel."""

from .settings import SQLModelSettingsRepository
from .urge import SQLModelUrgeRepository

__all__ = [
    "SQLModelSettingsRepository",
    "SQLModelUrgeRepository",
]
