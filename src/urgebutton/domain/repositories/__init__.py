"""Repository protocol definitions for domain layer."""

from .urge import UrgeRepository

__all__ = ["UrgeRepository"]
