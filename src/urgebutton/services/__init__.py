"""Service module exports."""

from . import stats, urges

__all__ = ["stats", "urges"]
