"""Record and table exports."""

from .settings import AppSetting
from .urge import BADGE_MILESTONES, Urge, badge_name

__all__ = [
    "AppSetting",
    "BADGE_MILESTONES",
    "Urge",
    "badge_name",
]
