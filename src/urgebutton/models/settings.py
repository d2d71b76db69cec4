"""Key/value rows backing local app storage."""

from __future__ import annotations

from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class AppSetting(SQLModel, table=True):
    """One named storage slot; the urge collection lives in a single row."""

    __tablename__: ClassVar[str] = "app_setting"

    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(nullable=False)
    description: Optional[str] = Field(default=None, max_length=255)
