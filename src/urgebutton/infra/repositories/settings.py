"""Settings repository for app-level key/value pairs."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.settings import AppSetting


class SQLModelSettingsRepository:
    """SQLModel-based key/value repository."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[AppSetting]:
        with self.session_factory() as session:
            obj = session.exec(select(AppSetting).where(AppSetting.key == key)).first()
            if obj:
                session.expunge(obj)
            return obj

    def get_value(self, key: str) -> Optional[str]:
        setting = self.get(key)
        return setting.value if setting else None

    def set(self, key: str, value: str, description: str | None = None) -> AppSetting:
        with self.session_factory() as session:
            setting = session.exec(select(AppSetting).where(AppSetting.key == key)).first()
            if setting:
                setting.value = value
                setting.description = description
            else:
                setting = AppSetting(key=key, value=value, description=description)
            session.add(setting)
            session.commit()
            session.refresh(setting)
            session.expunge(setting)
            return setting

    def delete(self, key: str) -> None:
        with self.session_factory() as session:
            setting = session.exec(select(AppSetting).where(AppSetting.key == key)).first()
            if setting:
                session.delete(setting)
                session.commit()

    def list_keys(self, prefix: str = "") -> list[str]:
        """Return stored keys starting with ``prefix`` in sorted order."""
        with self.session_factory() as session:
            statement = select(AppSetting.key).order_by(AppSetting.key)
            if prefix:
                statement = statement.where(AppSetting.key.startswith(prefix))  # type: ignore[union-attr]
            return list(session.exec(statement).all())


__all__ = ["SQLModelSettingsRepository"]
