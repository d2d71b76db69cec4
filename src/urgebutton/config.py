"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "UrgeButton"
    DB_FILENAME = "urgebutton.db"
    STORAGE_KEY = "savedUrges"
    DATA_DIR_ENV = "URGEBUTTON_DATA_DIR"
    DEBUG = False
    TESTING = False

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("URGEBUTTON_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("URGEBUTTON_DATABASE_URL", self._build_sqlite_url())

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv(self.DATA_DIR_ENV, "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Read-only install locations fall back to user-local storage.
            local_app_data = os.getenv("LOCALAPPDATA") or (Path.home() / ".local" / "share")
            fallback_path = Path(local_app_data).expanduser() / self.APP_NAME
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        db_path = Path(self.DATA_DIR) / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        connect_args: dict[str, Any] = {"check_same_thread": False}
        return {"connect_args": connect_args}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True


class TestConfig(BaseConfig):
    """Configuration for test runs rooted at an explicit data directory."""

    __test__ = False  # keep pytest from collecting this class
    TESTING = True

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self._data_dir_override = Path(data_dir) if data_dir is not None else None
        super().__init__()
        self.DEV_MODE = True
        if self._data_dir_override is not None:
            self.DATABASE_URL = self._build_sqlite_url()

    def _resolve_data_dir(self) -> Path:
        if self._data_dir_override is None:
            return super()._resolve_data_dir()
        self._data_dir_override.mkdir(parents=True, exist_ok=True)
        return self._data_dir_override.resolve()
