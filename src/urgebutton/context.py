"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from sqlmodel import Session

from .config import BaseConfig
from .infra.database import bootstrap_database
from .infra.repositories import SQLModelSettingsRepository, SQLModelUrgeRepository
from .logging_config import setup_logging
from .models.urge import Urge
from .selection import UrgeSelection
from .store import UrgeStore


@dataclass
class AppContext:
    """Centralized application context with services and state."""

    # Configuration
    config: BaseConfig

    # Session factory
    session_factory: Callable[[], Session]

    # Repositories
    settings_repo: SQLModelSettingsRepository
    urge_repo: SQLModelUrgeRepository

    # State
    store: UrgeStore
    selection: UrgeSelection = field(default_factory=UrgeSelection)
    dev_mode: bool = False

    def main_urge(self) -> Optional[Urge]:
        """Return the urge currently in focus."""

        return self.selection.resolve(self.store.urges)


def create_app_context(
    config: Optional[BaseConfig] = None, *, configure_logging: bool = True
) -> AppContext:
    """Create and initialize the application context."""

    if config is None:
        config = BaseConfig()

    if configure_logging:
        setup_logging(config)

    _engine, session_factory = bootstrap_database(config)

    settings_repo = SQLModelSettingsRepository(session_factory)
    urge_repo = SQLModelUrgeRepository(session_factory, storage_key=config.STORAGE_KEY)
    store = UrgeStore(urge_repo)

    selection = UrgeSelection()
    # Keep the focus valid when the focused urge is removed
    store.subscribe(lambda s: selection.sync(s.urges))

    return AppContext(
        config=config,
        dev_mode=config.DEV_MODE,
        session_factory=session_factory,
        settings_repo=settings_repo,
        urge_repo=urge_repo,
        store=store,
        selection=selection,
    )
