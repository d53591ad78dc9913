from __future__ import annotations

import logging

from formbuilder.config import Settings, ensure_dirs
from formbuilder.protocols import Storage
from formbuilder.repo_sqlite import SQLiteStorage

logger = logging.getLogger(__name__)


def init_storage(settings: Settings) -> Storage:
    ensure_dirs(settings)
    storage = SQLiteStorage(settings.sqlite_path)
    logger.info("Storage ready at %s", settings.sqlite_path)
    return storage
