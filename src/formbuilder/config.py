from __future__ import annotations

import os
from pathlib import Path

FIELD_TYPES = ("text", "select", "checkbox", "rating")
FORM_STATUSES = ("active", "archived")
DEFAULT_FORM_STATUS = "active"
DEFAULT_SUBMISSION_STATUS = "pending"

DEFAULT_PORT = 3001


class Settings:
    def __init__(
        self,
        *,
        sqlite_path: Path | str | None = None,
        env: str | None = None,
        host: str | None = None,
        port: int | None = None,
    ) -> None:
        self.sqlite_path = Path(sqlite_path or os.getenv("SQLITE_PATH", "./data/dev.sqlite"))
        self.env = (env or os.getenv("APP_ENV", "development")).lower()
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.host = host or os.getenv("HOST", "0.0.0.0")
        if port is not None:
            self.port = port
        else:
            port_value = os.getenv("PORT", str(DEFAULT_PORT))
            try:
                self.port = int(port_value)
            except ValueError:
                self.port = DEFAULT_PORT
        origins = os.getenv("CORS_ORIGINS", "*")
        self.cors_origins = [item.strip() for item in origins.split(",") if item.strip()] or ["*"]

    @property
    def is_production(self) -> bool:
        return self.env == "production"


def ensure_dirs(settings: Settings) -> None:
    settings.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
