"""Application settings and validation."""

import os
from pathlib import Path
from typing import List, Optional

BASE = Path(__file__).resolve().parent.parent
DEFAULT_DB_URL = f"sqlite:///{BASE / 'app.db'}"

SCHEMA_POLICIES = ("create", "update", "validate", "none")


class Settings:
    ENV: str
    DATABASE_URL: str
    DATABASE_USERNAME: Optional[str]
    DATABASE_PASSWORD: Optional[str]
    DB_SCHEMA_POLICY: str
    DB_ECHO: bool
    ALLOW_DEV_CORS: bool
    CORS_ORIGINS: List[str]
    LOG_LEVEL: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DB_URL)
        self.DATABASE_USERNAME = os.getenv("DATABASE_USERNAME") or None
        self.DATABASE_PASSWORD = os.getenv("DATABASE_PASSWORD") or None
        self.DB_SCHEMA_POLICY = os.getenv("DB_SCHEMA_POLICY", "update").lower()
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self._validate()

    def _validate(self):
        if self.DB_SCHEMA_POLICY not in SCHEMA_POLICIES:
            raise RuntimeError(
                f"DB_SCHEMA_POLICY must be one of {', '.join(SCHEMA_POLICIES)}; got {self.DB_SCHEMA_POLICY!r}"
            )
        if not self.DATABASE_URL:
            raise RuntimeError("DATABASE_URL must not be empty")

    @property
    def uses_default_database(self) -> bool:
        return self.DATABASE_URL == DEFAULT_DB_URL


settings = Settings()
