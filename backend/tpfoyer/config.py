"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
# In-memory stores run on one connection shared by every request thread,
# with no serialization between them, so they are reserved for tests.
IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


class Settings:
    ENV: str
    DATABASE_URL: str
    SQL_ECHO: bool
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'tpfoyer.db'}")
        self.SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self._validate()

    @property
    def in_memory(self) -> bool:
        return self.DATABASE_URL in IN_MEMORY_URLS

    def _validate(self):
        if self.ENV != "test" and self.in_memory:
            raise RuntimeError("an in-memory DATABASE_URL is only allowed when ENV=test")


settings = Settings()
