# authserver/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv


load_dotenv()


DEFAULT_DATABASE_URL = "sqlite:///./data/app.db"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    cors_origins: tuple[str, ...] = ("*",)
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def _split_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    """
    Builds the server settings from the environment (and `.env`, if present).
    """
    return Settings(
        database_url=os.getenv("AUTH_DATABASE_URL", DEFAULT_DATABASE_URL),
        cors_origins=_split_origins(os.getenv("AUTH_CORS_ORIGINS", "*")),
        host=os.getenv("AUTH_HOST", "127.0.0.1"),
        port=int(os.getenv("AUTH_PORT", "8000")),
        log_level=os.getenv("AUTH_LOG_LEVEL", "INFO").upper(),
    )
