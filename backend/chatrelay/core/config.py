# chatrelay/core/config.py

from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    user = os.getenv("DB_USER", "chatrelay")
    password = os.getenv("DB_PASS", "chatrelay")
    host = os.getenv("DB_HOST", "localhost")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME", "chatrelay")
    return f"postgresql://{user}:{password}@{host}:{port}/{name}"


class Settings:
    """Application settings loaded from environment variables.

    Credentials for the messaging and completion services live here too;
    nothing else reads os.environ directly.
    """

    port: int = int(os.getenv("PORT", "5000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    database_url: str = _database_url()
    stream_api_key: Optional[str] = os.getenv("STREAM_API_KEY")
    stream_api_secret: Optional[str] = os.getenv("STREAM_API_SECRET")
    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
