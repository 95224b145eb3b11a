# chatrelay/api/deps.py

from functools import lru_cache

from chatrelay.clients.openai_client import CompletionService
from chatrelay.clients.stream_client import IdentityService
from chatrelay.core.config import get_settings


@lru_cache(maxsize=1)
def get_identity_service() -> IdentityService:
    settings = get_settings()
    return IdentityService.from_credentials(
        settings.stream_api_key, settings.stream_api_secret
    )


@lru_cache(maxsize=1)
def get_completion_service() -> CompletionService:
    settings = get_settings()
    return CompletionService.from_credentials(
        settings.openai_api_key, model=settings.openai_model
    )
