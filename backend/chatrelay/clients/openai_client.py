import logging
from typing import Optional

from openai import OpenAI

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class CompletionService:
    """Single-turn chat completions. No conversation history is sent."""

    def __init__(self, client: OpenAI, model: str = DEFAULT_MODEL):
        self.client = client
        self.model = model

    @classmethod
    def from_credentials(cls, api_key: Optional[str], model: str = DEFAULT_MODEL):
        return cls(OpenAI(api_key=api_key), model=model)

    def complete(self, message: str) -> Optional[str]:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": message}],
        )
        if not response.choices:
            logger.warning("Completion returned no choices (model=%s)", self.model)
            return None
        return response.choices[0].message.content
