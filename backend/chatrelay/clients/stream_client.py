# chatrelay/clients/stream_client.py

import logging
from typing import Optional

from stream_chat import StreamChat

logger = logging.getLogger(__name__)

# =========================
# CONFIGURATION
# =========================

BOT_USER_ID = "ai_bot"
CHANNEL_TYPE = "messaging"
CHANNEL_NAME = "AI Chat"
DEFAULT_ROLE = "user"


def channel_id_for(user_id: str) -> str:
    """One channel per user, named from the user id."""
    return f"chat-{user_id}"


# =========================
# IDENTITY / MESSAGING SERVICE
# =========================

class IdentityService:
    """Users and channels held in Stream Chat."""

    def __init__(self, client: StreamChat):
        self.client = client

    @classmethod
    def from_credentials(cls, api_key: Optional[str], api_secret: Optional[str]):
        if not api_key or not api_secret:
            raise RuntimeError("STREAM_API_KEY and STREAM_API_SECRET must be set")
        return cls(StreamChat(api_key=api_key, api_secret=api_secret))

    def find_user(self, user_id: str) -> list:
        """Exact-id lookup: {"id": {"$eq": user_id}}."""
        response = self.client.query_users({"id": {"$eq": user_id}})
        logger.debug("find_user %s -> %s", user_id, response)
        return list(response.get("users", []))

    def query_user(self, user_id: str) -> list:
        """Plain lookup: {"id": user_id}."""
        response = self.client.query_users({"id": user_id})
        return list(response.get("users", []))

    def upsert_user(self, user_id: str, name: str, email: str, role: str = DEFAULT_ROLE):
        return self.client.upsert_user({
            "id": user_id,
            "name": name,
            "email": email,
            "role": role,
        })

    def open_channel(self, user_id: str):
        channel = self.client.channel(
            CHANNEL_TYPE,
            channel_id_for(user_id),
            {"name": CHANNEL_NAME, "created_by_id": BOT_USER_ID},
        )
        # Creating an existing channel returns it unchanged
        channel.create(BOT_USER_ID)
        return channel

    def send_message(self, channel, text: str):
        return channel.send_message({"text": text}, BOT_USER_ID)

    def post_reply(self, user_id: str, text: str):
        channel = self.open_channel(user_id)
        return self.send_message(channel, text)
