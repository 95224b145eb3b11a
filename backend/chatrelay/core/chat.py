# chatrelay/core/chat.py

import logging
from typing import List

from sqlalchemy.orm import Session

from chatrelay.clients.openai_client import CompletionService
from chatrelay.clients.stream_client import IdentityService
from chatrelay.core.errors import NotFoundError, ValidationError
from chatrelay.core.identity import lookup_presence
from chatrelay.models.chat import Chat

logger = logging.getLogger(__name__)

NO_REPLY_FALLBACK = "No response from AI"


def store_chat(db: Session, user_id: str, message: str, reply: str) -> Chat:
    chat = Chat(user_id=user_id, message=message, reply=reply)
    db.add(chat)
    db.commit()
    db.refresh(chat)
    return chat


def fetch_chats(db: Session, user_id: str) -> List[Chat]:
    """All stored exchanges for a user, oldest first."""
    if not user_id:
        raise ValidationError("User ID is required")
    return (
        db.query(Chat)
        .filter(Chat.user_id == user_id)
        .order_by(Chat.id)
        .all()
    )


def relay_message(
    db: Session,
    identity: IdentityService,
    completion: CompletionService,
    user_id: str,
    message: str,
) -> str:
    """Ask the model for a reply, store the exchange and post the reply to the user's channel."""
    if not message or not user_id:
        raise ValidationError("Message and user are required")

    presence = lookup_presence(db, identity, user_id, exact=False, short_circuit=True)
    if not presence.remote:
        raise NotFoundError("User not found. Please register first.")
    if presence.local is None:
        raise NotFoundError("User not found in database, please register first")

    reply = completion.complete(message)
    if reply is None:
        reply = NO_REPLY_FALLBACK

    store_chat(db, user_id, message, reply)
    identity.post_reply(user_id, reply)

    logger.debug("Relayed message for %s (%d chars reply)", user_id, len(reply))
    return reply
