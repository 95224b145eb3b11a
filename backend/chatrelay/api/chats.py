# chatrelay/api/chats.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from chatrelay.api.deps import get_completion_service, get_identity_service
from chatrelay.clients.openai_client import CompletionService
from chatrelay.clients.stream_client import IdentityService
from chatrelay.core.chat import fetch_chats, relay_message
from chatrelay.core.errors import RelayError, ServerError
from chatrelay.infra.postgres import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


class ChatSchema(BaseModel):
    message: Optional[str] = None
    userId: Optional[str] = None


class HistorySchema(BaseModel):
    userId: Optional[str] = None


@router.post("/chat")
def chat_endpoint(
    payload: ChatSchema,
    db: Session = Depends(get_db),
    identity: IdentityService = Depends(get_identity_service),
    completion: CompletionService = Depends(get_completion_service),
):
    try:
        reply = relay_message(db, identity, completion, payload.userId, payload.message)
        return {"reply": reply}
    except RelayError:
        raise
    except Exception:
        logger.exception("Error generating AI response")
        raise ServerError()


@router.post("/get-messages")
def get_messages_endpoint(payload: HistorySchema, db: Session = Depends(get_db)):
    try:
        chats = fetch_chats(db, payload.userId)
        return {"messages": [c.to_dict() for c in chats]}
    except RelayError:
        raise
    except Exception:
        logger.exception("Error fetching chat history")
        raise ServerError()
