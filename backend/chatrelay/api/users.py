# chatrelay/api/users.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from chatrelay.api.deps import get_identity_service
from chatrelay.clients.stream_client import IdentityService
from chatrelay.core.errors import RelayError, ServerError
from chatrelay.core.user import register_user
from chatrelay.infra.postgres import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


class RegisterUserSchema(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


@router.post("/register-user")
def register_user_endpoint(
    payload: RegisterUserSchema,
    db: Session = Depends(get_db),
    identity: IdentityService = Depends(get_identity_service),
):
    try:
        return register_user(db, identity, payload.name, payload.email)
    except RelayError:
        raise
    except Exception:
        logger.exception("Registration failed")
        raise ServerError()
