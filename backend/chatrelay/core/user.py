# chatrelay/core/user.py

import logging

from sqlalchemy.orm import Session

from chatrelay.clients.stream_client import IdentityService
from chatrelay.core.errors import ValidationError
from chatrelay.core.identity import derive_user_id, lookup_presence
from chatrelay.models.user import User

logger = logging.getLogger(__name__)


def create_local_user(db: Session, user_id: str, name: str, email: str) -> User:
    user = User(user_id=user_id, name=name, email=email)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def register_user(db: Session, identity: IdentityService, name: str, email: str) -> dict:
    """Make sure the user exists in the identity service and the local table.

    Neither record is updated when it already exists. The two writes are not
    transactional: a failed local insert leaves the remote user in place.
    """
    if not name or not email:
        raise ValidationError("Name and email are required")

    user_id = derive_user_id(email)
    logger.info("Registering user %s", user_id)

    presence = lookup_presence(db, identity, user_id, exact=True)

    if not presence.remote:
        identity.upsert_user(user_id, name=name, email=email)

    if presence.local is None:
        logger.info("User %s does not exist in the database. Adding them...", user_id)
        create_local_user(db, user_id, name, email)

    return {"userId": user_id, "name": name, "email": email}
