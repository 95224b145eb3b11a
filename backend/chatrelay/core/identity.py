import re
from typing import NamedTuple, Optional

from sqlalchemy.orm import Session

from chatrelay.clients.stream_client import IdentityService
from chatrelay.models.user import User

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def derive_user_id(email: str) -> str:
    """Replace every character outside [A-Za-z0-9_-] with an underscore."""
    return _UNSAFE_CHARS.sub("_", email)


def get_local_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.user_id == user_id).first()


class UserPresence(NamedTuple):
    user_id: str
    remote: bool
    local: Optional[User]


def lookup_presence(
    db: Session,
    identity: IdentityService,
    user_id: str,
    exact: bool = True,
    short_circuit: bool = False,
) -> UserPresence:
    """Check a user id against the identity service, then the local table.

    ``exact`` selects the {"$eq": id} query; otherwise the plain {"id": id}
    query is used. The two are kept separate and not assumed equivalent.
    With ``short_circuit`` the local table is not read when the identity
    service does not know the user.
    """
    if exact:
        remote_users = identity.find_user(user_id)
    else:
        remote_users = identity.query_user(user_id)
    remote = bool(remote_users)
    if short_circuit and not remote:
        return UserPresence(user_id=user_id, remote=False, local=None)
    return UserPresence(
        user_id=user_id,
        remote=remote,
        local=get_local_user(db, user_id),
    )
