# chatrelay/models/user.py

from datetime import datetime

from sqlalchemy import Column, DateTime, String

from chatrelay.models.base import Base


class User(Base):
    __tablename__ = "users"

    # Derived from the email, see core.identity.derive_user_id
    user_id = Column(String(255), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
