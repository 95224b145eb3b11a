# chatrelay/models/chat.py

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String, Text

from chatrelay.models.base import Base


class Chat(Base):
    __tablename__ = "chats"

    id = Column(Integer, primary_key=True, index=True)

    # Plain column, no foreign key to users
    user_id = Column(String(255), nullable=False, index=True)
    message = Column(Text, nullable=False)
    reply = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "message": self.message,
            "reply": self.reply,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
