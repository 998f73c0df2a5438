"""
SQLAlchemy model for the last accepted command of a chat.
"""
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class LastCommandModel(Base):
    """One row per chat; text is overwritten in place"""
    __tablename__ = "last_commands"

    session_id: Mapped[str] = mapped_column(String(64), primary_key=True, comment="Chat identifier as string")
    text: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "session_id": self.session_id,
            "text": self.text,
            "updated_at": self.updated_at,
        }
