from datetime import datetime
from enum import Enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.models.base import Base


class CallStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class Call(Base):
    __tablename__ = "calls"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Destination number as the user typed it (leading zeros kept)
    phone_number = Column(String(32), nullable=False)
    recipient_context = Column(Text, nullable=True)
    objective = Column(Text, nullable=False)
    background_context = Column(Text, nullable=True)

    # Stored as a plain string; CallStatus is used on the Python side.
    # Nothing moves a call past "pending" until dialing exists.
    status = Column(
        String(32),
        nullable=False,
        default=CallStatus.PENDING.value,
        server_default=CallStatus.PENDING.value,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", backref="calls")
