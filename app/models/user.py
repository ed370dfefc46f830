from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String

from app.models.base import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("minutes >= 0", name="ck_users_minutes_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Compared byte-for-byte; "A@x.com" and "a@x.com" are different users
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)

    # Call credit balance
    minutes = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )
