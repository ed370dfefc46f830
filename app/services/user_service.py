from datetime import datetime
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import ConstraintViolation, NotFoundError
from app.models.user import User


def create_user(db: Session, email: str, name: str) -> User:
    """
    Insert a new user with a zero minutes balance.

    Raises ConstraintViolation if the email is already taken.
    """
    user = User(email=email, name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConstraintViolation(f"user with email {email!r} already exists") from exc
    db.refresh(user)
    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError(f"user {user_id} not found")
    return user


def get_user_by_email(db: Session, email: str) -> User:
    # Plain equality, so the match is case-sensitive on SQLite and Postgres
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise NotFoundError(f"user with email {email!r} not found")
    return user


def get_user_minutes(db: Session, email: str) -> int:
    minutes = db.query(User.minutes).filter(User.email == email).scalar()
    if minutes is None:
        raise NotFoundError(f"user with email {email!r} not found")
    return int(minutes)


def update_user(db: Session, user_id: int, name: str) -> User:
    user = get_user(db, user_id)
    user.name = name
    # onupdate only fires for dirty rows; a same-name update must still bump it
    user.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(user)
    return user


def set_user_minutes(db: Session, user_id: int, minutes: int) -> User:
    """
    Overwrite the user's minutes balance.

    Negative balances are refused by the users table CHECK constraint and
    surface as ConstraintViolation.
    """
    user = get_user(db, user_id)
    user.minutes = minutes
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConstraintViolation(f"minutes must be non-negative, got {minutes}") from exc
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> None:
    """Delete a user by id. Deleting a missing id is a no-op."""
    db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    db.commit()


def list_users(db: Session) -> List[User]:
    return (
        db.query(User)
        .order_by(User.created_at.desc(), User.id.desc())
        .all()
    )
