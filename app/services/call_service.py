from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import ConstraintViolation, NotFoundError
from app.models.call import Call, CallStatus


def create_call(
    db: Session,
    user_id: int,
    phone_number: str,
    objective: str,
    recipient_context: Optional[str] = None,
    background_context: Optional[str] = None,
) -> Call:
    """
    Persist a requested outbound call in the "pending" state.

    The owning user must exist; otherwise the foreign key fails and we
    raise ConstraintViolation. Nothing is dialed here.
    """
    call = Call(
        user_id=user_id,
        phone_number=phone_number,
        recipient_context=recipient_context,
        objective=objective,
        background_context=background_context,
        status=CallStatus.PENDING.value,
    )

    db.add(call)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConstraintViolation(f"cannot create call for user {user_id}") from exc
    db.refresh(call)
    return call


def get_call(db: Session, call_id: int) -> Call:
    call = db.query(Call).filter(Call.id == call_id).first()
    if not call:
        raise NotFoundError(f"call {call_id} not found")
    return call
