from app.models.base import Base  # noqa: F401

from app.models.user import User  # noqa: F401
from app.models.call import Call, CallStatus  # noqa: F401
from app.models.call_log import CallLog  # noqa: F401
