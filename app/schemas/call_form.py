# app/schemas/call_form.py
from pydantic import BaseModel


class CallForm(BaseModel):
    recipient_number: str
    recipient_name: str
    objective: str
    other_context: str = ""


class ForbiddenResponse(BaseModel):
    error: str = "forbidden"
    message: str = "Request violates Terms of Service"
