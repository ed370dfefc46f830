import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from app.config import get_settings
from app.errors import ValidationError
from app.rendering import templates
from app.schemas.call_form import ForbiddenResponse
from app.services.call_request_service import (
    build_moderation_description,
    validate_call_form,
)
from app.services.moderation_service import ModerationClient, get_moderation_client

router = APIRouter(prefix="/calls", tags=["calls"])

logger = logging.getLogger(__name__)


@router.post("", response_class=HTMLResponse)
def submit_call_request(
    request: Request,
    recipientPhoneNumber: str = Form(""),
    recipientContext: str = Form(""),
    objective: str = Form(""),
    otherContext: str = Form(""),
    moderation: ModerationClient = Depends(get_moderation_client),
):
    """
    Handle the home-page call form.

    - Validate the form (400 plain text on failure)
    - Ask the moderation model whether we should make this call
      (403 JSON on rejection or provider/config failure)
    - Render the placeholder call-status page

    Exactly one response is produced; a rejection stops the request.
    Nothing is persisted or dialed yet.
    """
    try:
        form = validate_call_form(
            recipient_number=recipientPhoneNumber,
            recipient_name=recipientContext,
            objective=objective,
            other_context=otherContext,
        )
    except ValidationError as exc:
        logger.info("call form rejected: %s", exc)
        return PlainTextResponse(f"Bad request: {exc}", status_code=400)

    result = moderation.check_prompt_validity(build_moderation_description(form))
    if not result.approved:
        return JSONResponse(status_code=403, content=ForbiddenResponse().model_dump())

    return templates.TemplateResponse(
        request,
        "call_status.html",
        {"app_name": get_settings().APP_NAME, "form": form},
    )
