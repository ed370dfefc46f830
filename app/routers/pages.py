import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.session import get_db
from app.errors import AppError
from app.rendering import templates
from app.services.user_service import get_user_minutes

router = APIRouter(tags=["pages"])

logger = logging.getLogger(__name__)


@router.api_route("/", methods=["GET", "POST"], response_class=HTMLResponse)
def home_page(request: Request):
    settings = get_settings()
    return templates.TemplateResponse(
        request, "home.html", {"app_name": settings.APP_NAME}
    )


@router.api_route("/stripePage", methods=["GET", "POST"], response_class=HTMLResponse)
def stripe_page(request: Request, db: Session = Depends(get_db)):
    """
    Credits page showing the minutes balance.

    The balance is display-only, so a failed lookup (unknown user, DB
    down) is logged and rendered as 0 instead of failing the page.
    """
    settings = get_settings()
    try:
        minutes = get_user_minutes(db, settings.CREDITS_EMAIL)
    except (AppError, SQLAlchemyError) as exc:
        logger.warning(
            "couldn't get minutes for %s, showing 0: %s", settings.CREDITS_EMAIL, exc
        )
        minutes = 0

    return templates.TemplateResponse(
        request,
        "stripe.html",
        {"app_name": settings.APP_NAME, "minutes": minutes},
    )
