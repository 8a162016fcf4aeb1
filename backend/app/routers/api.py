"""
JSON API endpoints.

- GET  /api/faqs       FAQ entries for the support page widget
- POST /api/subscribe  Newsletter sign-up (rate limited with every other POST)
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from rivix_core.logging import get_logger

from ..content import FAQS
from ..schemas import ApiMessage, FaqEntry, SubscribeRequest

logger = get_logger("api.subscribe")

router = APIRouter(prefix="/api", tags=["api"])

INVALID_EMAIL_MESSAGE = "Please provide a valid email address."
SUBSCRIBED_MESSAGE = "Thank you for subscribing! Check your email for confirmation."


@router.get("/faqs", response_model=list[FaqEntry])
def list_faqs():
    return FAQS


async def _read_subscribe_body(request: Request) -> SubscribeRequest:
    """Accept either a JSON body or a urlencoded/multipart form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            payload = {}
    else:
        form = await request.form()
        payload = dict(form)

    if not isinstance(payload, dict):
        payload = {}
    try:
        return SubscribeRequest.model_validate(payload)
    except ValidationError:
        return SubscribeRequest()


@router.post("/subscribe", response_model=ApiMessage)
async def subscribe(request: Request):
    """
    Register an email for the newsletter.

    Delivery is not wired to a mailing provider yet; accepted addresses are
    logged.
    """
    body = await _read_subscribe_body(request)
    email = (body.email or "").strip()

    if not email or "@" not in email:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": INVALID_EMAIL_MESSAGE},
        )

    logger.info("newsletter_subscription", email=email)
    return ApiMessage(success=True, message=SUBSCRIBED_MESSAGE)
