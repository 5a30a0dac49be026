import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, EmailStr, ValidationError, field_validator

from app.core.mailer import TransportConfig, relay_submission
from app.dependencies import RelayOptions, get_relay_options, get_transport_config
from app.lib.messages import get_messages, get_page_text

router = APIRouter(prefix="/api", tags=["contact"])
log = logging.getLogger("uvicorn.error")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


class ContactSubmission(BaseModel):
    """Permissive form payload: absent fields become empty strings."""
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    email: str = ""
    content: str = ""

    @field_validator("title", "email", "content", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class StrictContactSubmission(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    email: EmailStr
    content: str

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


def _reply(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.get("/contact/text")
async def contact_text(options: RelayOptions = Depends(get_relay_options)):
    return {"locale": options.locale, "text": get_page_text(options.locale)}


@router.post("/send-email")
async def send_email(
    request: Request,
    config: TransportConfig = Depends(get_transport_config),
    options: RelayOptions = Depends(get_relay_options),
):
    text = get_messages(options.locale)

    try:
        payload = json.loads(await request.body())
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    except Exception:
        log.exception("[contact] unreadable request body")
        return _reply(500, text["failed"])

    try:
        if options.strict:
            submission = StrictContactSubmission.model_validate(payload)
        else:
            submission = ContactSubmission.model_validate(payload)
    except ValidationError as exc:
        log.info(f"[contact] rejected submission: {exc.error_count()} invalid field(s)")
        return _reply(400, text["invalid"])

    try:
        await run_in_threadpool(
            relay_submission,
            config,
            submission.title,
            str(submission.email),
            submission.content,
            options.locale,
        )
    except Exception:
        log.exception("[contact] mail relay failed")
        return _reply(500, text["failed"])

    return {"message": text["sent"]}
