# app/core/mailer.py
import logging
import re
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from typing import List, Optional

from app.core.settings import Settings, as_flag
from app.lib.messages import get_messages

log = logging.getLogger("uvicorn.error")

_SINGLE_ADDRESS = re.compile(r"^[^@\s<>,;\"]+@[^@\s<>,;\"]+$")


class MailError(Exception):
    """Base class for relay failures."""


class MailConfigError(MailError):
    """Transport configuration is incomplete."""


class MailSendError(MailError):
    """SMTP conversation failed."""


def _parse_int(raw: Optional[str]) -> Optional[int]:
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


def _parse_float(raw: Optional[str]) -> Optional[float]:
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


@dataclass(frozen=True)
class TransportConfig:
    host: Optional[str]
    port: Optional[int]
    secure: bool
    user: Optional[str]
    password: Optional[str]
    from_email: Optional[str]
    to_email: Optional[str]
    timeout: Optional[float] = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "TransportConfig":
        return cls(
            host=(settings.smtp_host or "").strip() or None,
            port=_parse_int(settings.smtp_port or "587"),
            secure=as_flag(settings.smtp_secure),
            user=settings.smtp_user or None,
            password=settings.smtp_pass or None,
            from_email=(settings.from_email or "").strip() or None,
            to_email=(settings.to_email or "").strip() or None,
            timeout=_parse_float(settings.smtp_timeout or "30"),
        )

    def missing_fields(self) -> List[str]:
        """Env var names that are absent or unusable. Never includes values."""
        checks = [
            ("SMTP_HOST", self.host),
            ("SMTP_PORT", self.port),
            ("SMTP_USER", self.user),
            ("SMTP_PASS", self.password),
            ("FROM_EMAIL", self.from_email),
            ("TO_EMAIL", self.to_email),
            ("SMTP_TIMEOUT", self.timeout),
        ]
        return [name for name, value in checks if value is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()


def compose_message(
    config: TransportConfig,
    title: str,
    email: str,
    content: str,
    locale: str | None = None,
) -> EmailMessage:
    """
    Build the plain-text notification. Fields go into the body verbatim in the
    order title, email, content; the subject gets the title on a single line.
    """
    text = get_messages(locale)
    subject_title = " ".join(title.split())

    msg = EmailMessage()
    msg["Subject"] = text["subject"].format(title=subject_title)
    msg["From"] = config.from_email or ""
    msg["To"] = config.to_email or ""
    if _SINGLE_ADDRESS.match(email or ""):
        msg["Reply-To"] = email

    body = (
        f"{text['title_label']}: {title}\n"
        f"{text['email_label']}: {email}\n"
        f"\n"
        f"{text['content_label']}:\n"
        f"{content}\n"
    )
    msg.set_content(body)
    return msg


def _open_connection(config: TransportConfig, context: ssl.SSLContext):
    if config.secure:
        return smtplib.SMTP_SSL(config.host, config.port, timeout=config.timeout, context=context)
    return smtplib.SMTP(config.host, config.port, timeout=config.timeout)


def send_message(config: TransportConfig, message: EmailMessage) -> None:
    """Single blocking send attempt over a fresh connection."""
    missing = config.missing_fields()
    if missing:
        raise MailConfigError(f"SMTP transport not configured, missing: {', '.join(missing)}")

    context = ssl.create_default_context()
    try:
        with _open_connection(config, context) as smtp:
            if not config.secure:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls(context=context)
                    smtp.ehlo()
            smtp.login(config.user, config.password)
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError) as exc:
        raise MailSendError(f"SMTP send via {config.host}:{config.port} failed: {exc}") from exc

    log.info(f"[mailer] sent {message['Subject']!r} to {config.to_email}")


def relay_submission(
    config: TransportConfig,
    title: str,
    email: str,
    content: str,
    locale: str | None = None,
) -> EmailMessage:
    message = compose_message(config, title, email, content, locale)
    send_message(config, message)
    return message
