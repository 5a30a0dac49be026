# backend/app/dependencies.py
from dataclasses import dataclass

from fastapi import Request

from app.core.mailer import TransportConfig
from app.core.settings import as_flag, settings
from app.lib.messages import normalize_locale


@dataclass(frozen=True)
class RelayOptions:
    locale: str = "en"
    strict: bool = False


def get_transport_config(request: Request) -> TransportConfig:
    # Built once at startup in app.main; falls back to the process settings
    config = getattr(request.app.state, "transport_config", None)
    if config is None:
        config = TransportConfig.from_settings(settings)
        request.app.state.transport_config = config
    return config


def get_relay_options() -> RelayOptions:
    return RelayOptions(
        locale=normalize_locale(settings.mail_locale),
        strict=as_flag(settings.contact_strict_validation),
    )
