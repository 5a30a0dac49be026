# app/routers/health.py
from fastapi import APIRouter, Depends

from app.core.mailer import TransportConfig
from app.dependencies import get_transport_config

router = APIRouter(prefix="/health", tags=["health"])

@router.get("")
async def health_root():
    return {"status": "ok"}

@router.get("/mail")
async def health_mail(config: TransportConfig = Depends(get_transport_config)):
    # Config check only; the SMTP server is not contacted
    missing = config.missing_fields()
    return {
        "configured": not missing,
        "missing": missing,
        "host": config.host,
        "port": config.port,
        "secure": config.secure,
    }
