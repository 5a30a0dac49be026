# app/main.py
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import logging
from typing import List

from app.core.mailer import TransportConfig
from app.core.settings import settings
from app.routers.contact import router as contact_router
from app.routers.health import router as health_router

log = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.api_title)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def check_transport_config(config: TransportConfig) -> List[str]:
    missing = config.missing_fields()
    if missing:
        log.warning(f"[main] mail transport incomplete, contact form will fail until set: {', '.join(missing)}")
    return missing

# mail transport, read once and shared read-only across requests
app.state.transport_config = TransportConfig.from_settings(settings)
check_transport_config(app.state.transport_config)

# Routers
app.include_router(contact_router)
app.include_router(health_router)

@app.get("/__routes")
async def __routes():
    # openapi paths include routes from included routers
    return [
        {"methods": sorted(m.upper() for m in ops), "path": path}
        for path, ops in app.openapi().get("paths", {}).items()
    ]

# static page; mounted last so API routes win
backend_dir = Path(__file__).resolve().parents[1]
proj_root = backend_dir.parent
frontend_dir = Path(settings.frontend_root).resolve() if settings.frontend_root else (proj_root / "frontend")
if frontend_dir.is_dir():
    app.mount("/", StaticFiles(directory=str(frontend_dir), html=True), name="frontend")
    log.info(f"[main] frontend_root = {frontend_dir}")
else:
    log.warning(f"[main] frontend_root {frontend_dir} not found; serving API only")
