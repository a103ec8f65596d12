import logging

from fastapi import FastAPI

from items_svc.api.api import api_router
from items_svc.api.endpoints import health
from items_svc.core.config import settings
from items_svc.core.exceptions import install_exception_handlers
from items_svc.core.logging_config import configure_logging, install_request_logging
from items_svc.db.init_db import init_db

LOG = logging.getLogger(__name__)

# Configure logging before app initialization
configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
)

install_request_logging(app)
install_exception_handlers(app)


@app.on_event("startup")
async def _init_db_event():
    # A failure here aborts startup; uvicorn exits non-zero before serving
    await init_db()
    LOG.info(
        "%s ready metrics_enabled=%s metrics_inline=%s",
        settings.PROJECT_NAME,
        settings.METRICS_ENABLED,
        settings.METRICS_INLINE,
    )


app.include_router(health.router)
app.include_router(api_router, prefix=settings.API_PREFIX)
