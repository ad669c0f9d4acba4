#!/usr/bin/env python3
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.trustedhost import TrustedHostMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from app.api import router as api_router
from app.config import settings
from app.database import init_db
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.utils.logging import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Team Webhooks API")

# 1) Security headers on every response
app.add_middleware(SecurityHeadersMiddleware, config=settings)

# 2) Respect the X-Forwarded-* headers from the reverse proxy
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

# 3) Restrict valid hosts
app.add_middleware(TrustedHostMiddleware, allowed_hosts=[
    settings.external_hostname,
    "localhost",
    "127.0.0.1"
])


@app.on_event("startup")
def on_startup():
    init_db()  # Create tables if they don't exist
    logger.info("Application started")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutting down")


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Storage failure while handling %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# Include the routers
app.include_router(api_router, prefix="/api")
