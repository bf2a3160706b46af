"""
Banking Service — FastAPI Application.

This is the entry point for the application. All routers and
error handlers are registered here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from banking_service.config import get_settings
from banking_service.exceptions import BankingError
from banking_service.logging_config import setup_logging
from banking_service.models.base import init_db
from banking_service.api.health import router as health_router
from banking_service.api.accounts import router as accounts_router
from banking_service.api.kyc import router as kyc_router
from banking_service.api.users import router as users_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s %s started (%s)", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Accounts, KYC profiles and fund transfers",
    debug=settings.DEBUG,
    lifespan=lifespan,
)


# --- Error handlers ---
# Every error body has the same shape: {"error": "<message>"}.

@app.exception_handler(BankingError)
async def banking_error_handler(request: Request, exc: BankingError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first["loc"] if part != "body")
    message = f"{field}: {first['msg']}" if field else first["msg"]
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "Database error on %s %s", request.method, request.url.path,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"error": "internal server error"})


# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(kyc_router)
app.include_router(users_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
