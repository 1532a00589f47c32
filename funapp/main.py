# funapp/main.py

import logging
import math
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from funapp.api.api import api_router
from funapp.core.config import Settings, get_settings
from funapp.core.exceptions import AppError
from funapp.core.logging_config import configure_logging
from funapp.core.security import PasswordHasher, TokenIssuer
from funapp.db.init_db import init_db
from funapp.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=exc.headers,
    )


def _json_safe(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # NaN/Infinity inputs are echoed back as strings; strict JSON rejects them
    return JSONResponse(
        status_code=422,
        content={"detail": _json_safe(jsonable_encoder(exc.errors()))},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "code": "UNEXPECTED_ERROR"},
    )


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Fail fast: no secret, no app
    secret = settings.require_jwt_secret()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
    )

    # ---------- CORS ----------
    if settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.backend_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # ---------- DATABASE ----------
    engine = build_engine(settings.database_url)
    init_db(engine)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher()
    app.state.token_issuer = TokenIssuer(
        secret,
        algorithm=settings.algorithm,
        expires_minutes=settings.access_token_expire_minutes,
    )

    # ---------- ERRORS ----------
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    logger.info(
        "%s %s ready (allowed country: %s)",
        settings.PROJECT_NAME,
        settings.VERSION,
        settings.allowed_country,
    )
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("funapp.main:create_application", factory=True, host="0.0.0.0", port=8000)
