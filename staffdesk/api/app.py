from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
from staffdesk.adapter.services.notifiers import OutboxNotifier, SmtpNotifier
from staffdesk.app.services.password_hasher import PasswordHasher
from staffdesk.app.services.token_service import TokenService
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(
        "Unhandled error on %s %s from %s",
        request.method,
        request.url.path,
        request.client.host if request.client else "unknown",
    )
    error_dict = {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)

    app = FastAPI(title="Staffdesk API", version="0.1.0")

    # Services built once from config and shared by every request
    app.state.token_service = TokenService.from_config(ApplicationConfig)
    app.state.password_hasher = PasswordHasher.from_config(ApplicationConfig)
    app.state.otp_ttl = timedelta(minutes=ApplicationConfig.OTP_TTL_MINUTES)
    if ApplicationConfig.MAIL_ENABLED:
        app.state.notifier = SmtpNotifier.from_config(ApplicationConfig)
    else:
        logger.warning("MAIL_ENABLED is off; OTP emails are kept in an in-memory outbox")
        app.state.notifier = OutboxNotifier()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from staffdesk.api.routes import auth, employee, health_check, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(employee.router, prefix=prefix, tags=["Employees"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
