from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel
from src.domain.errors import ErrorCode
from .error import ClientError, ServerError
from .middleware import RequestLoggingMiddleware
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_database_error(request: Request, exc: SQLAlchemyError):
    error_dict = {"code": ErrorCode.dependency_failure.value, "message": "Internal server error"}
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def bootstrap(ApplicationConfig):
    """Create tables and seed the configured admin account"""
    from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from src.app.use_cases.admin import EnsureAdminUseCase
    from src.depends import AsyncSessionLocal, admin_token_store, engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    if admin_token_store is not None:
        logger.warning(
            "Admin reset tokens are kept in process memory: they are lost on "
            "restart and not shared between workers"
        )

    async with AsyncSessionLocal() as session:
        result = await EnsureAdminUseCase(SqlAlchemyUnitOfWork(session)).execute(
            ApplicationConfig.ADMIN_EMAIL, ApplicationConfig.ADMIN_PASSWORD
        )
    if result.is_err():
        logger.warning(f"Admin account not seeded: {result.error.message}")
    elif result.value.created:
        logger.info(f"Seeded admin account {result.value.email}")


def create_app(ApplicationConfig) -> FastAPI:
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await bootstrap(ApplicationConfig)
        yield

    app = FastAPI(title="Vet Check-in API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    from src.api.routes import admin, auth, check_in, health_check, signup

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(check_in.router, tags=["Check-in"])
    app.include_router(signup.router, tags=["Signup"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)

    return app
