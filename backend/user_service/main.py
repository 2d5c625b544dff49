"""
User Service Backend - FastAPI Application

Registration and login over a single MongoDB users collection.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient

from user_service import __version__
from user_service.config import Settings, get_settings
from user_service.core.errors import UserServiceError
from user_service.database.connections import close_store, connect_store
from user_service.logging_config import configure_logging
from user_service.routers import health, users
from user_service.schemas.user import FieldViolation

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect to MongoDB and create the unique email index
    - Abort only when REQUIRE_STORE_ON_STARTUP is set

    Shutdown:
    - Close the MongoDB client
    """
    settings: Settings = app.state.settings
    logger.info("Starting user service...")

    store = await connect_store(settings, client=app.state.mongo_client)
    if not store.connected:
        if settings.require_store_on_startup:
            await close_store(store)
            store.require()
        logger.warning("Starting without a database connection: %s", store.error)
    app.state.store = store

    yield

    logger.info("Shutting down user service...")
    await close_store(store)


async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
    """Render service errors with their own status and body."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with field violations when the body is malformed or mistyped."""
    violations = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        violations.append(
            FieldViolation(
                path=".".join(loc) or "body",
                value=jsonable_encoder(error.get("input")),
                msg=error.get("msg", "Invalid value"),
            )
        )
    return JSONResponse(
        status_code=400,
        content={"errors": [v.model_dump() for v in violations]},
    )


def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use, defaults to the environment
        mongo_client: Client to adopt instead of connecting to MONGODB_URI
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="User Service API",
        description="""
## User registration and login

- `POST /verificar-email`: check whether an email is already registered
- `POST /cadastro`: register a user (`nome`, `email`, `senha`)
- `POST /login`: check an email/password pair
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mongo_client = mongo_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=settings.cors_allow_headers,
    )

    allow_headers = ", ".join(settings.cors_allow_headers)

    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        """Send the CORS headers on every response, with or without an Origin header."""
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Headers"] = allow_headers
        return response

    app.add_exception_handler(UserServiceError, user_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(health.router)
    app.include_router(users.router)

    return app


app = create_app()
