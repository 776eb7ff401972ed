# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.errors import register_exception_handlers
from .api.middleware import register_middleware
from .api.v1 import auth_router, user_router, cart_router, payment_router, health_router
from .core.config import get_settings, reset_settings
from .core.logging_config import configure_logging
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_database, ensure_indexes
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Refuses to start without a JWT secret, creates the MongoDB indexes the
    data model relies on, and closes pooled connections on shutdown.
    """
    settings = get_settings()
    settings.validate()

    if settings.mongo_ensure_indexes:
        try:
            await ensure_indexes()
        except Exception as e:
            # Registration still checks for duplicates before insert
            logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    logger.info("Storefront API started")

    yield

    await close_shared_http_client()
    close_database()
    reset_container()
    reset_settings()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware, request logging and the error envelope handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    configure_logging()
    settings = get_settings()

    application = FastAPI(
        title="Storefront API",
        version="1.0.0",
        description="Users, authentication, shopping cart and payments",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
        max_age=86400,
    )
    register_middleware(application)
    register_exception_handlers(application)

    # Register API routers
    application.include_router(auth_router, prefix="/api")
    application.include_router(user_router, prefix="/api")
    application.include_router(cart_router, prefix="/api/cart")
    application.include_router(payment_router, prefix="/api")
    application.include_router(health_router, prefix="/api")

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
