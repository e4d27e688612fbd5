# Standard library imports
from contextlib import asynccontextmanager
import logging

# External package imports
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import health_router, user_router
from .api.error_handlers import register_exception_handlers
from .api.middleware import log_requests
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Builds the DI container up front so the user store exists before the
    first request arrives.
    """
    get_container()
    logger.info("Users API started")
    
    yield
    
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS and request logging middleware
    - Exception handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    
    # Create FastAPI app
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="In-memory CRUD service for users",
        lifespan=lifespan
    )
    
    # Add middleware
    application.middleware("http")(log_requests)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    # Register API routers
    application.include_router(health_router)
    application.include_router(user_router, prefix=f"{settings.api_prefix}/users")
    
    return application


# Create application instance
app = create_application()
