"""
FastAPI Application
===================

Main FastAPI app setup. The DI container is built before the app is created
and released from the lifespan hook when the server shuts down.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status

from userapp import __version__
from userapp.application.dto.health_dto import HealthResponse, RootResponse
from userapp.di.container import DIContainer, peek_container, shutdown_container

logger = logging.getLogger(__name__)


def create_application(container: DIContainer) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: Running DI container the application serves from

    Returns:
        Configured FastAPI application instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s started", container.settings.app_name)
        yield
        logger.info("Shutting down %s", container.settings.app_name)
        if peek_container() is container:
            shutdown_container()
        else:
            container.close()

    application = FastAPI(
        title=container.settings.app_name,
        description="User management service",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    @application.get("/", response_model=RootResponse)
    async def root(request: Request) -> RootResponse:
        """Root endpoint."""
        current = request.app.state.container
        return RootResponse(
            status="running" if current.is_running else current.state.value,
            service=current.settings.app_name,
            version=__version__,
            docs="/docs",
        )

    @application.get("/health", response_model=HealthResponse)
    async def health(request: Request, response: Response) -> HealthResponse:
        """Health check endpoint."""
        current = request.app.state.container
        if not current.is_running:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(
            status="healthy" if current.is_running else "unavailable",
            container_state=current.state.value,
            services=[registration.name for registration in current.registrations()],
        )

    return application
