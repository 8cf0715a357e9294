"""
Main FastAPI application for the dogql service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, settings
from ..context import AppContext
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_app(
    app_settings: Settings | None = None, app_context: AppContext | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        app_settings: Settings to run with (defaults to the environment)
        app_context: Pre-built context; tests pass one with a stubbed HTTP client
    """
    app_settings = app_settings or settings
    app_context = app_context or AppContext(settings=app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting dogql API...")
        await app_context.startup()

        yield

        logger.info("Shutting down dogql API...")
        await app_context.shutdown()

    app = FastAPI(
        title="dogql",
        description="GraphQL API for dog breeds and images",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.app_context = app_context

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    from ..graphql.schema import create_graphql_router, validate_schema

    # Validate schema at startup so a broken schema never serves traffic
    logger.info("Validating GraphQL schema...")
    validate_schema()

    graphql_router = create_graphql_router(app_context, graphiql=app_settings.graphiql)
    app.include_router(graphql_router, prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    from ..server import DogqlServer

    DogqlServer(
        uvicorn.Config(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_level=settings.log_level.lower(),
        )
    ).run()
