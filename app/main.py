"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Mounts the GraphQL endpoint
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from contextlib import asynccontextmanager
from typing import Optional
import time

from app.core.config import Settings, settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.exceptions import StoreUnavailableError
from app.core.logging import setup_logging, get_logger
from app.db.mongo import MongoStore
from app.graphql.schema import create_graphql_router, create_schema, validate_schema
from app.services.post_service import PostRepository
from app.services.user_service import UserRepository

VERSION = "1.0.0"

# Initialize logging first
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Opens the store handle on startup and closes it on shutdown.
    """
    config: Settings = app.state.config

    # Startup
    logger.info("🚀 Starting UserPosts API...")

    try:
        logger.info("Validating configuration...")
        validate_settings(config)
        logger.info("✅ Configuration validated")

        validate_schema(app.state.schema)

    except Exception as e:
        logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
        raise

    store: MongoStore = app.state.store
    connected = await store.connect()
    if not connected:
        # Keep serving; requests fail until the store is reachable
        logger.warning("⚠️ Starting without a reachable MongoDB")

    app.state.users = UserRepository(store.users)
    app.state.posts = PostRepository(store.posts)

    logger.info(f"🎉 GraphQL server ready at http://{config.HOST}:{config.PORT}{config.GRAPHQL_PATH}")
    logger.info(f"Environment: {config.ENVIRONMENT}")

    yield  # Application runs here

    # Shutdown
    logger.info("🛑 Shutting down UserPosts API...")

    try:
        await store.close()
        logger.info("👋 UserPosts API shut down successfully")

    except Exception as e:
        logger.error(f"Error during shutdown: {str(e)}", exc_info=True)


def create_app(config: Settings = settings, store: Optional[MongoStore] = None) -> FastAPI:
    """
    Builds the application around an explicit store handle.
    """
    app = FastAPI(
        title="UserPosts API",
        description="GraphQL CRUD API for users and their posts",
        version=VERSION,
        lifespan=lifespan,
        debug=config.DEBUG,
        docs_url="/docs" if config.is_development else None,
        redoc_url=None,
    )

    app.state.config = config
    app.state.store = store if store is not None else MongoStore(config)
    app.state.schema = create_schema(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request timing middleware
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        if process_time > 5.0:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path}",
                extra={"process_time": process_time}
            )

        return response

    add_exception_handlers(app)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """
        Checks database connectivity. 503 with STORE_UNAVAILABLE when the ping fails.
        """
        if not await request.app.state.store.ping():
            raise StoreUnavailableError(details={"checks": {"database": "unhealthy"}})

        return {
            "status": "healthy",
            "timestamp": time.time(),
            "environment": config.ENVIRONMENT,
            "version": VERSION,
            "checks": {"database": "healthy"},
        }

    # Readiness check (for Kubernetes/orchestration)
    @app.get("/ready", tags=["Health"])
    async def readiness_check(request: Request):
        """
        Readiness check - indicates if the store is reachable.
        """
        if not await request.app.state.store.ping():
            raise StoreUnavailableError(details={"reason": "database_unavailable"})
        return {"status": "ready"}

    # Liveness check (for Kubernetes/orchestration)
    @app.get("/live", tags=["Health"])
    async def liveness_check():
        """
        Liveness check - indicates if app is alive.
        """
        return {"status": "alive"}

    app.include_router(create_graphql_router(config, app.state.schema), tags=["GraphQL"])

    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
