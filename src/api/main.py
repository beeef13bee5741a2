"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.adapters.repository.memory import InMemoryIdentityRegistry
from src.adapters.token.jose_issuer import JoseTokenIssuer
from src.api.errors import install_error_handlers
from src.api.routes import router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Register identities and exchange credentials for signed tokens",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Builds the process-wide collaborators on startup:
    - Empty in-memory identity registry
    - Token issuer with the configured key, algorithm and TTL
    """
    settings = get_settings()

    logger.info("Starting application...")
    if settings.uses_default_secret:
        logger.warning("Using default JWT secret key. Set JWT_SECRET_KEY in production!")

    app.state.registry = InMemoryIdentityRegistry()
    app.state.token_issuer = JoseTokenIssuer(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        ttl=settings.token_ttl,
    )

    logger.info("Application startup complete")

    yield

    # Registry is volatile; identities are discarded with the process
    logger.info("Shutting down application, discarding %d identities", len(app.state.registry))


app = FastAPI(
    title="credencial",
    description="Credential issuance API - register users and log in for a signed token",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

install_error_handlers(app)
app.include_router(router)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Returns 200 OK if the application is up."""
    return {"status": "healthy"}


def run() -> None:
    """Configure logging and serve the app with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server starting on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
