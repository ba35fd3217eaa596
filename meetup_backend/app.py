from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Final, Optional

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Local application imports
from meetup_backend.graphql.context import GraphQLContext, create_context
from meetup_backend.graphql.resolver import Resolver
from meetup_backend.graphql.schema import create_schema
from meetup_backend.infrastructure.config import (
    get_app_version,
    get_host,
    get_log_level,
    get_port,
    get_repository_backend,
    get_request_timeout_s,
)
from meetup_backend.infrastructure.persistence.factory import get_meetup_repository

load_dotenv()

# --- Basic logging configuration ---
_LOG_LEVEL = get_log_level()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

logger = _logging.getLogger("startup")

schema: Final = create_schema()


def create_app(resolver: Optional[Resolver] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        resolver: Resolver root to serve (defaults to one backed by the
            configured repository)

    Returns:
        FastAPI app with /graphql, /health and /version
    """
    if resolver is None:
        resolver = Resolver(repository=get_meetup_repository())
    timeout_s = get_request_timeout_s()
    app_version = get_app_version()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "startup.config",
            extra={
                "repository_backend": get_repository_backend(),
                "repository": type(resolver.repository).__name__,
                "request_timeout_s": timeout_s,
                "version": app_version,
            },
        )
        logger.info("lifespan.ready", extra={"status": "serving"})
        yield
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        close = getattr(resolver.repository, "close", None)
        if close is not None:
            await close()

    app = FastAPI(
        title="Meetup GraphQL Backend",
        version=app_version,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def version() -> dict[str, str]:
        return {"version": app_version}

    async def get_graphql_context(request: Request) -> GraphQLContext:
        """One context (and cancellation token) per request."""
        return create_context(resolver, timeout_s=timeout_s, request=request)

    graphql_app: GraphQLRouter[Any, Any] = GraphQLRouter(
        schema, context_getter=get_graphql_context
    )
    app.include_router(graphql_app, prefix="/graphql")

    return app


app = create_app()


def main() -> None:
    """Run the server with uvicorn (HOST/PORT env vars)."""
    import uvicorn

    uvicorn.run("meetup_backend.app:app", host=get_host(), port=get_port())


if __name__ == "__main__":
    main()
