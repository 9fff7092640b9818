import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .routes import ROUTES, Route, build_router

logger = logging.getLogger(__name__)


def create_app(
    routes: tuple[Route, ...] = ROUTES, settings: Settings | None = None
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log the route table on startup"""
        for route in routes:
            logger.info("Serving %s %s (%s)", route.method, route.path, route.name)
        yield

    # No docs, schema or slash redirects: only the route table answers
    app = FastAPI(
        title=settings.title,
        version=settings.version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.include_router(build_router(routes))

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        response = await call_next(request)
        logger.info(
            "%s %s -> %d", request.method, request.url.path, response.status_code
        )
        return response

    @app.exception_handler(StarletteHTTPException)
    async def not_found(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is still a routing miss
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            exc = StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return await http_exception_handler(request, exc)

    return app


app = create_app()
