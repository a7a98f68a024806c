"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import auth, posts, stats, users
from src.config import get_settings
from src.database import Database
from src.exceptions import BlogApiError, NotFound, Unauthorized
from src.logging_config import setup_logging

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    database = Database(settings.database_url)
    database.init()
    app.state.database = database
    yield
    database.dispose()


app = FastAPI(
    title="Bloglist API",
    description="Blog post links with user accounts and ownership",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(BlogApiError)
async def blog_api_error_handler(request: Request, exc: BlogApiError):
    """Render application errors as ``{"error": message}``."""
    if isinstance(exc, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return JSONResponse(
        status_code=exc.status_code, content={"error": exc.message}, headers=headers
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 with the first problem found."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        parts = [str(part) for part in first["loc"] if part not in ("body", "path", "query")]
        field = ".".join(parts)
        message = f"{field}: {first['msg']}" if field else first["msg"]
    else:
        message = "invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Log unexpected failures and hide their details from the client."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal server error"},
    )


# Register routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(posts.router)
app.include_router(stats.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
