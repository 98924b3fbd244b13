import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import settings
from app.core.supabase_client import get_supabase_admin_client, get_supabase_public_client
from app.utils.exceptions import AppError
from app.api.endpoints import (
    courses,
    enrollments,
    certificates,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pair of client handles for the process lifetime
    app.state.supabase_public = get_supabase_public_client(settings)
    app.state.supabase_admin = get_supabase_admin_client(settings)
    logger.info(f"{settings.APP_NAME} started")
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


def get_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_ORIGIN],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Register health endpoint
    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    def health_check() -> str:
        return "API KursusKu berjalan ✅"

    # API routers
    api_router = APIRouter(prefix=settings.API_PREFIX)

    api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
    api_router.include_router(enrollments.router, tags=["enrollments"])
    api_router.include_router(certificates.router, prefix="/certificates", tags=["certificates"])

    app.include_router(api_router)

    return app


app = get_application()
