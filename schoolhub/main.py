from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schoolhub.api.v1.android_apks.router import router as android_apks_router
from schoolhub.api.v1.campuses.router import router as campuses_router
from schoolhub.api.v1.chat_preferences.router import router as chat_preferences_router
from schoolhub.api.v1.class_fee_structures.router import router as class_fee_structures_router
from schoolhub.api.v1.fee_templates.router import router as fee_templates_router
from schoolhub.api.v1.fees.router import router as fees_router
from schoolhub.api.v1.health.router import router as health_router
from schoolhub.api.v1.leaves.router import router as leaves_router
from schoolhub.api.v1.locations.router import router as locations_router
from schoolhub.api.v1.parent_feed_controls.router import router as parent_feed_controls_router
from schoolhub.api.v1.payment_trackers.router import router as payment_trackers_router
from schoolhub.api.v1.quiz_sessions.router import router as quiz_sessions_router
from schoolhub.api.v1.student_records.router import router as student_records_router
from schoolhub.api.v1.syllabus.router import router as syllabus_router
from schoolhub.api.v1.user_devices.router import router as user_devices_router
from schoolhub.core.config import settings
from schoolhub.core.logging import configure_logging, get_logger
from schoolhub.core.schemas import ErrorResponse
from schoolhub.db.session import create_all_tables, engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables_on_startup:
        await create_all_tables()
        logger.info("tables_ready")
    yield
    await engine.dispose()


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "Invalid request"))
    return _error(status.HTTP_400_BAD_REQUEST, "; ".join(messages) or "Invalid request")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app() -> FastAPI:
    configure_logging(settings)
    app = FastAPI(title="SchoolHub Backend", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(campuses_router)
    app.include_router(fees_router)
    app.include_router(fee_templates_router)
    app.include_router(class_fee_structures_router)
    app.include_router(payment_trackers_router)
    app.include_router(syllabus_router)
    app.include_router(student_records_router)
    app.include_router(leaves_router)
    app.include_router(parent_feed_controls_router)
    app.include_router(chat_preferences_router)
    app.include_router(user_devices_router)
    app.include_router(android_apks_router)
    app.include_router(quiz_sessions_router)
    app.include_router(locations_router)

    return app


app = create_app()
