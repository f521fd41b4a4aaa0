# invoicing/main.py

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from invoicing.api.customers import router as customers_router
from invoicing.api.dashboard import router as dashboard_router
from invoicing.api.invoices import router as invoices_router
from invoicing.api.items import router as items_router
from invoicing.api.settings import router as settings_router
from invoicing.config import get_settings
from invoicing.db.engine import get_engine
from invoicing.db.seed import init_db
from invoicing.errors import RecordValidationError


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; later calls only adjust the level."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        )
    else:
        root_logger.setLevel(level)


configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "Starting %s with database %s",
        settings.app_name,
        settings.database_url,
    )

    engine = get_engine()
    init_db(engine, seed=settings.seed_example_data)
    logger.info("Application startup complete.")

    try:
        yield
    finally:
        engine.dispose()
        logger.info("Application shutdown complete.")


def _validation_response(field, message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": message, "field": field})


settings = get_settings()
app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    lifespan=lifespan,
    redirect_slashes=False,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    # Only the first problem is reported, with its dotted field path.
    error = exc.errors()[0]
    if error.get("type") == "json_invalid":
        # loc holds a character offset into the body, not a field.
        field = None
    else:
        location = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(location) or None
    logger.info("Rejected %s %s: %s %s", request.method, request.url.path, field, error.get("msg"))
    return _validation_response(field, error.get("msg", "Invalid request"))


@app.exception_handler(RecordValidationError)
async def handle_record_validation(request: Request, exc: RecordValidationError):
    logger.info("Rejected %s %s: %s %s", request.method, request.url.path, exc.field, exc.message)
    return _validation_response(exc.field, exc.message)


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(customers_router)
app.include_router(invoices_router)
app.include_router(items_router)
app.include_router(settings_router)
app.include_router(dashboard_router)
