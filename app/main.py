"""
Receipt points service, FastAPI application entry-point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.store import ReceiptStore

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "%s %s ready (environment=%s)", settings.APP_NAME, VERSION, settings.ENVIRONMENT
    )
    yield
    logger.info("Shutting down with %d receipts in memory", len(app.state.store))


app = FastAPI(
    title="Receipt Points",
    description="Receipt → loyalty points → lookup by id",
    version=VERSION,
    lifespan=lifespan,
)
app.state.store = ReceiptStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Errors are returned as plain text ────────────────────────────────────
@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


@app.exception_handler(RequestValidationError)
async def invalid_input(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(
        "Invalid input on %s: %d error(s), first=%s",
        request.url.path, len(errors), errors[0] if errors else None,
    )
    return PlainTextResponse("Invalid input", status_code=400)


@app.get("/")
async def root():
    return {"service": settings.APP_NAME, "version": VERSION, "status": "running"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


# ── Register API router ──────────────────────────────────────────────────
from app.routers.receipts import router as receipts_router  # noqa: E402

app.include_router(receipts_router, tags=["Receipts"])


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on port %d...", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
