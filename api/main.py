import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import db, errors, settings
from sync import router as sync_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(errors.AppError)
async def app_error_handler(request: Request, exc: errors.AppError) -> JSONResponse:
    if isinstance(exc, errors.Internal):
        logger.error("internal_error path=%s error=%s", request.url.path, exc.message, exc_info=exc)
    else:
        logger.info("request_failed path=%s status=%s error=%s", request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail()})


app.include_router(sync_router.router, tags=["sync"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
