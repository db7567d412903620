from contextlib import asynccontextmanager

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsboard import config
from newsboard.api import articles
from newsboard.api import comments as comments_api
from newsboard.api import endpoints as endpoints_api
from newsboard.api import topics as topics_api
from newsboard.api import users as users_api
from newsboard.core.errors import ApiError, Messages, classify
from newsboard.db import pool as db_pool
from newsboard.db import sa as db_sa


logger = logging.getLogger("newsboard.http")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # asyncpg serves queries; SQLAlchemy owns the table definitions
    await db_pool.connect_db()
    await db_sa.init_sa_engine()
    if config.CREATE_TABLES:
        await db_sa.create_tables()
    try:
        yield
    finally:
        await db_sa.close_sa_engine()
        await db_pool.close_db()


app = FastAPI(
    title="newsboard",
    lifespan=lifespan,
    root_path=config.ROOT_PATH,
)
app.include_router(endpoints_api.router)
app.include_router(topics_api.router)
app.include_router(users_api.router)
app.include_router(articles.router)
app.include_router(comments_api.router)


# -----------------------
#  Error rendering: every failure leaves as {"message": ...}
# -----------------------

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    status, message = classify(exc)
    logger.info(
        "Request rejected",
        extra={"event": "request_rejected", "path": request.url.path, "status": status, "reason": message},
    )
    return JSONResponse(status_code=status, content={"message": message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "Malformed request body",
        extra={"event": "request_malformed", "path": request.url.path},
    )
    return JSONResponse(status_code=400, content={"message": Messages.INVALID_SYNTAX})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # An unserved method on a served path is still an unmatched route.
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"message": Messages.PATH_MISSING})
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status, message = classify(exc)
    logger.exception(
        "Unhandled error",
        extra={"event": "request_failed", "path": request.url.path},
    )
    return JSONResponse(status_code=status, content={"message": message})


# Basic logging configuration (can be overridden by server config)
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
