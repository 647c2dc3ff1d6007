from __future__ import annotations

import asyncio
import logging
import time
from contextlib import asynccontextmanager, suppress

import uvicorn
from fastapi import FastAPI, Request

from bootstrap import service as bootstrap_service
from core import config, db, errors
from core.logging_config import setup_logging
from departments import router as departments_router
from employees import router as employees_router

setup_logging()
logger = logging.getLogger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, shared with handlers through app.state.
    app.state.pool = await db.create_pool()
    app.state.bootstrap_task = None
    if config.bootstrap_blocking():
        await bootstrap_service.run(app.state.pool)
    else:
        # Requests may arrive before the tables exist.
        app.state.bootstrap_task = asyncio.create_task(bootstrap_service.run(app.state.pool))
    try:
        yield
    finally:
        task = app.state.bootstrap_task
        if task is not None and not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        await db.close_pool(app.state.pool)
        app.state.pool = None


app = FastAPI(
    title="Employee Directory API",
    lifespan=lifespan,
    redirect_slashes=False,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

errors.register(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        ms = (time.time() - start) * 1000
        logger.info("%s %s %s %.3f ms", request.method, request.url.path, response.status_code, ms)
        return response
    except Exception:
        ms = (time.time() - start) * 1000
        logger.exception("Unhandled error %s %s (%.3f ms)", request.method, request.url.path, ms)
        raise


app.include_router(employees_router.router, tags=["employees"])
app.include_router(departments_router.router, tags=["departments"])


def run() -> None:
    logger.info("Server is running on port %s", config.port())
    uvicorn.run(app, host=config.host(), port=config.port(), log_config=None)


if __name__ == "__main__":
    run()
