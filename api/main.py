import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contacts import router as contacts_router
from core import config, db
from core.errors import register_error_handlers
from core.logging_setup import configure_logging, install_access_log

logger = logging.getLogger(__name__)

config.load_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(config.log_level())
    # One pool per process, owned by the app and handed to routes via Depends.
    app.state.pool = await db.create_pool()
    logger.info("contacts_api_started")
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None
        logger.info("contacts_api_stopped")


app = FastAPI(
    title="Contacts API",
    version="1.0.0",
    description="A simple CRUD API over a contacts table.",
    docs_url="/api-docs",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)
install_access_log(app)
register_error_handlers(app)

app.include_router(contacts_router.router, tags=["contacts"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/health/ready")
async def ready(request: Request):
    pool = getattr(request.app.state, "pool", None)
    if pool is None or not await db.check_connection(pool):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready"}


@app.get("/")
def root() -> dict:
    return {"message": "contacts api"}


if __name__ == "__main__":
    uvicorn.run(app, host=config.listen_host(), port=config.listen_port())
