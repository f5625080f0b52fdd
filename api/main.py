import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from auth import router as auth_router
from bikes import router as bikes_router
from contact import router as contact_router
from core import db
from core.error_handlers import register_error_handlers
from core.settings import Settings, load_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool(app.state.settings)
    try:
        yield
    finally:
        await db.close_pool()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings

    # Only the known frontends may make credentialed cross-origin calls.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(bikes_router.router, tags=["bikes"])
    app.include_router(contact_router.router, tags=["contact"])

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Backend server is running."

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    logger.info("starting server port=%s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
