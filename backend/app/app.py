import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .config import load_settings
from .routes.generate import router as generate_router
from .routes.health import router as health_router
from .routes.refine import router as refine_router
from .services.completion import CompletionClient


def configure_logging(level: str) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def create_app() -> FastAPI:
    # Load environment variables from .env if present
    if os.getenv("DOTENV_DISABLED", "false").lower() not in {"1", "true", "yes"}:
        load_dotenv()

    # Read once; handlers only see this snapshot
    settings = load_settings()
    configure_logging(settings.log_level)

    completion_client = CompletionClient(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await completion_client.aclose()

    app = FastAPI(title="AI Website Generator API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.completion_client = completion_client

    # CORS
    cors_origins = settings.cors_allow_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins != ["*"] else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(health_router, prefix="/api")
    app.include_router(generate_router, prefix="/api")
    app.include_router(refine_router, prefix="/api")

    logging.getLogger(__name__).info(
        "website generator ready model=%s provider=%s", settings.model, settings.provider_label
    )
    return app
