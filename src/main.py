from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.v1.middleware.error_handler import ErrorHandlerMiddleware
from src.api.v1.middleware.logging_middleware import LoggingMiddleware
from src.api.v1.router import v1_router
from src.config import settings
from src.core.conversion.store import SessionStore
from src.core.preferences.theme import ThemeStore
from src.utils.logging import get_logger, setup_logging


def init_state(app: FastAPI) -> None:
    """Attach the long-lived stores to ``app.state``."""
    app.state.session_store = SessionStore()
    app.state.theme_store = ThemeStore(settings.preferences_path, settings.default_theme)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(debug=settings.debug)
    logger = get_logger("startup")
    logger.info(
        "Starting Prompt Format Converter",
        version="0.1.0",
        provider=settings.llm_provider,
        model=settings.llm_model,
    )

    init_state(app)

    yield

    logger.info("Shutting down", session_count=len(app.state.session_store))


def create_app() -> FastAPI:
    app = FastAPI(
        title="Prompt Format Converter",
        description="Convert natural-language prompts into structured data formats",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Middleware is applied in reverse order -- outermost first.
    # 1. CORS (outermost -- handles preflight before anything else)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # 2. Error handler (catches exceptions from inner layers)
    app.add_middleware(ErrorHandlerMiddleware)
    # 3. Request/response logger (innermost -- logs timing around handler)
    app.add_middleware(LoggingMiddleware)

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    uvicorn.run("src.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
