import logging
import logging.config

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from flatdocs.config import get_config
from flatdocs.models.config import EngineConfig
from flatdocs.routers.pages import limiter, router as pages_router
from flatdocs.routers.search import router as search_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="flatdocs – Flat-file Documentation API",
    description="Serves the page tree, single pages and keyword search over a directory of Markdown documents.",
    version="1.0.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(pages_router)
app.include_router(search_router)


@app.get("/", summary="Health check")
def root(config: EngineConfig = Depends(get_config)) -> dict:
    """Report whether the configured content directory is available."""
    return {"status": "ok", "content_dir_exists": config.content_dir.is_dir()}
