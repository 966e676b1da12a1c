from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from jinja2 import TemplateError

from newsfront.config import get_settings, require_api_key
from newsfront.exceptions import DecodeError, UpstreamError, UpstreamUnavailable
from newsfront.logging import configure_logging, logger
from newsfront.models.common import ErrorResponse
from newsfront.routers.search import router as search_router

ASSETS_DIR = Path(__file__).resolve().parent / "assets"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    require_api_key(settings)
    logger.info("newsfront_started", host=settings.host, port=settings.port)
    yield


# --- FastAPI app ---

app = FastAPI(title="Newsfront", version="0.1.0", lifespan=lifespan)
app.include_router(search_router)
app.mount("/assets", StaticFiles(directory=ASSETS_DIR), name="assets")


# --- Exception handlers ---

def _error_response(request: Request, status_code: int, error_code: str, message: str):
    """JSON body for the /api routes, plain text for the HTML pages."""
    if request.url.path.startswith("/api/"):
        body = ErrorResponse(error_code=error_code, message=message)
        return JSONResponse(status_code=status_code, content=body.model_dump())
    return PlainTextResponse(message, status_code=status_code)


@app.exception_handler(UpstreamUnavailable)
async def upstream_unavailable_handler(request: Request, exc: UpstreamUnavailable):
    return _error_response(request, 503, "upstream_unavailable", "Service not available")


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    return _error_response(request, 502, "upstream_error", "No results or API error")


@app.exception_handler(DecodeError)
async def decode_error_handler(request: Request, exc: DecodeError):
    return _error_response(request, 500, "decode_error", "Error processing news data")


@app.exception_handler(TemplateError)
async def template_error_handler(request: Request, exc: TemplateError):
    logger.error("template_render_failed", path=request.url.path, error=str(exc))
    return PlainTextResponse("Internal server error", status_code=500)


def run():
    settings = get_settings()
    uvicorn.run(
        "newsfront.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
