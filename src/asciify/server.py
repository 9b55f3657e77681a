import argparse
import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from starlette.responses import FileResponse, PlainTextResponse

from asciify.config import PipelineConfig
from asciify.converter import image_to_ascii
from asciify.errors import AsciifyError, GENERIC_FAILURE, NoInputError, UploadTooLargeError
from asciify.logging_utils import add_logging_args, configure_logging
from asciify.params import resolve_parameters

logger = logging.getLogger(__name__)

_STATIC_DIR = Path(__file__).parent / "static"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


def create_app(cfg: PipelineConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if cfg is None:
        cfg = PipelineConfig.from_env()

    app = FastAPI(title="asciify", version="0.1.0")
    app.state.config = cfg
    app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")

    @app.exception_handler(AsciifyError)
    async def _asciify_error_handler(request: Request, exc: AsciifyError):
        if exc.status_code >= 500:
            logger.error("Request to %s failed: %s", request.url.path, exc, exc_info=exc)
        else:
            logger.info("Rejected request to %s: %s", request.url.path, exc)
        return PlainTextResponse(exc.public_message, status_code=exc.status_code)

    # Return 400 for malformed requests (e.g. a body FastAPI cannot parse)
    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        return PlainTextResponse(f"Bad request: {exc}", status_code=400)

    @app.exception_handler(Exception)
    async def _unexpected_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return PlainTextResponse(GENERIC_FAILURE, status_code=500)

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(_STATIC_DIR / "index.html")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.post("/ascii", response_class=PlainTextResponse)
    async def ascii_art(
        image: UploadFile | None = File(None),
        width: str | None = None,
        contrast: str | None = None,
        gamma: str | None = None,
        brightness: str | None = None,
        invert: str | None = None,
    ):
        """Convert the uploaded image to ASCII art, returned as plain text."""
        if image is None:
            raise NoInputError()
        params = resolve_parameters(width, contrast, gamma, brightness, invert, cfg=cfg)

        data = await image.read(cfg.max_upload_bytes + 1)
        if not data:
            raise NoInputError()
        if len(data) > cfg.max_upload_bytes:
            raise UploadTooLargeError(cfg.max_upload_bytes)

        logger.info("Converting %s (%d bytes) at width %d", image.filename, len(data), params.width)
        art = await run_in_threadpool(image_to_ascii, data, params, cfg)
        return PlainTextResponse(art)

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(prog="asciify-server", description="Serve the ASCII art converter over HTTP")
    parser.add_argument("--host", default=DEFAULT_HOST, help=f"Bind address (default: {DEFAULT_HOST})")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Port (default: {DEFAULT_PORT})")
    add_logging_args(parser)
    args = parser.parse_args(argv)
    level = configure_logging(args.log_level, args.verbose, args.quiet)

    app = create_app()
    logger.info("ASCII art API listening at http://%s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=logging.getLevelName(level).lower())


if __name__ == "__main__":
    main()
