"""
HTTP Router

FastAPI application exposing read access to the fortunes table:

    GET /                 greeting
    GET /fortunes         every fortune (single scan page)
    GET /fortunes/{id}    one fortune, or 404

The FortuneReadApi is stored on ``app.state`` by create_app() and reaches the
route functions through a dependency. Route functions are plain ``def`` so
FastAPI runs the blocking boto3 calls in its worker thread pool.
"""

import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import ServerConfig
from ..exceptions import FortuneApiError
from ..handlers import FortuneReadApi
from ..models import Fortune

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {"message": "fortune not found"}

CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Origin", "Content-Length", "Content-Type"]

# Optional sign followed by decimal digits
_FORTUNE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Ids are signed 64-bit integers
MIN_FORTUNE_ID = -2 ** 63
MAX_FORTUNE_ID = 2 ** 63 - 1

router = APIRouter()


def get_fortune_read_api(request: Request) -> FortuneReadApi:
    """Dependency returning the FortuneReadApi stored on app.state during create_app()."""
    return request.app.state.fortune_read_api


def parse_fortune_id(raw_id: str) -> Optional[int]:
    """Parse a path id as a signed 64-bit integer. Returns None when it is not one."""
    if not _FORTUNE_ID_PATTERN.fullmatch(raw_id):
        return None
    try:
        fortune_id = int(raw_id)
    except ValueError:
        # more digits than int() accepts
        return None
    if not MIN_FORTUNE_ID <= fortune_id <= MAX_FORTUNE_ID:
        return None
    return fortune_id


def not_found() -> JSONResponse:
    """The 404 response shared by every failed lookup."""
    return JSONResponse(status_code=404, content=NOT_FOUND_BODY)


@router.get("/")
def read_root():
    """Greeting."""
    return {"message": "Hello"}


@router.get("/fortunes", response_model=List[Fortune])
def list_fortunes(read_api: FortuneReadApi = Depends(get_fortune_read_api)):
    """Every fortune in the table. Backend failures yield an empty list."""
    try:
        return read_api.scan()
    except FortuneApiError as e:
        logger.error(f"Couldn't get fortunes: {e}")
        return []


@router.get("/fortunes/{fortune_id}", response_model=Fortune)
def get_fortune(fortune_id: str, read_api: FortuneReadApi = Depends(get_fortune_read_api)):
    """
    One fortune by id.

    An id that is not a 64-bit integer, a missing fortune and a backend
    failure all answer 404 with the same body.
    """
    parsed_id = parse_fortune_id(fortune_id)
    if parsed_id is None:
        logger.info(f"Couldn't convert id {fortune_id[:40]!r} to a 64-bit integer")
        return not_found()

    try:
        return read_api.get(parsed_id)
    except FortuneApiError as e:
        logger.info(f"Failed to get fortune {parsed_id}: {e}")
        return not_found()


def create_app(read_api: FortuneReadApi, server_config: Optional[ServerConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        read_api: Read API over the fortunes table
        server_config: Server settings; the CORS origin is taken from here

    Returns:
        Configured FastAPI application
    """
    server_config = server_config or ServerConfig()

    app = FastAPI(
        title="Fortune API",
        description="Read access to the fortune-of-the-day table",
    )
    app.state.fortune_read_api = read_api

    # Browsers may only call the API from the one configured origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[server_config.allowed_origin],
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.include_router(router)

    logger.info(f"CORS origin: {server_config.allowed_origin}")
    return app
