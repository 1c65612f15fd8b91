"""FastAPI main application."""

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..clients.fetch_client import FetchClient
from ..config import API_HOST, API_PORT, CORS_ORIGINS, MAX_REQUEST_SIZE
from ..logging import setup_logging, get_logger
from ..service import UnresolvableURLError, unaffiliate
from .models import ErrorResponse, HealthResponse, UnaffiliateRequest, UnaffiliateResponse

# Setup logging
setup_logging()
logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="LinkPure",
    description="Removes tracking and affiliate parameters from shopping and video links",
    version="0.1.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Client will be initialized lazily on first request
_fetch_client: FetchClient | None = None


def get_fetch_client() -> FetchClient:
    """Get or create the shared HTTP client."""
    global _fetch_client
    if _fetch_client is None:
        _fetch_client = FetchClient()
    return _fetch_client


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(status="ok")


@app.post(
    "/api/unaffiliate",
    response_model=UnaffiliateResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def unaffiliate_url(request: Request, client: FetchClient = Depends(get_fetch_client)):
    """
    Clean a submitted link.

    Takes ``{"url": ...}`` and returns the cleaned URL with the detected
    platform. Redirects are resolved server-side where the platform needs it.
    """
    body = await request.body()
    if len(body) > MAX_REQUEST_SIZE:
        logger.warning(f"Rejected request body of {len(body)} bytes")
        return error_response(413, "Request body too large")

    try:
        payload = UnaffiliateRequest.model_validate_json(body)
        logger.info(f"Unaffiliate request: url='{payload.url[:200]}'")

        result = await run_in_threadpool(unaffiliate, payload.url, client)

        return UnaffiliateResponse(
            url=result.url,
            was_youtube_redirect=result.was_youtube_redirect,
            platform=result.platform,
        )

    except UnresolvableURLError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.error(f"Error in unaffiliate endpoint: {e}", exc_info=True)
        return error_response(500, "Failed to process URL")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
