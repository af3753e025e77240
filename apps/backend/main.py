from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
from contextlib import asynccontextmanager
import logging
import traceback

# app.rate_limit reads its limits at import time
load_dotenv()

from app.config import Capabilities, get_env_presence
from app.extract import router as extract_router
from app.rate_limit import limiter
from slowapi.errors import RateLimitExceeded
from slowapi import _rate_limit_exceeded_handler
from crawler.plugins.registry import get_plugin_registry

logging.basicConfig(level=Capabilities.get_log_level())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application lifecycle events."""
    env = Capabilities.get_env()
    if env == "dev":
        logger.info("[jobfetch] env: JOBFETCH_ENV=dev (detailed errors enabled)")
    else:
        logger.info(f"[jobfetch] env: JOBFETCH_ENV={env}")

    registry = get_plugin_registry()
    logger.info(f"[jobfetch] {len(registry.list_plugins())} extraction plugins registered")

    yield


app = FastAPI(title="jobfetch API", version="0.1.0", lifespan=lifespan)

# Add rate limiter state
app.state.limiter = limiter

# Rate limit exceeded handler
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request envelopes get the same error shape as extraction failures."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Invalid request body",
            "details": "; ".join(
                f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
                for err in exc.errors()
            )
        }
    )


# Error masking middleware
@app.middleware("http")
async def error_masking_middleware(request: Request, call_next):
    """Mask detailed errors in production; show full errors in dev."""
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        is_dev = Capabilities.is_dev()

        # Log the full error
        logger.error(f"Unhandled error: {str(e)}")
        if is_dev:
            logger.error(traceback.format_exc())

        # Return masked or detailed error based on environment
        if is_dev:
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "details": str(e),
                    "traceback": traceback.format_exc()
                }
            )
        else:
            return JSONResponse(
                status_code=500,
                content={
                    "error": "An internal error occurred. Please try again later."
                }
            )


app.add_middleware(
    CORSMiddleware,
    allow_origins=Capabilities.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(extract_router)


@app.get("/api/healthz")
async def healthz():
    return Capabilities.get_status()


@app.get("/admin/config/env")
async def config_env():
    if not Capabilities.is_dev():
        raise HTTPException(status_code=403, detail="Admin endpoints only available in dev mode")
    return get_env_presence()
