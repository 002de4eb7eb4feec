"""FastAPI application entry point for the Random Combo Finder."""
import logging
import os
import time
import uvicorn
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from combofinder.constants import API_VERSION, SERVICE_NAME
from config import settings
from combofinder.routes import cards, combos, spellbook, system

# Configure logging FIRST (before creating FastAPI app)
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.StreamHandler(),
    ]
)

# Set uvicorn logging level too
uvicorn_logger = logging.getLogger("uvicorn")
uvicorn_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

app = FastAPI(
    title=SERVICE_NAME,
    description="Card autocomplete, random Commander Spellbook combos and the spellbook GraphQL proxy.",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests with timing and response status."""
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000

    logger = logging.getLogger("combofinder.access")
    client_host = request.client.host if request.client else "-"
    logger.info(
        f"{client_host} {request.method} {request.url.path} "
        f"-> {response.status_code} ({process_time:.1f}ms)"
    )

    return response

app.include_router(system.router)
app.include_router(spellbook.router)
app.include_router(cards.router)
app.include_router(combos.router)

__all__ = ["app"]


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Return consistent HTTP error responses."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.status_code,
                "message": exc.detail,
                "timestamp": datetime.utcnow().isoformat(),
            }
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler to avoid leaking stack traces."""
    logging.getLogger(__name__).exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": 500,
                "message": "Internal server error",
                "timestamp": datetime.utcnow().isoformat(),
            }
        },
    )


if __name__ == "__main__":
    uvicorn.run(
        "app:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", settings.port)),
        reload=False,
        log_level=settings.log_level.lower(),
    )
