"""System endpoints such as status and root."""
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter

from combofinder.constants import API_VERSION, SERVICE_NAME, SPELLBOOK_PROXY_PATH

router = APIRouter(tags=["system"])


@router.get("/api/v1/status", response_model=Dict[str, Any])
async def api_status() -> Dict[str, Any]:
    """API status endpoint, including the upstreams this instance talks to."""
    from config import settings

    return {
        "success": True,
        "status": "online",
        "timestamp": datetime.utcnow().isoformat(),
        "version": API_VERSION,
        "upstreams": {
            "card_database": settings.scryfall_base_url,
            "combo_proxy": f"{settings.proxy_base_url.rstrip('/')}{SPELLBOOK_PROXY_PATH}",
            "combo_database": settings.spellbook_graphql_url,
        },
    }


@router.get("/", response_model=Dict[str, Any])
async def root() -> Dict[str, Any]:
    """Root endpoint."""
    return {
        "success": True,
        "message": SERVICE_NAME,
        "version": API_VERSION,
        "docs": "/docs",
        "status": "/api/v1/status",
        "proxy": SPELLBOOK_PROXY_PATH,
    }


@router.get("/health", response_model=Dict[str, Any])
async def health_check() -> Dict[str, Any]:
    """Health check endpoint expected by hosting environments."""
    return {
        "success": True,
        "status": "healthy",
        "message": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "service": SERVICE_NAME,
    }
