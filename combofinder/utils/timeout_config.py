"""Centralized httpx timeout configuration for outbound calls."""
import httpx


def get_external_timeout():
    """Get an httpx timeout configuration for the upstream combo database."""
    from config import settings

    return httpx.Timeout(
        connect=settings.external_api_connect_timeout,
        read=settings.external_api_timeout,
        write=settings.external_api_write_timeout,
        pool=5.0
    )

def get_quick_timeout():
    """Get a quick timeout for card database lookups."""
    return httpx.Timeout(connect=5.0, read=15.0, write=5.0, pool=3.0)

def get_external_client():
    """Get an httpx.AsyncClient for proxy and upstream combo calls."""
    return httpx.AsyncClient(timeout=get_external_timeout())

def get_quick_client():
    """Get an httpx.AsyncClient with quick timeouts for card database calls."""
    return httpx.AsyncClient(timeout=get_quick_timeout())
