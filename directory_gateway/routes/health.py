"""
Health check routes for the directory gateway
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from directory_gateway import __version__
from directory_gateway.utils.dependencies import SupabaseDep

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint"""
    return "API is running!"


@router.get("/health")
async def health_check(supabase: SupabaseDep):
    """Health check endpoint"""
    return {
        "service": "directory-gateway",
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "supabase": "configured" if supabase.is_available() else "not_configured",
    }
