"""
FastAPI Dependencies
Supabase client access and bearer token authentication
"""

from typing import Annotated, Any, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import structlog

from directory_gateway.utils.supabase_client import SupabaseClient

logger = structlog.get_logger(__name__)

# Missing or malformed headers are rejected by get_current_user, not by the scheme
security = HTTPBearer(auto_error=False)


def get_supabase(request: Request) -> SupabaseClient:
    """Supabase client built in the application lifespan"""
    return request.app.state.supabase


async def get_current_user(
    request: Request,
    supabase: Annotated[SupabaseClient, Depends(get_supabase)],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Any:
    """
    Resolve the caller from a Supabase access token

    Args:
        request: Incoming request, receives the user on request.state
        supabase: Supabase client
        credentials: HTTP Authorization header with Bearer token

    Returns:
        The Supabase user

    Raises:
        HTTPException: 401 if the token is missing or rejected, 500 if verification fails unexpectedly
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        result = await supabase.verify_token(credentials.credentials)
    except Exception as e:
        logger.error("Unexpected error in token verification", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )

    if not result.ok:
        logger.warning("Error verifying token", error=result.error)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    request.state.user = result.data
    return result.data


# Type aliases for cleaner dependency injection
SupabaseDep = Annotated[SupabaseClient, Depends(get_supabase)]
CurrentUser = Annotated[Any, Depends(get_current_user)]
