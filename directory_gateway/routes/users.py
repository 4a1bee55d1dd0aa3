"""
User routes
"""

from fastapi import Response, status
import structlog

from directory_gateway.models.directory import RecordId, UserWrite
from directory_gateway.routes.helpers import raise_for_error, first_or_404, created_row
from directory_gateway.utils.dependencies import SupabaseDep

logger = structlog.get_logger(__name__)

TABLE = "users"

# Embeds each user's rows from user_profiles through the user_id foreign key
WITH_PROFILES = "*, user_profiles(*)"


async def list_users(supabase: SupabaseDep):
    """List all users"""
    result = await supabase.select(TABLE)
    raise_for_error(result, "Error fetching users")
    return result.data


async def create_user(user: UserWrite, supabase: SupabaseDep):
    """Create a user"""
    result = await supabase.insert(TABLE, user.to_row())
    row = created_row(result, "Error creating user")
    logger.info("User created", user_id=row.get("id"))
    return row


async def update_user(user_id: RecordId, user: UserWrite, supabase: SupabaseDep):
    """Update a user"""
    result = await supabase.update(TABLE, user.to_row(), user_id)
    raise_for_error(result, "Error updating user", user_id=user_id)
    return first_or_404(result, "User not found")


async def delete_user(user_id: RecordId, supabase: SupabaseDep):
    """Delete a user"""
    result = await supabase.delete(TABLE, user_id)
    raise_for_error(result, "Error deleting user", user_id=user_id)
    logger.info("User deleted", user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_users_with_profiles(supabase: SupabaseDep):
    """
    List all users joined with their profiles

    Requires a valid Supabase access token.
    """
    result = await supabase.select(TABLE, columns=WITH_PROFILES)
    raise_for_error(result, "Error fetching user profiles")
    return result.data
