"""
User profile routes
"""

from directory_gateway.models.directory import UserProfileCreate
from directory_gateway.routes.helpers import raise_for_error, created_row
from directory_gateway.utils.dependencies import SupabaseDep

TABLE = "user_profiles"


async def list_profiles(supabase: SupabaseDep):
    result = await supabase.select(TABLE)
    raise_for_error(result, "Error fetching profiles")
    return result.data


async def create_profile(profile: UserProfileCreate, supabase: SupabaseDep):
    result = await supabase.insert(TABLE, profile.to_row())
    return created_row(result, "Error creating profile", user_id=profile.user_id)
