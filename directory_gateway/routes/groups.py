"""
Group routes
"""

from directory_gateway.models.directory import RecordId
from directory_gateway.routes.helpers import raise_for_error, first_or_404
from directory_gateway.utils.dependencies import SupabaseDep

TABLE = "groups"


async def list_groups(supabase: SupabaseDep):
    """List all groups"""
    result = await supabase.select(TABLE)
    raise_for_error(result, "Error fetching groups")
    return result.data


async def get_group(group_id: RecordId, supabase: SupabaseDep):
    """Get a single group"""
    result = await supabase.select(TABLE, filters={"id": group_id})
    raise_for_error(result, "Error fetching group", group_id=group_id)
    return first_or_404(result, "Group not found")
