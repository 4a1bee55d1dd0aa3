"""
Member routes
"""

from typing import Optional

from fastapi import Query, Response, status
import structlog

from directory_gateway.models.directory import MemberWrite, RecordId
from directory_gateway.routes.helpers import raise_for_error, first_or_404, created_row
from directory_gateway.utils.dependencies import SupabaseDep

logger = structlog.get_logger(__name__)

TABLE = "members"


async def list_members(
    supabase: SupabaseDep,
    group_id: Optional[RecordId] = Query(None, alias="groupId", description="Only members of this group")
):
    """List members, optionally filtered by group"""
    result = await supabase.select(TABLE, filters={"group_id": group_id})
    raise_for_error(result, "Error fetching members", group_id=group_id)
    return result.data


async def create_member(member: MemberWrite, supabase: SupabaseDep):
    """Add a member"""
    result = await supabase.insert(TABLE, member.to_row())
    row = created_row(result, "Error adding member")
    logger.info("Member added", member_id=row.get("id"), group_id=row.get("group_id"))
    return row


async def update_member(member_id: RecordId, member: MemberWrite, supabase: SupabaseDep):
    """Update a member"""
    result = await supabase.update(TABLE, member.to_row(), member_id)
    raise_for_error(result, "Error updating member", member_id=member_id)
    return first_or_404(result, "Member not found")


async def delete_member(member_id: RecordId, supabase: SupabaseDep):
    """Delete a member"""
    result = await supabase.delete(TABLE, member_id)
    raise_for_error(result, "Error deleting member", member_id=member_id)
    logger.info("Member deleted", member_id=member_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
