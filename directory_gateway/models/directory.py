"""
Directory data models and schemas
"""

from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# Integer or uuid primary keys, passed through to the data service unchanged
RecordId = Union[int, UUID]


class RowModel(BaseModel):
    """Request body mapped onto a table row"""

    model_config = ConfigDict(populate_by_name=True)

    def to_row(self) -> Dict[str, Any]:
        """Fields present in the request, keyed by column name"""
        return self.model_dump(mode="json", exclude_unset=True, by_alias=False)


class MemberWrite(RowModel):
    """Schema for creating or updating a member"""
    name: Optional[str] = None
    major: Optional[str] = None
    email: Optional[str] = None
    introduction: Optional[str] = None
    courses: Optional[List[str]] = None
    group_id: Optional[RecordId] = Field(None, alias="groupId", description="Group the member belongs to")


class UserWrite(RowModel):
    """Schema for creating or updating a user"""
    name: Optional[str] = None
    major: Optional[str] = None
    email: Optional[str] = None


class UserProfileCreate(RowModel):
    """Schema for creating a user profile"""
    user_id: Optional[RecordId] = None
    introduction: Optional[str] = None
    courses: Optional[List[str]] = None


class ErrorResponse(BaseModel):
    """Body of every non-2xx JSON response"""
    error: str
    details: Optional[List[Dict[str, Any]]] = None


# Records are owned by the data service and relayed unchanged
Record = Dict[str, Any]
RecordList = List[Dict[str, Any]]
