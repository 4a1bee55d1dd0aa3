from directory_gateway.models.directory import (
    MemberWrite, UserWrite, UserProfileCreate, ErrorResponse, Record, RecordList, RecordId
)
from directory_gateway.models.result import QueryResult

__all__ = [
    "MemberWrite",
    "UserWrite",
    "UserProfileCreate",
    "ErrorResponse",
    "Record",
    "RecordList",
    "RecordId",
    "QueryResult",
]
