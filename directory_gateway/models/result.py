"""
Result Models
Outcome of a single call against the Supabase data or auth API
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class QueryResult:
    """Either the returned data or the upstream error message, never both"""
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any) -> "QueryResult":
        return cls(data=data)

    @classmethod
    def failure(cls, error: str) -> "QueryResult":
        return cls(error=error or "Unknown upstream error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def first(self) -> Optional[Dict[str, Any]]:
        """First row of a list result, or None when nothing matched"""
        if isinstance(self.data, list):
            return self.data[0] if self.data else None
        return self.data
