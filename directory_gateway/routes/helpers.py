"""
Helper functions shared by the resource handlers
"""

from typing import Any, Dict

from fastapi import HTTPException, status
import structlog

from directory_gateway.models.result import QueryResult

logger = structlog.get_logger(__name__)


def raise_for_error(result: QueryResult, message: str, **context) -> None:
    """Log an upstream failure and surface it as a generic 500"""
    if not result.ok:
        logger.error(message, error=result.error, **context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message
        )


def first_or_404(result: QueryResult, not_found: str) -> Dict[str, Any]:
    """Single row of a successful result, 404 when nothing matched"""
    row = result.first()
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
    return row


def created_row(result: QueryResult, message: str, **context) -> Dict[str, Any]:
    """Row returned by an insert; an empty representation counts as a failure"""
    raise_for_error(result, message, **context)
    row = result.first()
    if row is None:
        logger.error(message, error="Insert returned no rows", **context)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message
        )
    return row
