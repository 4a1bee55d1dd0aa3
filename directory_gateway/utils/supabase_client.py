"""
Supabase Client Configuration
Table queries and token verification against the hosted Supabase project
"""

from typing import Any, Callable, Dict, Optional

import httpx
import structlog
from fastapi.concurrency import run_in_threadpool
from supabase import AuthError, Client, PostgrestAPIError, create_client

from directory_gateway.models.result import QueryResult

logger = structlog.get_logger(__name__)


class SupabaseClient:
    """Supabase client wrapper returning QueryResult values instead of raising"""

    def __init__(self, url: str = "", key: str = "", client: Optional[Client] = None):
        self.url = url
        self.key = key
        self.client: Optional[Client] = client

        if self.client is None:
            if self.url and self.key:
                self.client = create_client(self.url, self.key)
                logger.info("Supabase client initialized", url=self.url)
            else:
                logger.warning("Supabase credentials not found in environment")

    @classmethod
    def from_config(cls, config) -> "SupabaseClient":
        return cls(url=config.supabase_url, key=config.supabase_anon_key)

    def is_available(self) -> bool:
        """Check if Supabase is available and configured"""
        return self.client is not None

    async def _execute(self, build: Callable[[Client], Any], table: str) -> QueryResult:
        if not self.client:
            return QueryResult.failure("Supabase client not available")

        client = self.client
        try:
            response = await run_in_threadpool(lambda: build(client).execute())
        except PostgrestAPIError as e:
            logger.debug("PostgREST error", table=table, error=str(e))
            return QueryResult.failure(str(e))
        except httpx.HTTPError as e:
            logger.debug("Supabase transport error", table=table, error=str(e))
            return QueryResult.failure(f"{type(e).__name__}: {e}")
        except Exception as e:
            logger.error("Unexpected Supabase error", table=table, error=str(e), exc_info=True)
            return QueryResult.failure(f"{type(e).__name__}: {e}")

        return QueryResult.success(response.data)

    async def select(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[Dict[str, Any]] = None
    ) -> QueryResult:
        """
        Select rows from a table

        Args:
            table: Table name
            columns: PostgREST column list, may embed related tables
            filters: Column equality filters; None values are skipped

        Returns:
            QueryResult: list of rows or the upstream error
        """
        def build(client: Client):
            query = client.table(table).select(columns)
            for column, value in (filters or {}).items():
                if value is not None:
                    query = query.eq(column, value)
            return query

        return await self._execute(build, table)

    async def insert(self, table: str, row: Dict[str, Any]) -> QueryResult:
        """Insert one row and return the stored representation"""
        return await self._execute(lambda client: client.table(table).insert(row), table)

    async def update(self, table: str, row: Dict[str, Any], record_id: Any) -> QueryResult:
        """Update the row with the given id and return the updated rows"""
        return await self._execute(
            lambda client: client.table(table).update(row).eq("id", record_id),
            table
        )

    async def delete(self, table: str, record_id: Any) -> QueryResult:
        """Delete the row with the given id"""
        return await self._execute(
            lambda client: client.table(table).delete().eq("id", record_id),
            table
        )

    async def verify_token(self, token: str) -> QueryResult:
        """
        Verify a user access token with Supabase Auth

        Args:
            token: JWT access token

        Returns:
            QueryResult: the authenticated user, or a failure when the token is rejected

        Raises:
            RuntimeError: If the client is not configured
        """
        if not self.client:
            raise RuntimeError("Supabase client not available")

        client = self.client
        try:
            response = await run_in_threadpool(client.auth.get_user, token)
        except AuthError as e:
            return QueryResult.failure(str(e) or "Invalid token")

        user = getattr(response, "user", None) if response is not None else None
        if user is None:
            return QueryResult.failure("No user for token")

        return QueryResult.success(user)
