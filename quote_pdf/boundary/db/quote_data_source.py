"""
Quote data source.

Reads everything needed to render one quote and reports each lookup as a
typed outcome (found / not_found / failed) instead of raising, so the
normalizer decides which failures are fatal. After the quote itself is
loaded, line items, sections and the branding profile are read
concurrently, each on its own session.

Dependencies: sqlalchemy, quote_pdf.boundary.db.CRUD
System role: Data store boundary for the rendering pipeline
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quote_pdf.boundary.db.CRUD import (
    branding_profile_crud,
    quote_crud,
    quote_item_crud,
    quote_section_crud,
)
from quote_pdf.core.rendering.models import Lookup, QuoteBundle

logger = logging.getLogger(__name__)

Query = Callable[[AsyncSession], Awaitable[Any]]


class QuoteDataSource:
    """Typed lookups over the quote tables."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Initialize data source.

        Args:
            session_factory: Factory producing one AsyncSession per lookup
        """
        self._session_factory = session_factory

    async def _lookup(self, resource: str, query: Query) -> Lookup:
        try:
            async with self._session_factory() as session:
                value = await query(session)
        except (SQLAlchemyError, OSError, asyncio.TimeoutError) as e:
            logger.warning(
                "%s:_lookup - %s lookup failed: %s",
                __name__,
                resource,
                e,
                extra={"resource": resource, "error_type": type(e).__name__},
            )
            return Lookup.failed(f"{type(e).__name__}: {e}")
        if value is None:
            return Lookup.not_found()
        return Lookup.found(value)

    async def get_quote(self, quote_id: UUID) -> Lookup:
        """Quote row as a dict."""

        async def query(session: AsyncSession) -> dict[str, Any] | None:
            row = await quote_crud.get_by_id(session, quote_id)
            return row.as_dict() if row else None

        return await self._lookup("quote", query)

    async def get_line_items(self, quote_id: UUID) -> Lookup:
        """Line items ordered by position (found with [] when there are none)."""

        async def query(session: AsyncSession) -> list[dict[str, Any]]:
            rows = await quote_item_crud.list_for_quote(session, quote_id)
            return [row.as_dict() for row in rows]

        return await self._lookup("line_items", query)

    async def get_sections(self, quote_id: UUID) -> Lookup:
        """Sections ordered by position (found with [] when there are none)."""

        async def query(session: AsyncSession) -> list[dict[str, Any]]:
            rows = await quote_section_crud.list_for_quote(session, quote_id)
            return [row.as_dict() for row in rows]

        return await self._lookup("sections", query)

    async def get_branding(self, profile_id: UUID | None) -> Lookup:
        """Branding profile row; not_found when the quote references none."""
        if profile_id is None:
            return Lookup.not_found()

        async def query(session: AsyncSession) -> dict[str, Any] | None:
            row = await branding_profile_crud.get_by_id(session, profile_id)
            return row.as_dict() if row else None

        return await self._lookup("branding_profile", query)

    async def fetch(self, quote_id: UUID) -> QuoteBundle:
        """
        Load a quote and every sub-resource it needs.

        Args:
            quote_id: Quote primary key

        Returns:
            QuoteBundle: One Lookup per resource. When the quote itself is
            missing or failed, sub-resources are not queried.
        """
        quote = await self.get_quote(quote_id)
        if not quote.ok:
            return QuoteBundle(quote=quote, line_items=Lookup.not_found())

        line_items, sections, branding = await asyncio.gather(
            self.get_line_items(quote_id),
            self.get_sections(quote_id),
            self.get_branding(quote.value.get("branding_profile_id")),
        )
        logger.debug(
            "%s:fetch - Loaded quote %s",
            __name__,
            quote_id,
            extra={
                "line_items": line_items.status.value,
                "sections": sections.status.value,
                "branding": branding.status.value,
            },
        )
        return QuoteBundle(
            quote=quote,
            line_items=line_items,
            sections=sections,
            branding=branding,
        )
