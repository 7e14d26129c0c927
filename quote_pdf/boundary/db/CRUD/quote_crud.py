"""
Quote CRUD operations.

Point lookups for quotes and branding profiles, ordered list queries for
line items and sections of a quote.

Dependencies: sqlalchemy, quote_pdf.boundary.db
System role: Read access to quote records
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quote_pdf.boundary.db.CRUD.base_crud import BaseCRUD
from quote_pdf.boundary.db.models.quote_model import (
    BrandingProfileModel,
    QuoteItemModel,
    QuoteModel,
    QuoteSectionModel,
)


class QuoteCRUD(BaseCRUD[QuoteModel]):
    """CRUD operations for quotes."""

    def __init__(self) -> None:
        super().__init__(QuoteModel)


class QuoteChildCRUD(BaseCRUD):
    """CRUD for rows that belong to a quote and carry a position."""

    async def list_for_quote(self, session: AsyncSession, quote_id: UUID) -> Sequence:
        """
        All rows of one quote ordered by position.

        Args:
            session: Async database session
            quote_id: Owning quote

        Returns:
            Sequence of model instances (empty when the quote has none)
        """
        stmt = (
            select(self.model)
            .where(self.model.quote_id == quote_id)
            .order_by(self.model.position, self.model.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


class QuoteItemCRUD(QuoteChildCRUD):
    """CRUD operations for quote line items."""

    def __init__(self) -> None:
        super().__init__(QuoteItemModel)


class QuoteSectionCRUD(QuoteChildCRUD):
    """CRUD operations for quote sections."""

    def __init__(self) -> None:
        super().__init__(QuoteSectionModel)


class BrandingProfileCRUD(BaseCRUD[BrandingProfileModel]):
    """CRUD operations for branding profiles."""

    def __init__(self) -> None:
        super().__init__(BrandingProfileModel)


quote_crud = QuoteCRUD()
quote_item_crud = QuoteItemCRUD()
quote_section_crud = QuoteSectionCRUD()
branding_profile_crud = BrandingProfileCRUD()
