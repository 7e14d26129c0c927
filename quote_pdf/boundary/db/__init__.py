"""
Database boundary layer: ORM models, CRUD operations, connection management
and the quote data source.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - QuoteModel, QuoteItemModel, QuoteSectionModel, BrandingProfileModel
  - quote_crud, quote_item_crud, quote_section_crud, branding_profile_crud
  - QuoteDataSource: Typed lookups used by the rendering pipeline

Dependencies: sqlalchemy, quote_pdf.configs
System role: Database adapter providing read access to quote records
"""

from quote_pdf.boundary.db.base import Base, TimestampMixin, UUIDMixin
from quote_pdf.boundary.db.connection import get_async_engine, get_async_session_factory
from quote_pdf.boundary.db.models import (
    BrandingProfileModel,
    QuoteItemModel,
    QuoteModel,
    QuoteSectionModel,
)
from quote_pdf.boundary.db.CRUD import (
    BaseCRUD,
    branding_profile_crud,
    quote_crud,
    quote_item_crud,
    quote_section_crud,
)
from quote_pdf.boundary.db.quote_data_source import QuoteDataSource

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "get_async_engine",
    "get_async_session_factory",
    "BrandingProfileModel",
    "QuoteItemModel",
    "QuoteModel",
    "QuoteSectionModel",
    "BaseCRUD",
    "branding_profile_crud",
    "quote_crud",
    "quote_item_crud",
    "quote_section_crud",
    "QuoteDataSource",
]
