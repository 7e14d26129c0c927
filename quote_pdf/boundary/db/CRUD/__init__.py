"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from quote_pdf.boundary.db.CRUD import quote_crud, quote_item_crud

    quote = await quote_crud.get_by_id(db, quote_id)
    items = await quote_item_crud.list_for_quote(db, quote_id)
"""

from quote_pdf.boundary.db.CRUD.base_crud import BaseCRUD
from quote_pdf.boundary.db.CRUD.quote_crud import (
    BrandingProfileCRUD,
    QuoteCRUD,
    QuoteItemCRUD,
    QuoteSectionCRUD,
    branding_profile_crud,
    quote_crud,
    quote_item_crud,
    quote_section_crud,
)

__all__ = [
    "BaseCRUD",
    "BrandingProfileCRUD",
    "QuoteCRUD",
    "QuoteItemCRUD",
    "QuoteSectionCRUD",
    "branding_profile_crud",
    "quote_crud",
    "quote_item_crud",
    "quote_section_crud",
]
