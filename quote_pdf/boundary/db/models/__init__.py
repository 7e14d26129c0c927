"""
Database models package.

Exports:
  - QuoteModel: Quote header row
  - QuoteItemModel: Priced line items
  - QuoteSectionModel: Grouped narrative sections
  - BrandingProfileModel: Issuing company branding

Dependencies: sqlalchemy, quote_pdf.boundary.db.base
System role: Database model definitions for quote records
"""

from quote_pdf.boundary.db.models.quote_model import (
    BrandingProfileModel,
    QuoteItemModel,
    QuoteModel,
    QuoteSectionModel,
)

__all__ = [
    "BrandingProfileModel",
    "QuoteItemModel",
    "QuoteModel",
    "QuoteSectionModel",
]
