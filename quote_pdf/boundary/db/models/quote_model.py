"""
Quote ORM models.

Relational shape of a quote: the quote header row, its priced line items,
optional grouped sections and the branding profile it refers to.

Dependencies: sqlalchemy, quote_pdf.boundary.db.base
System role: Persistence model read by the quote data source
"""

import uuid
from datetime import date
from decimal import Decimal
from typing import Any

from sqlalchemy import JSON, Date, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from quote_pdf.boundary.db.base import Base, TimestampMixin, UUIDMixin


class BrandingProfileModel(Base, UUIDMixin, TimestampMixin):
    """
    Branding profile of an issuing company.

    Attributes:
        company_name: Display name printed in the masthead
        accent_color / secondary_color: Hex colours (#RRGGBB)
        logo_url / background_url: Image references
        contact_block, footer_text, terms_text: Free text blocks
    """

    __tablename__ = "branding_profiles"

    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    accent_color: Mapped[str | None] = mapped_column(String(16), nullable=True)
    secondary_color: Mapped[str | None] = mapped_column(String(16), nullable=True)
    logo_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    background_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    contact_block: Mapped[str | None] = mapped_column(Text, nullable=True)
    footer_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    terms_text: Mapped[str | None] = mapped_column(Text, nullable=True)


class QuoteModel(Base, UUIDMixin, TimestampMixin):
    """
    Quote header row.

    Relationships:
        branding_profile_id: Optional many-to-one with BrandingProfileModel
        (SET NULL on profile deletion)
    """

    __tablename__ = "quotes"

    reference: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    customer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    customer_company: Mapped[str | None] = mapped_column(String(255), nullable=True)
    customer_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    issue_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    valid_until: Mapped[date | None] = mapped_column(Date, nullable=True)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="GBP")
    tax_rate: Mapped[Decimal] = mapped_column(
        Numeric(5, 2),
        nullable=False,
        default=Decimal("0"),
        doc="Tax rate as a percentage (20 = 20%)",
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Per-quote presentation overrides
    accent_color: Mapped[str | None] = mapped_column(String(16), nullable=True)
    title_heading: Mapped[str | None] = mapped_column(String(255), nullable=True)
    title_subheading: Mapped[str | None] = mapped_column(String(255), nullable=True)
    background_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    branding_profile_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("branding_profiles.id", ondelete="SET NULL"),
        nullable=True,
    )


class QuoteItemModel(Base, UUIDMixin, TimestampMixin):
    """One priced line of a quote, ordered by position."""

    __tablename__ = "quote_items"

    quote_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("quotes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    quantity: Mapped[Decimal] = mapped_column(Numeric(12, 3), nullable=False, default=Decimal("1"))
    unit_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))


class QuoteSectionModel(Base, UUIDMixin, TimestampMixin):
    """Grouped narrative section of a quote with optional metrics."""

    __tablename__ = "quote_sections"

    quote_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("quotes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    metrics: Mapped[Any] = mapped_column(
        JSON,
        nullable=True,
        doc="Either {label: value} or [{label, value}, ...]",
    )
