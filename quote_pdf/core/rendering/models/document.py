"""
Render-safe document model.

Normalized projection of a quote: every free-text field is HTML-escaped
and every number is a finite Decimal. Read-only once built.

Dependencies: pydantic
System role: Input of the markup producer
"""

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ACCENT_COLOR = "#1F4E79"
DEFAULT_SECONDARY_COLOR = "#F2F4F7"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class QuoteHeader(_Frozen):
    """Header fields of the quote."""

    reference: str
    customer_name: str = ""
    customer_company: str = ""
    customer_email: str = ""
    issue_date: date | None = None
    valid_until: date | None = None
    currency: str = "GBP"
    currency_symbol: str = "£"
    notes: str = ""


class LineEntry(_Frozen):
    """One priced line of the quote."""

    position: int
    description: str
    quantity: Decimal
    unit_price: Decimal
    subtotal: Decimal = Field(description="quantity x unit_price rounded to the minor unit")


class Metric(_Frozen):
    """A labelled figure shown inside a section."""

    label: str
    value: str


class Section(_Frozen):
    """A grouped narrative section of the quote."""

    position: int
    title: str
    body: str = ""
    metrics: list[Metric] = Field(default_factory=list)


class BrandingProfile(_Frozen):
    """Colours, text blocks and imagery of the issuing company."""

    company_name: str = ""
    accent_color: str = DEFAULT_ACCENT_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    logo_url: str | None = None
    background_url: str | None = None
    contact_block: str = ""
    footer_text: str = ""
    terms_text: str = ""


class TitlePage(_Frozen):
    """Resolved title page content."""

    enabled: bool = True
    heading: str
    subheading: str = ""
    background_url: str | None = None


class Totals(_Frozen):
    """Monetary totals derived from the line entries."""

    subtotal: Decimal
    tax_rate: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    total: Decimal


class PageOptions(_Frozen):
    """Pagination options handed to the render engine."""

    page_size: Literal["A4", "Letter"] = "A4"
    margin: str = "12mm"


class DocumentModel(_Frozen):
    """Normalized, render-safe quote."""

    header: QuoteHeader
    line_items: list[LineEntry]
    sections: list[Section] = Field(default_factory=list)
    branding: BrandingProfile = Field(default_factory=BrandingProfile)
    title_page: TitlePage
    totals: Totals
    page: PageOptions = Field(default_factory=PageOptions)
    show_metrics: bool = True
    show_terms: bool = True
