"""
Quote normalization.

Turns the raw, semi-trusted rows returned by the data store into a
render-safe DocumentModel. Free text is HTML-escaped, numbers are coerced
to finite Decimals, colours and image references are validated, and
unavailable optional sub-resources are replaced by defaults and reported
as DegradedInput.

Dependencies: quote_pdf.core.rendering.models, quote_pdf.core.exceptions
System role: First transformation stage of the rendering pipeline
"""

import html
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from quote_pdf.core.exceptions import DataSourceError, RecordNotFound, ValidationError
from quote_pdf.core.rendering.models import (
    DEFAULT_ACCENT_COLOR,
    DEFAULT_SECONDARY_COLOR,
    BrandingProfile,
    DegradedInput,
    DocumentModel,
    LineEntry,
    LookupStatus,
    Metric,
    PageOptions,
    QuoteBundle,
    QuoteHeader,
    RenderOptions,
    Section,
    TitlePage,
    Totals,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")
# Largest magnitude accepted for a single numeric field (Numeric(12, 2) columns)
MAX_MAGNITUDE = Decimal("1e12")

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

CURRENCY_SYMBOLS = {"GBP": "£", "USD": "$", "EUR": "€", "AUD": "A$", "CAD": "C$"}


@dataclass(frozen=True)
class NormalizerDefaults:
    """Hard-coded fallbacks applied when neither options nor the record decide."""

    page_size: str = "A4"
    page_margin: str = "12mm"
    image_max_width: int = 1600
    image_quality: int = 75


@dataclass
class NormalizationResult:
    """Normalized model plus the non-fatal degradations met on the way."""

    model: DocumentModel
    degraded: list[DegradedInput] = field(default_factory=list)


def escape_text(value: Any, max_length: int | None = None) -> str:
    """Escape a free-text value for HTML, dropping control characters."""
    if value is None:
        return ""
    text = _CONTROL_CHARS.sub("", str(value)).strip()
    if max_length is not None and len(text) > max_length:
        text = text[:max_length]
    return html.escape(text, quote=True)


def to_finite_decimal(value: Any) -> Decimal:
    """Coerce a raw numeric field to a finite Decimal; anything else becomes zero."""
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not number.is_finite() or abs(number) >= MAX_MAGNITUDE:
        return ZERO
    return number


def line_subtotal(quantity: Decimal, unit_price: Decimal) -> Decimal:
    """quantity x unit_price rounded half-up to the currency's minor unit (zero when unrepresentable)."""
    return round_to_cent(quantity * unit_price)


def round_to_cent(value: Decimal) -> Decimal:
    """Round half-up to cents; values beyond Decimal precision become zero."""
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except DecimalException:
        logger.warning("%s:round_to_cent - Amount out of range, using 0", __name__)
        return ZERO


def sanitize_color(value: Any) -> str | None:
    """Return the colour when it is a #RGB/#RRGGBB literal, else None."""
    if isinstance(value, str) and _HEX_COLOR.match(value.strip()):
        return value.strip().upper()
    return None


def sanitize_image_url(value: Any) -> str | None:
    """Accept http(s) and inline data:image references only."""
    if not isinstance(value, str):
        return None
    url = value.strip()
    if url.startswith("data:image/"):
        return html.escape(url, quote=True)
    parts = urlsplit(url)
    if parts.scheme in ("http", "https") and parts.netloc:
        return html.escape(url, quote=True)
    return None


def optimize_image_url(url: str | None, max_width: int, quality: int) -> str | None:
    """Ask the image host for a resized variant via width/quality query params."""
    if not url or url.startswith("data:"):
        return url
    parts = urlsplit(html.unescape(url))
    query = dict(parse_qsl(parts.query))
    query.setdefault("width", str(max_width))
    query.setdefault("quality", str(quality))
    optimized = urlunsplit(parts._replace(query=urlencode(query)))
    return html.escape(optimized, quote=True)


def _to_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None and value != "":
            return value
    return None


def _normalize_header(quote: dict[str, Any], quote_id: str) -> QuoteHeader:
    currency = str(quote.get("currency") or "GBP").strip().upper()[:3] or "GBP"
    return QuoteHeader(
        reference=escape_text(quote.get("reference") or quote_id, max_length=64),
        customer_name=escape_text(quote.get("customer_name"), max_length=200),
        customer_company=escape_text(quote.get("customer_company"), max_length=200),
        customer_email=escape_text(quote.get("customer_email"), max_length=200),
        issue_date=_to_date(quote.get("issue_date") or quote.get("created_at")),
        valid_until=_to_date(quote.get("valid_until")),
        currency=escape_text(currency),
        currency_symbol=CURRENCY_SYMBOLS.get(currency, f"{escape_text(currency)} "),
        notes=escape_text(quote.get("notes"), max_length=4000),
    )


def _normalize_line_items(rows: list[dict[str, Any]]) -> list[LineEntry]:
    entries = []
    ordered = sorted(
        enumerate(rows),
        key=lambda pair: (to_finite_decimal(pair[1].get("position", pair[0])), pair[0]),
    )
    for index, (_, row) in enumerate(ordered, start=1):
        quantity = to_finite_decimal(row.get("quantity"))
        unit_price = to_finite_decimal(row.get("unit_price"))
        entries.append(
            LineEntry(
                position=index,
                description=escape_text(row.get("description"), max_length=2000),
                quantity=quantity,
                unit_price=unit_price,
                subtotal=line_subtotal(quantity, unit_price),
            )
        )
    return entries


def _normalize_metrics(raw: Any) -> list[Metric]:
    if isinstance(raw, dict):
        pairs = list(raw.items())
    elif isinstance(raw, list):
        pairs = [
            (item.get("label"), item.get("value"))
            for item in raw
            if isinstance(item, dict)
        ]
    else:
        return []
    return [
        Metric(label=escape_text(label, max_length=120), value=escape_text(value, max_length=120))
        for label, value in pairs
        if label is not None and str(label).strip()
    ]


def _normalize_sections(rows: list[dict[str, Any]]) -> list[Section]:
    ordered = sorted(
        enumerate(rows),
        key=lambda pair: (to_finite_decimal(pair[1].get("position", pair[0])), pair[0]),
    )
    return [
        Section(
            position=index,
            title=escape_text(row.get("title"), max_length=200),
            body=escape_text(row.get("body"), max_length=8000),
            metrics=_normalize_metrics(row.get("metrics")),
        )
        for index, (_, row) in enumerate(ordered, start=1)
    ]


def _normalize_branding(
    branding: dict[str, Any],
    quote: dict[str, Any],
    options: RenderOptions,
) -> BrandingProfile:
    accent = (
        sanitize_color(options.accent_color)
        or sanitize_color(quote.get("accent_color"))
        or sanitize_color(branding.get("accent_color"))
        or DEFAULT_ACCENT_COLOR
    )
    return BrandingProfile(
        company_name=escape_text(branding.get("company_name"), max_length=200),
        accent_color=accent,
        secondary_color=sanitize_color(branding.get("secondary_color")) or DEFAULT_SECONDARY_COLOR,
        logo_url=sanitize_image_url(branding.get("logo_url")),
        background_url=sanitize_image_url(branding.get("background_url")),
        contact_block=escape_text(branding.get("contact_block"), max_length=2000),
        footer_text=escape_text(branding.get("footer_text"), max_length=500),
        terms_text=escape_text(branding.get("terms_text"), max_length=20000),
    )


def _compute_totals(entries: list[LineEntry], tax_rate: Decimal) -> Totals:
    subtotal = sum((entry.subtotal for entry in entries), ZERO)
    subtotal = round_to_cent(subtotal)
    tax_amount = round_to_cent(subtotal * tax_rate / Decimal(100))
    return Totals(
        subtotal=subtotal,
        tax_rate=tax_rate,
        tax_amount=tax_amount,
        total=round_to_cent(subtotal + tax_amount),
    )


def normalize_quote(
    bundle: QuoteBundle,
    options: RenderOptions,
    quote_id: str,
    defaults: NormalizerDefaults | None = None,
) -> NormalizationResult:
    """
    Validate and sanitize one quote bundle into a render-safe model.

    Args:
        bundle: Raw lookup outcomes from the data store
        options: Caller's render options
        quote_id: Identifier of the requested quote (for errors and fallbacks)
        defaults: Hard-coded fallbacks (page size, margins, image parameters)

    Returns:
        NormalizationResult: Document model and the list of degraded inputs

    Raises:
        RecordNotFound: Quote does not exist
        DataSourceError: Quote or line-item lookup failed store-side
        ValidationError: Quote has no line items
    """
    defaults = defaults or NormalizerDefaults()
    degraded: list[DegradedInput] = []

    if bundle.quote.status is LookupStatus.NOT_FOUND or (
        bundle.quote.ok and not bundle.quote.value
    ):
        raise RecordNotFound(quote_id)
    if bundle.quote.status is LookupStatus.FAILED:
        raise DataSourceError(
            f"Failed to load quote: {bundle.quote.error}", resource="quote"
        )
    quote: dict[str, Any] = bundle.quote.value

    if bundle.line_items.status is LookupStatus.FAILED:
        raise DataSourceError(
            f"Failed to load line items: {bundle.line_items.error}",
            resource="line_items",
        )
    raw_items: list[dict[str, Any]] = []
    if bundle.line_items.ok:
        raw_items = bundle.line_items.value or []
    if not raw_items:
        raise ValidationError(
            "Quote has no line items to render",
            field="line_items",
            details={"quote_id": quote_id},
        )

    branding_row: dict[str, Any] = {}
    if bundle.branding.ok and bundle.branding.value:
        branding_row = bundle.branding.value
    elif bundle.branding.status is LookupStatus.FAILED:
        degraded.append(
            DegradedInput(resource="branding_profile", reason=bundle.branding.error or "lookup failed")
        )
    elif quote.get("branding_profile_id"):
        degraded.append(
            DegradedInput(resource="branding_profile", reason="branding profile not found")
        )

    section_rows: list[dict[str, Any]] = []
    if bundle.sections.status is LookupStatus.FAILED:
        degraded.append(
            DegradedInput(resource="sections", reason=bundle.sections.error or "lookup failed")
        )
    elif bundle.sections.ok:
        section_rows = bundle.sections.value or []

    header = _normalize_header(quote, quote_id)
    line_items = _normalize_line_items(raw_items)
    branding = _normalize_branding(branding_row, quote, options)
    sections = _normalize_sections(section_rows) if options.include_sections else []

    background = sanitize_image_url(
        _first(options.title_background_url, quote.get("background_image_url"))
    ) or branding.background_url
    if options.optimize_images:
        background = optimize_image_url(background, defaults.image_max_width, defaults.image_quality)
        branding = branding.model_copy(
            update={
                "logo_url": optimize_image_url(
                    branding.logo_url, defaults.image_max_width, defaults.image_quality
                )
            }
        )

    title_page = TitlePage(
        enabled=options.include_title_page,
        heading=escape_text(
            _first(options.title_heading, quote.get("title_heading"))
            or f"Quote {quote.get('reference') or quote_id}",
            max_length=200,
        ),
        subheading=escape_text(
            _first(options.title_subheading, quote.get("title_subheading")),
            max_length=300,
        )
        or header.customer_company
        or header.customer_name,
        background_url=background,
    )

    model = DocumentModel(
        header=header,
        line_items=line_items,
        sections=sections,
        branding=branding,
        title_page=title_page,
        totals=_compute_totals(line_items, to_finite_decimal(quote.get("tax_rate"))),
        page=PageOptions(
            page_size=options.page_size or defaults.page_size,
            margin=defaults.page_margin,
        ),
        show_metrics=options.include_metrics,
        show_terms=options.include_terms,
    )

    logger.info(
        "%s:normalize_quote - Normalized quote",
        __name__,
        extra={
            "quote_id": quote_id,
            "line_items": len(line_items),
            "sections": len(sections),
            "degraded": [item.resource for item in degraded],
        },
    )
    return NormalizationResult(model=model, degraded=degraded)
