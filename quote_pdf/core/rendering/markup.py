"""
Quote markup producer.

Pure function from a normalized DocumentModel to paginated HTML. The model
is already HTML-escaped, so the Jinja2 environment runs with autoescape
off and StrictUndefined so a missing field fails loudly at render time.

Dependencies: jinja2, quote_pdf.core.rendering.models
System role: Template stage between normalization and the render engine
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from quote_pdf.core.rendering.models import DocumentModel

TEMPLATE_DIR = Path(__file__).parent / "templates"
QUOTE_TEMPLATE = "quote.html.j2"


def format_money(value: Decimal, symbol: str = "") -> str:
    """Fixed two-decimal amount with thousands separators, independent of locale."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_quantity(value: Decimal) -> str:
    """Drop insignificant trailing zeros (3.000 -> 3, 2.50 -> 2.5)."""
    if value == value.to_integral_value():
        return f"{value.to_integral_value():,f}"
    return f"{value.normalize():f}"


def nl2br(value: str) -> str:
    """Turn newlines of already-escaped text into line breaks."""
    return value.replace("\r\n", "\n").replace("\n", "<br>")


@lru_cache
def _environment(template_dir: str) -> Environment:
    env = Environment(
        loader=FileSystemLoader(template_dir),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["money"] = format_money
    env.filters["quantity"] = format_quantity
    env.filters["nl2br"] = nl2br
    return env


def get_quote_template(template_dir: Path = TEMPLATE_DIR) -> Template:
    """Load (and cache) the quote template."""
    return _environment(str(template_dir)).get_template(QUOTE_TEMPLATE)


def render_quote_markup(model: DocumentModel, template_dir: Path = TEMPLATE_DIR) -> str:
    """
    Render the quote document to HTML.

    Args:
        model: Normalized, escaped document model
        template_dir: Directory containing quote.html.j2

    Returns:
        str: Complete HTML document
    """
    template = get_quote_template(template_dir)
    return template.render(
        doc=model,
        header=model.header,
        branding=model.branding,
        title_page=model.title_page,
        totals=model.totals,
    )
