"""
Test suite for the quote markup producer.

System role: Verification of DocumentModel -> HTML rendering
"""

from decimal import Decimal

import pytest

from fakes import make_bundle, make_quote_row
from quote_pdf.core.rendering.markup import format_money, format_quantity, nl2br, render_quote_markup
from quote_pdf.core.rendering.models import Lookup, RenderOptions
from quote_pdf.core.rendering.normalizer import normalize_quote


def _markup(bundle=None, **options) -> str:
    result = normalize_quote(bundle or make_bundle(), RenderOptions(**options), "q-1")
    return render_quote_markup(result.model)


class TestRenderQuoteMarkup:
    def test_line_subtotal_is_rendered_with_two_decimals(self) -> None:
        html = _markup()

        assert "37.50" in html
        assert "£12.50" in html
        assert "Widget" in html

    def test_title_page_is_first_and_breaks_the_page(self) -> None:
        html = _markup()

        assert 'class="title-page"' in html
        assert html.index("title-page") < html.index("Widget")

    def test_title_page_can_be_disabled(self) -> None:
        html = _markup(include_title_page=False)

        assert '<section class="title-page">' not in html

    def test_accent_colour_is_applied(self) -> None:
        html = _markup(accent_color="#AA0000")

        assert "--accent: #AA0000;" in html

    def test_escaped_text_is_not_double_escaped(self) -> None:
        html = _markup(make_bundle(quote=make_quote_row(customer_name="Tom & Jerry <Ltd>")))

        assert "Tom &amp; Jerry &lt;Ltd&gt;" in html
        assert "<Ltd>" not in html

    def test_sections_and_metrics(self) -> None:
        sections = Lookup.found(
            [{"position": 1, "title": "Scope", "body": "Line one\nLine two",
              "metrics": {"Lead time": "3 weeks"}}]
        )

        html = _markup(make_bundle(sections=sections))

        assert "Scope" in html
        assert "Line one<br>Line two" in html
        assert "Lead time" in html and "3 weeks" in html

    def test_metrics_can_be_hidden(self) -> None:
        sections = Lookup.found([{"title": "Scope", "metrics": {"Lead time": "3 weeks"}}])

        html = _markup(make_bundle(sections=sections), include_metrics=False)

        assert "Lead time" not in html

    def test_terms_follow_option(self) -> None:
        branding = Lookup.found({"terms_text": "Payment within 30 days"})
        quote = make_quote_row(branding_profile_id="b-1")

        shown = _markup(make_bundle(quote=quote, branding=branding))
        hidden = _markup(make_bundle(quote=quote, branding=branding), include_terms=False)

        assert "Payment within 30 days" in shown
        assert "Payment within 30 days" not in hidden

    def test_logo_is_rendered_as_image(self) -> None:
        branding = Lookup.found({"logo_url": "https://cdn.example.com/logo.png"})
        quote = make_quote_row(branding_profile_id="b-1")

        html = _markup(make_bundle(quote=quote, branding=branding))

        assert '<img class="logo" src="https://cdn.example.com/logo.png"' in html

    def test_rendering_is_deterministic(self) -> None:
        result = normalize_quote(make_bundle(), RenderOptions(), "q-1")

        assert render_quote_markup(result.model) == render_quote_markup(result.model)


class TestFilters:
    @pytest.mark.parametrize(
        "value,expected",
        [(Decimal("1234.5"), "£1,234.50"), (Decimal("0"), "£0.00"), (Decimal("-3.2"), "-£3.20")],
    )
    def test_format_money(self, value: Decimal, expected: str) -> None:
        assert format_money(value, "£") == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(Decimal("3"), "3"), (Decimal("3.000"), "3"), (Decimal("2.50"), "2.5"), (Decimal("1500"), "1,500")],
    )
    def test_format_quantity(self, value: Decimal, expected: str) -> None:
        assert format_quantity(value) == expected

    def test_nl2br(self) -> None:
        assert nl2br("a\r\nb\nc") == "a<br>b<br>c"
