"""
Test suite for QuoteDataSource against an in-memory SQLite database.

Verifies typed lookup outcomes, ordering by position, and that store
failures become `failed` lookups instead of exceptions.

System role: Verification of the data store boundary
"""

import asyncio
import uuid
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from quote_pdf.boundary.db.CRUD import quote_crud
from quote_pdf.boundary.db.models import (
    BrandingProfileModel,
    QuoteItemModel,
    QuoteModel,
    QuoteSectionModel,
)
from quote_pdf.boundary.db.quote_data_source import QuoteDataSource
from quote_pdf.core.rendering.models import LookupStatus, RenderOptions
from quote_pdf.core.rendering.normalizer import normalize_quote


async def _seed(session_factory, with_branding: bool = True) -> uuid.UUID:
    async with session_factory() as session:
        branding_id = None
        if with_branding:
            branding = BrandingProfileModel(company_name="Acme Fabrication", accent_color="#336699")
            session.add(branding)
            await session.flush()
            branding_id = branding.id

        quote = QuoteModel(
            reference="Q-2001",
            customer_name="Grace Hopper",
            issue_date=date(2026, 4, 1),
            currency="GBP",
            tax_rate=Decimal("20"),
            branding_profile_id=branding_id,
        )
        session.add(quote)
        await session.flush()

        session.add_all(
            [
                QuoteItemModel(quote_id=quote.id, position=2, description="Install", quantity=Decimal("1"), unit_price=Decimal("80.00")),
                QuoteItemModel(quote_id=quote.id, position=1, description="Panel", quantity=Decimal("3"), unit_price=Decimal("12.50")),
                QuoteSectionModel(quote_id=quote.id, position=1, title="Scope", body="Supply and fit", metrics={"Lead time": "2 weeks"}),
            ]
        )
        await session.commit()
        return quote.id


class TestQuoteDataSource:
    @pytest.mark.asyncio
    async def test_fetch_returns_found_lookups(self, session_factory) -> None:
        quote_id = await _seed(session_factory)

        bundle = await QuoteDataSource(session_factory).fetch(quote_id)

        assert bundle.quote.ok
        assert bundle.quote.value["reference"] == "Q-2001"
        assert [row["description"] for row in bundle.line_items.value] == ["Panel", "Install"]
        assert [row["title"] for row in bundle.sections.value] == ["Scope"]
        assert bundle.branding.value["company_name"] == "Acme Fabrication"

    @pytest.mark.asyncio
    async def test_unknown_quote_is_not_found(self, session_factory) -> None:
        bundle = await QuoteDataSource(session_factory).fetch(uuid.uuid4())

        assert bundle.quote.status is LookupStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_quote_without_branding_reference(self, session_factory) -> None:
        quote_id = await _seed(session_factory, with_branding=False)

        bundle = await QuoteDataSource(session_factory).fetch(quote_id)

        assert bundle.branding.status is LookupStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_store_error_becomes_failed_lookup(self, session_factory, monkeypatch) -> None:
        quote_id = await _seed(session_factory)

        async def broken(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(quote_crud, "get_by_id", broken)

        bundle = await QuoteDataSource(session_factory).fetch(quote_id)

        assert bundle.quote.status is LookupStatus.FAILED
        assert "OperationalError" in bundle.quote.error

    @pytest.mark.asyncio
    async def test_connection_failure_becomes_failed_lookup(self) -> None:
        factory = MagicMock(side_effect=OSError("connection refused"))

        lookup = await QuoteDataSource(factory).get_line_items(uuid.uuid4())

        assert lookup.status is LookupStatus.FAILED

    @pytest.mark.asyncio
    async def test_connect_timeout_becomes_failed_lookup(self, session_factory, monkeypatch) -> None:
        async def hung(*args, **kwargs):
            raise asyncio.TimeoutError()

        monkeypatch.setattr(quote_crud, "get_by_id", hung)

        bundle = await QuoteDataSource(session_factory).fetch(uuid.uuid4())

        assert bundle.quote.status is LookupStatus.FAILED
        assert "TimeoutError" in bundle.quote.error

    @pytest.mark.asyncio
    async def test_bundle_normalizes_end_to_end(self, session_factory) -> None:
        quote_id = await _seed(session_factory)
        bundle = await QuoteDataSource(session_factory).fetch(quote_id)

        result = normalize_quote(bundle, RenderOptions(), str(quote_id))

        assert result.degraded == []
        assert result.model.line_items[0].subtotal == Decimal("37.50")
        assert result.model.totals.subtotal == Decimal("117.50")
        assert result.model.branding.accent_color == "#336699"
        assert result.model.sections[0].metrics[0].label == "Lead time"
