"""
Test suite for the artifact sink adapter and filename generation.

System role: Verification of the upload stage
"""

import re

import pytest

from fakes import FAKE_PDF, FakeObjectStore
from quote_pdf.core.exceptions import EmptyArtifact, UploadFailed
from quote_pdf.core.rendering.artifact_sink import ArtifactSink, build_filename, slugify
from quote_pdf.core.rendering.models import Artifact

FILENAME_PATTERN = re.compile(r"^quote-[a-z0-9-]+-[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}\.pdf$")


class TestFilenames:
    def test_filename_embeds_slugged_reference_and_uuid(self) -> None:
        filename = build_filename("Q/2026 #17 Ünïcode")

        assert filename.startswith("quote-q-2026-17-unicode-")
        assert FILENAME_PATTERN.match(filename)

    def test_filenames_are_unique(self) -> None:
        assert build_filename("Q-1") != build_filename("Q-1")

    @pytest.mark.parametrize("value,expected", [("", "quote"), ("***", "quote"), ("  Q 1 ", "q-1")])
    def test_slugify(self, value: str, expected: str) -> None:
        assert slugify(value) == expected


class TestArtifactSink:
    @pytest.mark.asyncio
    async def test_store_uploads_under_prefix(self, object_store: FakeObjectStore) -> None:
        sink = ArtifactSink(object_store, key_prefix="quotes/")
        artifact = Artifact(content=FAKE_PDF, filename="quote-q-1-abc.pdf")

        stored = await sink.store(artifact)

        assert stored.key == "quotes/quote-q-1-abc.pdf"
        assert stored.locator == "https://files.test/quotes/quote-q-1-abc.pdf"
        assert stored.size_bytes == len(FAKE_PDF)
        assert object_store.objects[stored.key] == (FAKE_PDF, "application/pdf")

    @pytest.mark.asyncio
    async def test_empty_artifact_is_never_uploaded(self, object_store: FakeObjectStore) -> None:
        sink = ArtifactSink(object_store, key_prefix="quotes")

        with pytest.raises(EmptyArtifact):
            await sink.store(Artifact(content=b"", filename="quote-q-1-abc.pdf"))

        assert object_store.put_calls == 0

    @pytest.mark.asyncio
    async def test_upload_failure_propagates(self) -> None:
        store = FakeObjectStore(error=UploadFailed("AccessDenied", key="quotes/x.pdf"))
        sink = ArtifactSink(store, key_prefix="quotes")

        with pytest.raises(UploadFailed):
            await sink.store(Artifact(content=FAKE_PDF, filename="x.pdf"))

    def test_key_without_prefix(self, object_store: FakeObjectStore) -> None:
        assert ArtifactSink(object_store).key_for("a.pdf") == "a.pdf"
