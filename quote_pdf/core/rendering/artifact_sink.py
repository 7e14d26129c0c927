"""
Artifact sink adapter.

Hands a finished PDF to the object store under a collision-free key and
returns the caller-retrievable locator. The store client is synchronous
(boto3), so calls run in a worker thread.

Dependencies: asyncio, quote_pdf.boundary.aws (through the ObjectStore protocol)
System role: Final stage of the rendering pipeline
"""

import asyncio
import logging
import re
import unicodedata
import uuid
from dataclasses import dataclass
from typing import Protocol

from quote_pdf.core.exceptions import EmptyArtifact
from quote_pdf.core.rendering.models import Artifact

logger = logging.getLogger(__name__)

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


class ObjectStore(Protocol):
    """Synchronous object store used by the sink."""

    def put_object(self, key: str, body: bytes, content_type: str = "application/pdf") -> None: ...

    def locator_for(self, key: str) -> str: ...


@dataclass(frozen=True)
class StoredArtifact:
    """Where an artifact ended up."""

    key: str
    locator: str
    filename: str
    size_bytes: int


def slugify(value: str, max_length: int = 60) -> str:
    """Lower-case ASCII slug; empty input yields 'quote'."""
    ascii_value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode()
    slug = _SLUG_STRIP.sub("-", ascii_value.lower()).strip("-")
    return slug[:max_length].rstrip("-") or "quote"


def build_filename(reference: str) -> str:
    """Unique artifact filename: quote-<slug(reference)>-<uuid4>.pdf."""
    return f"quote-{slugify(reference)}-{uuid.uuid4()}.pdf"


class ArtifactSink:
    """Uploads rendered artifacts and resolves their locator."""

    def __init__(self, store: ObjectStore, key_prefix: str = "") -> None:
        self._store = store
        self._key_prefix = key_prefix.strip("/")

    def key_for(self, filename: str) -> str:
        return f"{self._key_prefix}/{filename}" if self._key_prefix else filename

    async def store(self, artifact: Artifact) -> StoredArtifact:
        """
        Upload an artifact.

        Args:
            artifact: Rendered PDF and its filename

        Returns:
            StoredArtifact: Object key and locator

        Raises:
            EmptyArtifact: Artifact has no content (nothing is uploaded)
            UploadFailed: Object store rejected the upload
        """
        if artifact.size_bytes == 0:
            raise EmptyArtifact(
                "Render produced an empty document",
                details={"filename": artifact.filename},
            )

        key = self.key_for(artifact.filename)
        await asyncio.to_thread(
            self._store.put_object, key, artifact.content, artifact.content_type
        )
        locator = await asyncio.to_thread(self._store.locator_for, key)

        logger.info(
            "%s:store - Stored artifact",
            __name__,
            extra={"key": key, "size_bytes": artifact.size_bytes},
        )
        return StoredArtifact(
            key=key,
            locator=locator,
            filename=artifact.filename,
            size_bytes=artifact.size_bytes,
        )
