"""
Rendered artifact model.

Dependencies: pydantic
System role: Handoff between the render session and the artifact sink
"""

from pydantic import BaseModel, ConfigDict, Field


class Artifact(BaseModel):
    """Finished binary document awaiting upload."""

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(repr=False, description="PDF bytes")
    filename: str = Field(description="Unique filename")
    content_type: str = Field(default="application/pdf")

    @property
    def size_bytes(self) -> int:
        return len(self.content)
