"""
Pipeline result models.

Represents the outcome of rendering a quote: a success carrying the
retrieval locator, or a typed failure. Both carry the non-fatal
degradations collected along the way.

Dependencies: pydantic
System role: Return type for DocumentPipeline.generate()
"""

from typing import Literal, Union

from pydantic import BaseModel, Field


class DegradedInput(BaseModel):
    """An optional sub-resource that was unavailable and replaced by defaults."""

    resource: str = Field(description="Sub-resource name (branding_profile, sections)")
    reason: str = Field(description="Why the resource was unavailable")


class PipelineSuccess(BaseModel):
    """Successful pipeline execution."""

    success: Literal[True] = True
    locator: str = Field(description="Caller-retrievable URL of the artifact")
    filename: str = Field(description="Stored filename")
    size_bytes: int = Field(description="Artifact size in bytes")
    elapsed_ms: float = Field(description="Whole orchestration time including retries")
    attempts: int = Field(default=1, description="Number of pipeline attempts")
    degraded: list[DegradedInput] = Field(default_factory=list)


class PipelineFailure(BaseModel):
    """Failed pipeline execution."""

    success: Literal[False] = False
    error_kind: str = Field(description="Error taxonomy kind")
    message: str = Field(description="Human-readable error message")
    elapsed_ms: float = Field(description="Whole orchestration time including retries")
    attempts: int = Field(default=1, description="Number of pipeline attempts")
    degraded: list[DegradedInput] = Field(default_factory=list)


PipelineResult = Union[PipelineSuccess, PipelineFailure]
