"""
AWS boundary modules.

Exports: S3ArtifactClient
"""

from .s3_client import S3ArtifactClient

__all__ = ["S3ArtifactClient"]
