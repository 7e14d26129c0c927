"""
Test suite for the aggregated application settings.

System role: Verification of configuration invariants
"""

import pytest
from pydantic import ValidationError

from quote_pdf.configs import ApiSettings, PipelineSettings, Settings, StorageSettings


class TestSettings:
    def test_defaults_keep_s3_timeouts_inside_upload_deadline(self) -> None:
        settings = Settings()

        budget = settings.storage.connect_timeout + settings.storage.read_timeout
        assert budget <= settings.pipeline.upload_timeout

    def test_s3_timeouts_longer_than_upload_deadline_are_rejected(self) -> None:
        with pytest.raises(ValidationError, match="upload_timeout"):
            Settings(
                storage=StorageSettings(connect_timeout=5, read_timeout=20),
                pipeline=PipelineSettings(upload_timeout=10),
            )

    def test_csv_tokens_are_split(self) -> None:
        api = ApiSettings(tokens="alpha, beta,,gamma")

        assert api.tokens == ["alpha", "beta", "gamma"]
