"""
Test suite for the S3 artifact client.

The boto3 client is replaced with a MagicMock; no network access.

System role: Verification of the object store boundary
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from quote_pdf.boundary.aws import S3ArtifactClient
from quote_pdf.configs import StorageSettings
from quote_pdf.core.exceptions import UploadFailed


@pytest.fixture
def boto_client() -> MagicMock:
    return MagicMock()


def _client(boto_client: MagicMock, **overrides) -> S3ArtifactClient:
    settings = StorageSettings(bucket="quote-pdfs", region="eu-west-2", **overrides)
    return S3ArtifactClient(settings, s3_client=boto_client)


class TestPutObject:
    def test_put_object_sends_content_type(self, boto_client: MagicMock) -> None:
        _client(boto_client).put_object("quotes/a.pdf", b"%PDF")

        boto_client.put_object.assert_called_once_with(
            Bucket="quote-pdfs",
            Key="quotes/a.pdf",
            Body=b"%PDF",
            ContentType="application/pdf",
        )

    def test_client_error_becomes_upload_failed(self, boto_client: MagicMock) -> None:
        boto_client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )

        with pytest.raises(UploadFailed) as exc_info:
            _client(boto_client).put_object("quotes/a.pdf", b"%PDF")

        assert exc_info.value.details["key"] == "quotes/a.pdf"

    def test_transport_error_becomes_upload_failed(self, boto_client: MagicMock) -> None:
        boto_client.put_object.side_effect = EndpointConnectionError(endpoint_url="https://s3")

        with pytest.raises(UploadFailed):
            _client(boto_client).put_object("quotes/a.pdf", b"%PDF")


class TestLocator:
    def test_public_locator_defaults_to_virtual_hosted_url(self, boto_client: MagicMock) -> None:
        locator = _client(boto_client).locator_for("quotes/quote-q-1.pdf")

        assert locator == "https://quote-pdfs.s3.eu-west-2.amazonaws.com/quotes/quote-q-1.pdf"

    def test_public_locator_uses_configured_base_url(self, boto_client: MagicMock) -> None:
        client = _client(boto_client, public_base_url="https://files.example.com/")

        assert client.locator_for("quotes/a.pdf") == "https://files.example.com/quotes/a.pdf"

    def test_presigned_locator(self, boto_client: MagicMock) -> None:
        boto_client.generate_presigned_url.return_value = "https://signed.example/a.pdf?sig=1"
        client = _client(boto_client, locator_mode="presigned", presigned_url_expiry=600)

        assert client.locator_for("quotes/a.pdf") == "https://signed.example/a.pdf?sig=1"
        boto_client.generate_presigned_url.assert_called_once_with(
            ClientMethod="get_object",
            Params={"Bucket": "quote-pdfs", "Key": "quotes/a.pdf"},
            ExpiresIn=600,
        )
