"""Tests for asset uploader models."""
import dataclasses

import pytest

from asset_uploader.models import UploadInputs, UploadRequest
from asset_uploader.services.inputs import ActionInputs


class TestUploadInputs:
    def test_read_from_source(self):
        source = ActionInputs(
            {
                "INPUT_UPLOAD_URL": "https://example.test/assets",
                "INPUT_ASSET_PATH": "dist/*",
                "INPUT_TOKEN": "secret",
            }
        )
        inputs = UploadInputs.read(source)
        assert inputs.upload_url == "https://example.test/assets"
        assert inputs.asset_path == "dist/*"
        assert inputs.token == "secret"

    def test_immutable(self):
        inputs = UploadInputs("u", "p", "t")
        with pytest.raises(dataclasses.FrozenInstanceError):
            inputs.token = "other"


class TestUploadRequest:
    def test_for_asset(self):
        body = object()
        request = UploadRequest.for_asset("https://example.test/assets", 2048, "abc", body)
        assert request.method == "POST"
        assert request.url == "https://example.test/assets"
        assert request.headers == {
            "content-length": "2048",
            "content-type": "application/octet-stream",
            "authorization": "token abc",
        }
        assert request.body is body

    def test_zero_byte_file(self):
        request = UploadRequest.for_asset("https://example.test/assets", 0, "abc", None)
        assert request.headers["content-length"] == "0"
