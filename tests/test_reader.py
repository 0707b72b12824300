"""
Tests for input acquisition.
"""

import asyncio
import base64
import io

import pytest

import jpegmeta
from jpegmeta import reader
from jpegmeta.util.buffer_view import BufferView


def read(source):
    return asyncio.run(reader.read(source))


class FakeResponse:
    def __init__(self, content, status_code=200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise reader.requests.HTTPError(f"{self.status_code} Error")


class FakeBody:
    def __init__(self, content):
        self.content = content

    def read(self):
        return self.content


class FakeS3Client:
    def __init__(self, content):
        self.content = content
        self.calls = []

    def get_object(self, Bucket, Key):
        self.calls.append((Bucket, Key))
        return {"Body": FakeBody(self.content)}


class TestLocalSources:
    """Buffers, paths and file-like objects."""

    def test_bytes_like(self, jpeg_bytes):
        for source in (jpeg_bytes, bytearray(jpeg_bytes), memoryview(jpeg_bytes)):
            assert read(source).get_bytes(0, 2) == b"\xff\xd8"

    def test_buffer_view_passthrough(self, jpeg_bytes):
        view = BufferView(jpeg_bytes)
        assert read(view) is view

    def test_path_and_string_path(self, jpeg_bytes, tmp_path):
        path = tmp_path / "photo.jpg"
        path.write_bytes(jpeg_bytes)
        assert read(path).byte_length == len(jpeg_bytes)
        assert read(str(path)).byte_length == len(jpeg_bytes)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read(str(tmp_path / "missing.jpg"))

    def test_file_like(self, jpeg_bytes):
        assert read(io.BytesIO(jpeg_bytes)).byte_length == len(jpeg_bytes)

    def test_data_uri(self, jpeg_bytes):
        uri = "data:image/jpeg;base64," + base64.b64encode(jpeg_bytes).decode("ascii")
        assert read(uri).get_bytes(0, 2) == b"\xff\xd8"

    def test_data_uri_without_base64(self):
        with pytest.raises(ValueError):
            read("data:text/plain,hello")

    def test_invalid_argument(self):
        with pytest.raises(TypeError, match="Invalid input argument"):
            read(42)


class TestRemoteSources:
    """HTTP and S3 downloads with the clients patched out."""

    def test_http(self, monkeypatch, jpeg_bytes):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse(jpeg_bytes)

        monkeypatch.setattr(reader.requests, "get", fake_get)
        result = asyncio.run(jpegmeta.parse("https://example.com/photo.jpg"))
        assert result.tags["Make"] == "Canon"
        assert calls == [("https://example.com/photo.jpg", reader.REQUEST_TIMEOUT)]

    def test_http_error_propagates(self, monkeypatch):
        monkeypatch.setattr(
            reader.requests, "get", lambda url, timeout: FakeResponse(b"", 404)
        )
        with pytest.raises(reader.requests.HTTPError):
            read("http://example.com/missing.jpg")

    def test_s3(self, monkeypatch, jpeg_bytes):
        client = FakeS3Client(jpeg_bytes)
        monkeypatch.setattr(reader.boto3, "client", lambda service: client)
        view = read("s3://media-bucket/photos/2024/photo.jpg")
        assert view.byte_length == len(jpeg_bytes)
        assert client.calls == [("media-bucket", "photos/2024/photo.jpg")]
