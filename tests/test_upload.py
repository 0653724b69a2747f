"""
Tests for eventrecords.media.upload — remote media transfer.
"""

import pytest
import requests

from eventrecords.config.media_host import MediaHostConfig
from eventrecords.media import upload as upload_module
from eventrecords.media.upload import UploadFailed, media_item_for_upload, upload_file

CONFIG = MediaHostConfig(upload_url="https://files.example", timeout=5)

class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

def test_upload_returns_url(monkeypatch):
    calls = []

    def fake_post(url, files, timeout):
        calls.append((url, files, timeout))
        return FakeResponse("https://files.example/abc.png\n")

    monkeypatch.setattr(upload_module.requests, "post", fake_post)
    url = upload_file("poster.png", "image/png", b"\x89PNG", CONFIG)

    assert url == "https://files.example/abc.png"
    assert calls == [("https://files.example", {"file": ("poster.png", b"\x89PNG", "image/png")}, 5)]

def test_media_item_references_url(monkeypatch):
    monkeypatch.setattr(upload_module.requests, "post", lambda *a, **kw: FakeResponse("https://files.example/x.pdf"))
    item = media_item_for_upload("minutes.pdf", "application/pdf", b"%PDF", CONFIG)
    assert item.url == "https://files.example/x.pdf"
    assert item.data is None
    assert item.kind == "pdf"

def test_network_error_raises_upload_failed(monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(upload_module.requests, "post", fake_post)
    with pytest.raises(UploadFailed, match="poster.png"):
        upload_file("poster.png", "image/png", b"data", CONFIG)

def test_error_status_raises_upload_failed(monkeypatch):
    monkeypatch.setattr(upload_module.requests, "post", lambda *a, **kw: FakeResponse("too large", 413))
    with pytest.raises(UploadFailed):
        upload_file("big.mp4", "video/mp4", b"data", CONFIG)

def test_non_url_reply_raises_upload_failed(monkeypatch):
    monkeypatch.setattr(upload_module.requests, "post", lambda *a, **kw: FakeResponse("<html>blocked</html>"))
    with pytest.raises(UploadFailed, match="did not return a URL"):
        upload_file("a.txt", "text/plain", b"data", CONFIG)

def test_config_validation():
    with pytest.raises(ValueError):
        MediaHostConfig(upload_url="ftp://files.example", timeout=5).validate()
