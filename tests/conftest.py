import requests
import pytest

from ingest import accounts, cache


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point both flat files at a temporary directory."""
    monkeypatch.setattr(cache, "LOG_PATH", tmp_path / "ratings.log")
    monkeypatch.setattr(accounts, "ACCOUNTS_PATH", tmp_path / "accounts.txt")
    return tmp_path


class FakeResponse:
    def __init__(self, status_code=200, text="", payload=None):
        self.status_code = status_code
        self.text = text
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def fake_response():
    return FakeResponse
