import json

import httpx
import pytest
from httpx import ASGITransport

from app.client import ClientConfig, ClientSession, LocalStorage
from app.main import app


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("HB_API_BASE_URL", "http://api.local:9000")
    monkeypatch.setenv("HB_STORAGE_PATH", str(tmp_path / "state.json"))
    monkeypatch.setenv("HB_API_TIMEOUT", "3.5")
    cfg = ClientConfig.from_env()
    assert cfg.base_url == "http://api.local:9000"
    assert cfg.storage_path == str(tmp_path / "state.json")
    assert cfg.timeout == 3.5
    assert cfg.source_language == "ko"


@pytest.mark.asyncio
async def test_translation_snapshot_survives_restart(tmp_path, google):
    path = tmp_path / "storage.json"
    async with ClientSession(ClientConfig(base_url="http://testserver"),
                             transport=ASGITransport(app=app), storage=LocalStorage(path)) as first:
        assert await first.orchestrator.translate_all("en") is True

    async with ClientSession(ClientConfig(base_url="http://testserver"),
                             transport=ASGITransport(app=app), storage=LocalStorage(path)) as second:
        assert second.state.is_translated is True
        assert second.state.target_language == "en"
        assert second.resolver.resolve("홈", "home") == "Home"


@pytest.mark.asyncio
async def test_partial_snapshot_rejected_on_start(tmp_path, google):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"isTranslated": "true", "selectedLanguage": "en"}), encoding="utf-8")
    async with ClientSession(ClientConfig(base_url="http://testserver"),
                             transport=ASGITransport(app=app), storage=LocalStorage(path)) as s:
        assert s.state.is_translated is False
        assert s.resolver.resolve("홈", "home") == "홈"
        assert s.storage.get_item("isTranslated") is None


@pytest.mark.asyncio
async def test_network_failure_is_notification_not_crash(tmp_path):
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    s = ClientSession(ClientConfig(base_url="http://testserver"),
                      transport=httpx.MockTransport(refuse), storage=LocalStorage())
    await s.start()
    assert s.user is None
    assert await s.orchestrator.translate_all("en") is False
    assert s.notifier.drain()[-1].variant == "destructive"
    assert s.state.is_translating is False
    await s.close()
