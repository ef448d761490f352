import json

from app.client import LocalStorage, TranslationCache, TranslationState


def _cache(storage=None):
    state = TranslationState(target_language="ko")
    return TranslationCache(storage or LocalStorage(), state, source_language="ko"), state


def test_set_all_merges_and_persists():
    storage = LocalStorage()
    cache, _ = _cache(storage)
    cache.set_all({"home": "Home"})
    cache.set_all({"logout": "Logout"})
    assert cache.get("home") == "Home"
    assert cache.get("logout") == "Logout"
    assert json.loads(storage.get_item("translatedData")) == {"home": "Home", "logout": "Logout"}


def test_get_has_no_side_effects():
    cache, state = _cache()
    assert cache.get("missing") is None
    assert len(cache) == 0
    assert state.is_translated is False


def test_clear_removes_persisted_snapshot():
    storage = LocalStorage()
    cache, _ = _cache(storage)
    cache.set_all({"home": "Home"})
    cache.commit("en")
    cache.clear()
    assert len(cache) == 0
    assert storage.get_item("translatedData") is None
    assert storage.get_item("isTranslated") is None


def test_commit_ignored_for_empty_cache():
    cache, state = _cache()
    cache.commit("en")
    assert state.is_translated is False


def test_restore_valid_snapshot(tmp_path):
    path = tmp_path / "storage.json"
    first, _ = _cache(LocalStorage(path))
    first.set_all({"home": "Home"}, language="en")
    first.commit("en")

    cache, state = _cache(LocalStorage(path))
    assert cache.restore() is True
    assert state.is_translated is True
    assert state.target_language == "en"
    assert cache.get("home") == "Home"
    assert cache.language == "en"


def test_restore_rejects_flag_without_data():
    storage = LocalStorage()
    storage.set_item("isTranslated", "true")
    storage.set_item("selectedLanguage", "en")
    storage.set_item("translatedData", "{}")

    cache, state = _cache(storage)
    assert cache.restore() is False
    assert state.is_translated is False
    assert state.target_language == "ko"
    assert storage.get_item("isTranslated") is None


def test_restore_rejects_source_language_and_bad_shapes():
    for lang, data in [
        ("ko", json.dumps({"home": "홈"})),
        ("en", "{not json"),
        ("en", json.dumps(["Home"])),
        ("en", json.dumps({"home": 1})),
    ]:
        storage = LocalStorage()
        storage.set_item("isTranslated", "true")
        storage.set_item("selectedLanguage", lang)
        storage.set_item("translatedData", data)
        cache, state = _cache(storage)
        assert cache.restore() is False, (lang, data)
        assert state.is_translated is False
        assert len(cache) == 0


def test_restore_requires_true_flag():
    storage = LocalStorage()
    storage.set_item("isTranslated", "false")
    storage.set_item("selectedLanguage", "en")
    storage.set_item("translatedData", json.dumps({"home": "Home"}))
    cache, state = _cache(storage)
    assert cache.restore() is False
    assert state.is_translated is False


def test_corrupted_storage_file_is_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{{{ not json", encoding="utf-8")
    storage = LocalStorage(path)
    assert storage.get_item("isTranslated") is None

    cache, state = _cache(storage)
    assert cache.restore() is False
    assert state.is_translated is False


def test_storage_roundtrip_on_disk(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    storage = LocalStorage(path)
    storage.set_item("selectedLanguage", "ja")
    storage.set_item("housing-buddy-admin", "true")
    storage.remove_item("housing-buddy-admin")

    again = LocalStorage(path)
    assert again.get_item("selectedLanguage") == "ja"
    assert again.get_item("housing-buddy-admin") is None
