from app.client import LocalStorage, TextResolver, TranslationCache, TranslationState


def _translated(entries, language="en"):
    state = TranslationState(target_language="ko")
    cache = TranslationCache(LocalStorage(), state, source_language="ko")
    cache.set_all(entries, language=language)
    cache.commit(language)
    return TextResolver(cache, state), cache, state


def test_untranslated_returns_original():
    state = TranslationState()
    cache = TranslationCache(LocalStorage(), state)
    cache.set_all({"home": "Home"})
    resolver = TextResolver(cache, state)
    assert resolver.resolve("홈", "home") == "홈"


def test_resolve_by_key_and_by_text():
    resolver, _, _ = _translated({"home": "Home", "월세": "Monthly rent"})
    assert resolver.resolve("홈", "home") == "Home"
    assert resolver.resolve("월세") == "Monthly rent"


def test_missing_key_falls_back_to_original():
    resolver, _, _ = _translated({"home": "Home"})
    for original in ["관리자", "새 매물 등록", "Housing Buddy"]:
        assert resolver.resolve(original, "no-such-key") == original
        assert resolver.resolve(original) == original


def test_empty_translation_falls_back():
    resolver, _, _ = _translated({"home": ""})
    assert resolver.resolve("홈", "home") == "홈"


def test_empty_original_returned_as_is():
    resolver, _, _ = _translated({"": "x"})
    assert resolver.resolve("") == ""
    assert resolver.resolve(None, "home") is None


def test_resolve_is_idempotent_and_pure():
    resolver, cache, state = _translated({"home": "Home"})
    before = (cache.snapshot(), state.is_translated, state.target_language)
    for original, key in [("홈", "home"), ("없음", None), ("", "home")]:
        assert resolver.resolve(original, key) == resolver.resolve(original, key)
    assert (cache.snapshot(), state.is_translated, state.target_language) == before


def test_ui_strings_use_prefixed_keys():
    resolver, _, _ = _translated({"ui-매물 둘러보기": "Browse listings"})
    assert resolver.ui("매물 둘러보기") == "Browse listings"
    assert resolver.ui("로그인하기") == "로그인하기"


def test_resolve_entity_uses_field_id_keys():
    resolver, _, _ = _translated({"title_7": "Cozy studio", "category_7": "Studio"})
    prop = {"id": 7, "title": "아늑한 원룸", "category": "원룸", "address": "서울", "monthly_rent": 500000}
    out = resolver.resolve_entity(prop)
    assert out["title"] == "Cozy studio"
    assert out["category"] == "Studio"
    assert out["address"] == "서울"
    assert out["monthly_rent"] == 500000
    assert prop["title"] == "아늑한 원룸"
