import json

from app.client import CategoryManager, LocalStorage, Notifier


def _manager(storage=None):
    return CategoryManager(storage or LocalStorage(), Notifier())


def test_add_and_persist(tmp_path):
    storage = LocalStorage(tmp_path / "s.json")
    m = _manager(storage)
    assert m.add("쉐어하우스") is True
    assert json.loads(storage.get_item("customCategories")) == ["쉐어하우스"]
    assert _manager(LocalStorage(tmp_path / "s.json")).custom == ["쉐어하우스"]


def test_duplicates_rejected_including_used():
    m = _manager()
    assert m.add("원룸", used=["원룸"]) is False
    assert m.add("오피스텔") is True
    assert m.add(" 오피스텔 ") is False
    assert m.notifier.drain()[-1].variant == "destructive"


def test_all_categories_union():
    m = _manager()
    m.add("고시원")
    assert m.all_categories(["원룸", "투룸", "원룸"]) == ["원룸", "투룸", "고시원"]


def test_rename_custom_only():
    m = _manager()
    m.add("고시원")
    assert m.rename("고시원", "고시텔") is True
    assert m.custom == ["고시텔"]
    assert m.rename("원룸", "스튜디오", used=["원룸"]) is False
    assert m.rename("고시텔", "원룸", used=["원룸"]) is False


def test_remove_used_category_rejected():
    m = _manager()
    m.add("원룸")
    assert m.remove("원룸", used=["원룸"]) is False
    assert m.custom == ["원룸"]
    assert m.remove("원룸") is True
    assert m.custom == []


def test_corrupted_value_ignored():
    storage = LocalStorage()
    storage.set_item("customCategories", "not-json")
    assert _manager(storage).custom == []
