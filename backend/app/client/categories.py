from __future__ import annotations

import json
import logging
from typing import Iterable, List

from app.client.notifications import Notifier
from app.client.storage import LocalStorage
from app.utils.normalize import clean_text, norm_text, unique_categories

logger = logging.getLogger(__name__)

KEY_CATEGORIES = "customCategories"


class CategoryManager:
    """관리자가 추가한 카테고리 (매물에 아직 안 쓰인 것 포함). 로컬 저장소에만 보관."""

    def __init__(self, storage: LocalStorage, notifier: Notifier):
        self.storage = storage
        self.notifier = notifier
        self.custom: List[str] = self._load()

    def _load(self) -> List[str]:
        raw = self.storage.get_item(KEY_CATEGORIES)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("customCategories unreadable, ignoring")
            return []
        if not isinstance(data, list):
            return []
        return unique_categories(v for v in data if isinstance(v, str))

    def _save(self, values: List[str]) -> None:
        self.custom = values
        self.storage.set_item(KEY_CATEGORIES, json.dumps(values, ensure_ascii=False))

    def all_categories(self, used: Iterable[str] = ()) -> List[str]:
        return unique_categories([*used, *self.custom])

    def _exists(self, name: str, used: Iterable[str]) -> bool:
        key = norm_text(name)
        return any(norm_text(c) == key for c in self.all_categories(used))

    def add(self, name: str, used: Iterable[str] = ()) -> bool:
        name = clean_text(name)
        if not name:
            return False
        used = list(used)
        if self._exists(name, used):
            self.notifier.error("중복된 카테고리", "이미 존재하는 카테고리입니다.")
            return False
        self._save([*self.custom, name])
        self.notifier.notify("카테고리 추가 완료", f"'{name}' 카테고리가 추가되었습니다.")
        return True

    def rename(self, old: str, new: str, used: Iterable[str] = ()) -> bool:
        new = clean_text(new)
        if not new or old not in self.custom:
            return False
        used = list(used)
        if self._exists(new, used):
            self.notifier.error("중복된 카테고리", "이미 존재하는 카테고리명입니다.")
            return False
        self._save([new if c == old else c for c in self.custom])
        self.notifier.notify("카테고리 수정 완료", f"카테고리가 '{new}'로 변경되었습니다.")
        return True

    def remove(self, name: str, used: Iterable[str] = ()) -> bool:
        if name in set(used):
            self.notifier.error("삭제 불가", "해당 카테고리를 사용하는 매물이 있어서 삭제할 수 없습니다.")
            return False
        if name not in self.custom:
            return False
        self._save([c for c in self.custom if c != name])
        self.notifier.notify("카테고리 삭제 완료", f"'{name}' 카테고리가 삭제되었습니다.")
        return True
