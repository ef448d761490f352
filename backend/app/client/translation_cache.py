from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from app.client.storage import LocalStorage

logger = logging.getLogger(__name__)

KEY_DATA = "translatedData"
KEY_FLAG = "isTranslated"
KEY_LANGUAGE = "selectedLanguage"


@dataclass
class TranslationState:
    is_translated: bool = False
    is_translating: bool = False
    target_language: str = "ko"


def _valid_snapshot(data) -> bool:
    return isinstance(data, dict) and all(isinstance(k, str) and isinstance(v, str) for k, v in data.items())


class TranslationCache:
    """
    대상 언어 하나에 대한 번역 캐시 (key → 번역문).
    - language: 현재 캐시에 담긴 번역의 언어 (비어있으면 None)
    - 상태 플래그 변경은 오케스트레이터를 통해서만
    """

    def __init__(self, storage: LocalStorage, state: TranslationState, *, source_language: str = "ko"):
        self.storage = storage
        self.state = state
        self.source_language = source_language
        self.language: Optional[str] = None
        self._entries: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._entries)

    def set_all(self, entries: Mapping[str, str], *, language: Optional[str] = None) -> None:
        # 병합만. 기존 키는 지우지 않음
        self._entries.update(entries)
        if language is not None:
            self.language = language
        self._persist_data()

    def clear(self) -> None:
        self._entries.clear()
        self.language = None
        self.storage.remove_item(KEY_DATA)
        self.storage.remove_item(KEY_FLAG)

    def commit(self, language: str) -> None:
        """병합이 끝난 뒤 번역 상태 확정."""
        if not self._entries:
            logger.warning("commit(%s) on empty cache ignored", language)
            return
        self.language = language
        self.state.is_translated = True
        self.state.target_language = language
        self.storage.set_item(KEY_FLAG, "true")
        self.storage.set_item(KEY_LANGUAGE, language)

    def reset(self) -> None:
        """원문 언어로 되돌림."""
        self.clear()
        self.state.is_translated = False
        self.state.target_language = self.source_language
        self.storage.set_item(KEY_LANGUAGE, self.source_language)

    def restore(self) -> bool:
        flag = self.storage.get_item(KEY_FLAG)
        language = self.storage.get_item(KEY_LANGUAGE)
        raw = self.storage.get_item(KEY_DATA)

        data = None
        if raw:
            try:
                data = json.loads(raw)
            except ValueError as e:
                logger.warning("translation snapshot unreadable: %s", e)

        if flag == "true" and language and language != self.source_language and _valid_snapshot(data) and data:
            self._entries = dict(data)
            self.language = language
            self.state.is_translated = True
            self.state.target_language = language
            logger.info("translation snapshot restored: language=%s keys=%d", language, len(self._entries))
            return True

        if raw is not None or flag is not None:
            logger.info("translation snapshot rejected (flag=%s language=%s)", flag, language)
            self.clear()
        self._entries = {}
        self.language = None
        self.state.is_translated = False
        self.state.target_language = self.source_language
        return False

    def _persist_data(self) -> None:
        self.storage.set_item(KEY_DATA, json.dumps(self._entries, ensure_ascii=False))
