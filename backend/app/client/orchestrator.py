"""언어 변경 한 번 = 배치 번역 호출 한 번
- 나중에 누른 언어가 이김: 응답 시점에 요청 언어가 아직 선택된 언어인지 확인
- 실패 시 캐시/플래그는 그대로, 토스트만
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from app.client.api import ApiClient, ApiError
from app.client.catalog import PROPERTY_TRANSLATABLE_FIELDS, catalog_items, entity_items
from app.client.notifications import Notifier
from app.client.translation_cache import TranslationCache, TranslationState

logger = logging.getLogger(__name__)


class TranslationOrchestrator:
    def __init__(
        self,
        api: ApiClient,
        cache: TranslationCache,
        state: TranslationState,
        notifier: Notifier,
        *,
        source_language: str = "ko",
    ):
        self.api = api
        self.cache = cache
        self.state = state
        self.notifier = notifier
        self.source_language = source_language
        self._visible: Dict[str, str] = {}
        self._pending: Optional[str] = None  # 가장 최근에 요청한 언어
        self._generation = 0

    def set_visible_entities(
        self, entities: Iterable[Mapping], fields: Iterable[str] = PROPERTY_TRANSLATABLE_FIELDS
    ) -> None:
        """현재 화면에 보이는 엔티티 등록 (다음 translate_all 에 포함)."""
        self._visible = {i["key"]: i["text"] for i in entity_items(entities, fields)}

    def collect_items(self) -> List[Dict[str, str]]:
        items = catalog_items()
        items += [{"key": k, "text": t} for k, t in self._visible.items()]
        return items

    async def translate_all(self, target_lang: str) -> bool:
        self._generation += 1
        generation = self._generation

        if target_lang == self.source_language:
            # 진행 중 요청이 있으면 그 응답은 버려짐
            self._pending = None
            self.cache.reset()
            self.state.is_translating = False
            logger.info("translation reset to source language %s", target_lang)
            return True

        self._pending = target_lang
        self.state.is_translating = True
        try:
            items = self.collect_items()
            logger.info("[translate] → lang=%s items=%d", target_lang, len(items))
            translations = await self.api.translate_batch(items, target_lang)
        except ApiError as e:
            logger.warning("[translate] ◁ lang=%s failed: %s", target_lang, e)
            if generation == self._generation:
                self._pending = None
                self.notifier.error("번역 실패", "번역 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요.")
            return False
        else:
            if self._pending != target_lang:
                logger.info("[translate] ◁ lang=%s stale response discarded", target_lang)
                return False
            if self.cache.language not in (None, target_lang):
                self.cache.clear()
            self.cache.set_all(translations, language=target_lang)
            self.cache.commit(target_lang)
            logger.info("[translate] ◁ lang=%s keys=%d", target_lang, len(translations))
            return True
        finally:
            if generation == self._generation:
                self.state.is_translating = False

    async def translate_entities(
        self, entities: Iterable[Mapping], fields: Iterable[str] = PROPERTY_TRANSLATABLE_FIELDS
    ) -> bool:
        """카드 하나 같은 소량 번역. 이미 번역 모드일 때만 의미 있음."""
        if not self.state.is_translated:
            return False
        target = self.state.target_language
        items = entity_items(entities, fields)
        missing = [i for i in items if i["key"] not in self.cache]
        if not missing:
            return True
        try:
            translations = await self.api.translate_batch(missing, target)
        except ApiError as e:
            logger.warning("[translate] entity batch lang=%s failed: %s", target, e)
            self.notifier.error("번역 실패", "매물 정보를 번역하지 못했습니다.")
            return False
        # 그사이 언어가 바뀌었으면 버림
        if not self.state.is_translated or self.cache.language != target or self._pending not in (None, target):
            logger.info("[translate] entity batch lang=%s discarded", target)
            return False
        self.cache.set_all(translations)
        return True
