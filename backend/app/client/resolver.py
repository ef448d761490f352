from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from app.client.catalog import PROPERTY_TRANSLATABLE_FIELDS, entity_key, ui_key
from app.client.translation_cache import TranslationCache, TranslationState


class TextResolver:
    """렌더링마다 불러도 되는 순수 조회. 번역이 없으면 항상 원문."""

    def __init__(self, cache: TranslationCache, state: TranslationState):
        self.cache = cache
        self.state = state

    def resolve(self, original: Optional[str], key: Optional[str] = None) -> Optional[str]:
        if not self.state.is_translated or not original:
            return original
        value = self.cache.get(key if key is not None else original)
        return value or original

    def ui(self, text: str) -> str:
        return self.resolve(text, ui_key(text))

    def resolve_entity(
        self, entity: Mapping, fields: Iterable[str] = PROPERTY_TRANSLATABLE_FIELDS
    ) -> Dict:
        out = dict(entity)
        eid = entity.get("id")
        for f in fields:
            if f in out and eid is not None:
                out[f] = self.resolve(out[f], entity_key(f, eid))
        return out
