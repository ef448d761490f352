"""Google Cloud Translation (v2 REST) 최소 래퍼
- q 여러 개를 한 번에 보내고, TRANSLATE_BATCH_SIZE 단위로 쪼갬
- 같은 원문은 한 번만 번역
- 원문 언어 == 대상 언어면 네트워크 호출 없이 그대로 반환
"""
from __future__ import annotations

import html
import logging
from typing import Dict, Iterable, List, Tuple

import httpx
from fastapi import HTTPException

from app.core.logging import mask_secret
from app.core.settings import settings

logger = logging.getLogger(__name__)

ENDPOINT = "https://translation.googleapis.com/language/translate/v2"


class GoogleTranslateError(HTTPException): ...


def _chunks(items: List[str], size: int) -> Iterable[List[str]]:
    for i in range(0, len(items), size):
        yield items[i:i + size]


class GoogleTranslator:
    def __init__(
        self,
        api_key: str | None,
        *,
        source_language: str = "ko",
        timeout: float = 10.0,
        batch_size: int = 100,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.source_language = source_language
        self.timeout = timeout
        self.batch_size = max(1, min(batch_size, 128))
        self._transport = transport

    async def _call(self, client: httpx.AsyncClient, chunk: List[str], target: str) -> List[str]:
        body = {"q": chunk, "target": target, "source": self.source_language, "format": "text"}
        try:
            r = await client.post(ENDPOINT, params={"key": self.api_key}, json=body)
        except httpx.TimeoutException:
            raise GoogleTranslateError(status_code=504, detail="translation upstream timeout")
        except httpx.RequestError as e:
            raise GoogleTranslateError(status_code=502, detail=f"translation network error: {e}")

        if r.status_code != 200:
            try:
                msg = (r.json().get("error") or {}).get("message")
            except ValueError:
                msg = r.text[:200]
            logger.error("[GTRANSLATE] ◁ status=%s msg=%s", r.status_code, msg)
            raise GoogleTranslateError(status_code=502, detail={"upstream_status": r.status_code, "msg": msg})

        try:
            rows = r.json()["data"]["translations"]
        except (ValueError, KeyError, TypeError):
            raise GoogleTranslateError(status_code=502, detail="invalid translation response")
        if len(rows) != len(chunk):
            raise GoogleTranslateError(status_code=502, detail="translation count mismatch")
        # format=text 여도 가끔 엔티티가 섞여 옴
        return [html.unescape(row.get("translatedText", "")) for row in rows]

    async def translate_many(self, texts: List[str], target: str) -> List[str]:
        if target == self.source_language or not texts:
            return list(texts)
        if not self.api_key:
            raise GoogleTranslateError(status_code=503, detail="translation service not configured")

        logger.info(
            "[GTRANSLATE] → target=%s texts=%d batch=%d key=%s",
            target, len(texts), self.batch_size, mask_secret(self.api_key),
        )
        out: List[str] = []
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as c:
            for chunk in _chunks(texts, self.batch_size):
                out.extend(await self._call(c, chunk, target))
        logger.info("[GTRANSLATE] ◁ OK translated=%d", len(out))
        return out


async def translate_items(translator: GoogleTranslator, items: List[Tuple[str, str]], target: str) -> Dict[str, str]:
    """[(key, text)] → {key: 번역문}. 빈 문자열은 그대로, 중복 원문은 한 번만 호출."""
    unique: List[str] = []
    seen = set()
    for _, text in items:
        if text and text.strip() and text not in seen:
            seen.add(text)
            unique.append(text)

    translated = await translator.translate_many(unique, target)
    by_text = dict(zip(unique, translated))
    return {key: by_text.get(text, text) for key, text in items}


def get_translator() -> GoogleTranslator:
    return GoogleTranslator(
        settings.GOOGLE_TRANSLATE_API_KEY,
        source_language=settings.SOURCE_LANGUAGE,
        timeout=settings.TRANSLATE_TIMEOUT_SECONDS,
        batch_size=settings.TRANSLATE_BATCH_SIZE,
    )
