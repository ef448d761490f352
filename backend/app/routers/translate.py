# backend/app/routers/translate.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from app.schemas.translate import (
    Language,
    TranslateBatchIn,
    TranslateBatchOut,
    TranslateIn,
    TranslateOut,
)
from app.services.google_translate import GoogleTranslator, get_translator, translate_items
from app.services.languages import SUPPORTED_LANGUAGES

router = APIRouter(prefix="/api", tags=["translate"])


@router.post("/translate-batch", response_model=TranslateBatchOut)
async def translate_batch(body: TranslateBatchIn, translator: GoogleTranslator = Depends(get_translator)):
    """
    UI 문구/매물 필드를 한 번에 번역.
    - 요청: {texts: [{key, text}], target_lang}
    - 응답: {translations: {key: 번역문}}
    """
    items = [(t.key, t.text) for t in body.texts]
    translations = await translate_items(translator, items, body.target_lang)
    return {"translations": translations}


@router.post("/translate", response_model=TranslateOut)
async def translate_one(body: TranslateIn, translator: GoogleTranslator = Depends(get_translator)):
    out = await translate_items(translator, [("text", body.text)], body.target_lang)
    return {"translated_text": out["text"]}


@router.get("/languages", response_model=List[Language])
def languages():
    return SUPPORTED_LANGUAGES
