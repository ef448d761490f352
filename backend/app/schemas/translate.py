from typing import Dict, List

from pydantic import BaseModel, Field


class TranslateItem(BaseModel):
    key: str = Field(..., min_length=1)
    text: str


class TranslateBatchIn(BaseModel):
    texts: List[TranslateItem]
    target_lang: str = Field(..., min_length=2)


class TranslateBatchOut(BaseModel):
    translations: Dict[str, str]


class TranslateIn(BaseModel):
    text: str = Field(..., min_length=1)
    target_lang: str = Field(..., min_length=2)


class TranslateOut(BaseModel):
    translated_text: str


class Language(BaseModel):
    code: str
    name: str
    flag: str
