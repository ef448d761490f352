"""Utility helpers for normalising listing input and money units."""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

_SPACE_RE = re.compile(r"\s+")

HOSTED_IMAGE_PREFIX = "https://res.cloudinary.com/"


def norm_text(value: Optional[str]) -> Optional[str]:
    """Return a compact, lower-cased string or ``None`` for empty input."""
    if not value:
        return None
    normalized = _SPACE_RE.sub("", str(value)).strip().lower()
    return normalized or None


def clean_text(value: Optional[str]) -> Optional[str]:
    """Collapse inner whitespace and trim; empty → ``None``."""
    if value is None:
        return None
    cleaned = _SPACE_RE.sub(" ", str(value)).strip()
    return cleaned or None


def manwon_to_won(value: object) -> Optional[int]:
    """Convert values expressed in 만원 into 원 as int.

    - 쉼표/공백 허용: "1,234" -> 12340000
    - 부동소수 오차 방지를 위해 Decimal 사용
    """
    if value in (None, ""):
        return None
    s = str(value).strip().replace(",", "")
    if s == "":
        return None
    try:
        return int((Decimal(s) * Decimal(10000)).to_integral_value())
    except (InvalidOperation, ValueError, TypeError):
        return None


def is_hosted_image(url: Optional[str]) -> bool:
    return bool(url) and str(url).startswith(HOSTED_IMAGE_PREFIX)


def thumbnail_photos(photos: Optional[Iterable[str]]) -> List[str]:
    """목록 화면용: 첫 사진이 호스팅 URL일 때만 그 한 장. base64 등은 제외."""
    photos = list(photos or [])
    if photos and is_hosted_image(photos[0]):
        return [photos[0]]
    return []


def unique_categories(values: Iterable[Optional[str]]) -> List[str]:
    """공백/대소문자만 다른 카테고리는 하나로. 처음 나온 표기를 유지."""
    seen = set()
    out: List[str] = []
    for v in values:
        cleaned = clean_text(v)
        key = norm_text(cleaned)
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(cleaned)
    return out
