# backend/app/client/catalog.py
"""번역 대상 고정 UI 문구와 엔티티 필드 키 규칙."""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Tuple

# 매물에서 번역하는 필드
PROPERTY_TRANSLATABLE_FIELDS: Tuple[str, ...] = ("title", "address", "description", "category", "other_info")

# (key, 원문) 네비게이션 + 메인 + 빈 화면 문구
UI_TEXTS: Tuple[Tuple[str, str], ...] = (
    ("home", "홈"),
    ("favorites", "관심 매물"),
    ("inquiries", "문의 내역"),
    ("login-signup", "로그인 / 회원가입"),
    ("logout", "로그아웃"),
    ("account-settings", "계정 설정"),
    ("greeting-suffix", "님 안녕하세요!"),
    ("admin-login", "관리자 로그인"),
    ("housing-buddy", "Housing Buddy"),
    ("admin", "관리자"),
    ("new-property", "새 매물 등록"),
    ("category-management", "카테고리 관리"),
    ("login-required", "로그인이 필요합니다..."),
    ("login", "로그인"),
    ("main-title-1", "한국에서 찾는"),
    ("main-title-2", "나의 첫 집"),
    ("main-desc-new", "외국인을 위한 편리한 주거 솔루션"),
    ("housing-buddy-name", "하우징버디"),
    ("meet-housing-buddy", "를 만나보세요"),
    ("university", "대학교"),
    ("university-select", "대학교 선택"),
    ("monthly-rent", "월세"),
    ("10k-won", "만원"),
    ("include-maintenance", "관리비 포함하여 계산"),
    ("search-properties", "매물 찾기"),
    ("university-property-search", "대학교별 매물 찾기"),
    ("university-property-desc", "내가 다닐 대학교 근처의 안전하고 편리한 매물을 확인해보세요"),
    ("recommended-properties", "추천 매물"),
    ("recommended-desc", "하우징버디가 추천하는 매물"),
    ("new-badge", "신규"),
    ("deposit", "보증금"),
    ("won", "원"),
    ("view-details", "자세히 보기"),
    ("view-all", "전체보기"),
    # 대학교
    ("seoul-national-university", "서울대학교"),
    ("yonsei-university", "연세대학교"),
    ("korea-university", "고려대학교"),
    ("hongik-university", "홍익대학교"),
    ("ewha-womans-university", "이화여자대학교"),
    ("sogang-university", "서강대학교"),
    ("sungkyunkwan-university", "성균관대학교"),
    ("hanyang-university", "한양대학교"),
    # 지역
    ("gwanak-gu", "관악구"),
    ("seodaemun-gu", "서대문구"),
    ("seongbuk-gu", "성북구"),
    ("mapo-gu", "마포구"),
    ("jongno-gu", "종로구"),
    ("jangan-gu", "장안구"),
    ("auth-welcome", "한국의 외국인을 위한 부동산 플랫폼에 오신 것을 환영합니다"),
)

# 페이지 본문 문구는 ui-{원문} 키
PAGE_TEXTS: Tuple[str, ...] = (
    "관심 매물이 없습니다",
    "마음에 드는 매물을 찾아 하트를 눌러보세요.",
    "매물 둘러보기",
    "문의 내역이 없습니다",
    "매물에 문의를 남겨보세요.",
    "아직 관리자 답변이 없습니다. 곧 답변드리겠습니다.",
    "로그인이 필요합니다",
    "문의 내역을 확인하려면 로그인해주세요.",
    "로그인하기",
    "관심 매물을 확인하려면 로그인해주세요.",
)


def ui_key(text: str) -> str:
    return f"ui-{text}"


def entity_key(field: str, entity_id) -> str:
    return f"{field}_{entity_id}"


def catalog_items() -> List[Dict[str, str]]:
    items = [{"key": k, "text": t} for k, t in UI_TEXTS]
    items += [{"key": ui_key(t), "text": t} for t in PAGE_TEXTS]
    return items


def entity_items(entities: Iterable[Mapping], fields: Iterable[str] = PROPERTY_TRANSLATABLE_FIELDS) -> List[Dict[str, str]]:
    """id 가 있는 dict 들에서 비어있지 않은 필드만 {key, text} 로."""
    fields = tuple(fields)
    out: List[Dict[str, str]] = []
    for e in entities:
        eid = e.get("id")
        if eid is None:
            continue
        for f in fields:
            text = e.get(f)
            if isinstance(text, str) and text.strip():
                out.append({"key": entity_key(f, eid), "text": text})
    return out
