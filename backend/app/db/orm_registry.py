# backend/app/db/orm_registry.py
from __future__ import annotations

from typing import TYPE_CHECKING
from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

# 모든 ORM 모델이 상속할 단일 Base
Base = declarative_base()

# Postgres에선 JSONB, 그 외(sqlite 테스트)에선 JSON
JSONType = JSON().with_variant(JSONB(), "postgresql")

# 타입체커용 힌트. 런타임엔 실행되지 않음(순환 방지)
if TYPE_CHECKING:  # pragma: no cover
    from app.models.property import Property  # noqa: F401
    from app.models.comment import Comment    # noqa: F401
    from app.models.user import User          # noqa: F401
    from app.models.favorite import Favorite  # noqa: F401

def import_all_models() -> None:
    """
    필요 시 명시적으로 모델 모듈을 로드해 매퍼를 등록.
    - 웹앱 부팅 시 또는 Alembic env에서 호출.
    - 순환 임포트를 피하기 위해 여기서 지연 import.
    """
    import importlib

    for mod in (
        "app.models.property",
        "app.models.user",
        "app.models.comment",
        "app.models.favorite",
    ):
        importlib.import_module(mod)

__all__ = ["Base", "JSONType", "import_all_models"]
