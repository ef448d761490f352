# app/db/__init__.py
from .db_connection import SessionLocal, get_db, sync_engine
from .orm_registry import Base, import_all_models


def init_db() -> None:
    # 운영에선 alembic이 스키마를 관리. 여기선 매퍼 등록만.
    import_all_models()


def close_db() -> None:
    # 서버 종료 시 커넥션 풀 정리
    sync_engine.dispose()


__all__ = ["Base", "SessionLocal", "get_db", "init_db", "close_db", "sync_engine"]
