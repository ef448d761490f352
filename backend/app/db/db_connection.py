# app/db/db_connection.py
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.core.settings import settings

SYNC_DATABASE_URL = settings.SYNC_DATABASE_URL  # postgresql+psycopg2://... (테스트는 sqlite)

if not SYNC_DATABASE_URL:
    raise RuntimeError("SYNC_DATABASE_URL is not set. Check your .env.")

_IS_SQLITE = SYNC_DATABASE_URL.startswith("sqlite")

sync_engine = create_engine(
    SYNC_DATABASE_URL,
    echo=False,
    future=True,
    pool_pre_ping=True,
    # FastAPI는 동기 라우트를 스레드풀에서 돌리므로 sqlite 스레드 체크 해제
    connect_args={"check_same_thread": False} if _IS_SQLITE else {},
)

# 접속 시 search_path 고정 (Postgres 전용)
if not _IS_SQLITE:
    @event.listens_for(sync_engine, "connect")
    def _set_search_path_sync(dbapi_conn, conn_record):
        with dbapi_conn.cursor() as cur:
            cur.execute("SET search_path TO public")

SessionLocal = sessionmaker(bind=sync_engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
