# backend/app/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.core.logging import setup_logging
from app.core.settings import settings
from app.db import close_db, init_db
from app.db.db_connection import SessionLocal

# 외부 API 프록시 (routers/)
from app.routers.translate import router as translate_router    # /api/translate-batch

# 내부 데이터 API (api/)
from app.api.properties import router as properties_router      # /api/properties
from app.api.trash import router as trash_router                # /api/trash
from app.api.comments import router as comments_router          # /api/.../comments
from app.api.favorites import router as favorites_router        # /api/favorites
from app.api.auth import admin_router, router as auth_router    # /api/auth, /api/admin

logger = logging.getLogger("housing_buddy")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    logger.info("[STARTUP] source_language=%s translate=%s admin=%s",
                settings.SOURCE_LANGUAGE,
                "on" if settings.GOOGLE_TRANSLATE_API_KEY else "off",
                "on" if settings.ADMIN_PASSWORD else "off")
    yield
    close_db()


app = FastAPI(
    title="Housing Buddy API",
    lifespan=lifespan,
)

# ───── CORS ─────
ALLOW_ALL = settings.HS_API_ALLOW_ALL
app.add_middleware(
   CORSMiddleware,
   allow_origins=(["*"] if ALLOW_ALL else settings.cors_origins()),
   allow_methods=["*"],
   allow_headers=["*"],
   allow_credentials=not ALLOW_ALL,  # 세션 쿠키 사용
)


# ───── 검증 오류는 400 ─────
@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


# ───── Health ─────
@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/health/db")
def health_db():
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"db": True}
    except Exception:
        logger.exception("db health check failed")
        return {"db": False}

# ───── Routers ─────
app.include_router(properties_router)
app.include_router(trash_router)
app.include_router(comments_router)
app.include_router(favorites_router)
app.include_router(auth_router)
app.include_router(admin_router)

# 외부 서비스 프록시
app.include_router(translate_router)


@app.middleware("http")
async def log_timing(request, call_next):
    t0 = time.perf_counter()
    resp = await call_next(request)
    dt = (time.perf_counter() - t0) * 1000
    logger.info("[%s] %s?%s -> %s %.1fms", request.method, request.url.path,
                request.query_params, resp.status_code, dt)
    return resp
