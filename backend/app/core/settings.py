from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 정의 안 된 ENV는 무시
    )

    # ---- DB ----
    SYNC_DATABASE_URL: str | None = Field(None, alias="SYNC_DATABASE_URL")

    # ---- 번역 ----
    SOURCE_LANGUAGE: str = Field("ko", alias="SOURCE_LANGUAGE")
    GOOGLE_TRANSLATE_API_KEY: str | None = Field(None, alias="GOOGLE_TRANSLATE_API_KEY")
    TRANSLATE_TIMEOUT_SECONDS: float = Field(10.0, alias="TRANSLATE_TIMEOUT_SECONDS")
    TRANSLATE_BATCH_SIZE: int = Field(100, alias="TRANSLATE_BATCH_SIZE")  # Google v2 상한 128

    # ---- 관리자 / 세션 ----
    ADMIN_PASSWORD: str | None = Field(None, alias="ADMIN_PASSWORD")
    SESSION_COOKIE_NAME: str = Field("hb_session", alias="SESSION_COOKIE_NAME")
    SESSION_TTL_HOURS: int = Field(24 * 7, alias="SESSION_TTL_HOURS")
    SESSION_COOKIE_SECURE: bool = Field(False, alias="SESSION_COOKIE_SECURE")

    # ---- 메일 (Resend) ----
    RESEND_API_KEY: str | None = Field(None, alias="RESEND_API_KEY")
    EMAIL_FROM: str = Field("Housing Buddy <onboarding@resend.dev>", alias="EMAIL_FROM")
    APP_BASE_URL: str = Field("http://localhost:5000", alias="APP_BASE_URL")
    VERIFICATION_TTL_HOURS: int = Field(24, alias="VERIFICATION_TTL_HOURS")

    # ---- CORS ----
    HS_API_ALLOWED_ORIGINS: str = Field("", alias="HS_API_ALLOWED_ORIGINS")
    HS_API_ALLOW_ALL: bool = Field(False, alias="HS_API_ALLOW_ALL")

    def cors_origins(self) -> List[str]:
        """콤마 구분 ENV → 리스트. 미지정 시 로컬 개발 도메인."""
        raw = self.HS_API_ALLOWED_ORIGINS.strip()
        if raw:
            return [o.strip() for o in raw.split(",") if o.strip()]
        return [
            "http://localhost:5000",
            "http://127.0.0.1:5000",
            "http://localhost:5173",  # vite dev
            "http://127.0.0.1:5173",
        ]


settings = Settings()
