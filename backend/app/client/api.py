"""Housing Buddy 백엔드 비동기 클라이언트
- 세션 쿠키를 유지해야 하므로 AsyncClient 하나를 계속 씀
- 실패는 전부 ApiError 로 (status 0 = 네트워크/타임아웃/응답 형식 오류)
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status: int, detail: Any = None):
        super().__init__(f"{status}: {detail}")
        self.status = status
        self.detail = detail

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


def _check(r: httpx.Response) -> Any:
    if r.status_code < 400:
        if not r.content:
            return None
        try:
            return r.json()
        except ValueError:
            raise ApiError(0, "invalid JSON response")
    try:
        detail = r.json().get("detail")
    except (ValueError, AttributeError):
        detail = r.text[:200]
    raise ApiError(r.status_code, detail)


class ApiClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kw) -> Any:
        try:
            r = await self._client.request(method, path, **kw)
        except httpx.TimeoutException:
            logger.warning("[API] %s %s timeout", method, path)
            raise ApiError(0, "timeout")
        except httpx.RequestError as e:
            logger.warning("[API] %s %s network error: %s", method, path, e)
            raise ApiError(0, f"network error: {e}")
        return _check(r)

    # ───── 번역 ─────
    async def translate_batch(self, items: Iterable[Dict[str, str]], target_lang: str) -> Dict[str, str]:
        body = {"texts": [{"key": i["key"], "text": i["text"]} for i in items], "target_lang": target_lang}
        data = await self._request("POST", "/api/translate-batch", json=body)
        translations = (data or {}).get("translations") if isinstance(data, dict) else None
        if not isinstance(translations, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in translations.items()
        ):
            raise ApiError(0, "malformed translation response")
        return translations

    async def languages(self) -> List[dict]:
        return await self._request("GET", "/api/languages")

    # ───── 인증 ─────
    async def register(self, email: str, password: str, name: str, phone: str | None = None) -> dict:
        body = {"email": email, "password": password, "name": name, "phone": phone}
        return await self._request("POST", "/api/auth/register", json=body)

    async def verify_email(self, email: str, code: str) -> dict:
        return await self._request("POST", "/api/auth/verify-email", json={"email": email, "code": code})

    async def resend_verification(self, email: str) -> dict:
        return await self._request("POST", "/api/auth/resend-verification", json={"email": email})

    async def login(self, email: str, password: str) -> dict:
        return await self._request("POST", "/api/auth/login", json={"email": email, "password": password})

    async def logout(self) -> None:
        await self._request("POST", "/api/auth/logout")

    async def me(self) -> dict:
        return await self._request("GET", "/api/auth/me")

    async def admin_login(self, password: str) -> dict:
        return await self._request("POST", "/api/admin/login", json={"password": password})

    async def admin_logout(self) -> dict:
        return await self._request("POST", "/api/admin/logout")

    async def admin_status(self) -> bool:
        data = await self._request("GET", "/api/admin/status")
        return bool(data and data.get("is_admin"))

    # ───── 매물 ─────
    async def list_properties(self, **filters) -> List[dict]:
        params = {k: v for k, v in filters.items() if v is not None}
        return await self._request("GET", "/api/properties", params=params)

    async def get_property(self, property_id: int) -> dict:
        return await self._request("GET", f"/api/properties/{property_id}")

    async def create_property(self, data: dict) -> dict:
        return await self._request("POST", "/api/properties", json=data)

    async def update_property(self, property_id: int, data: dict) -> dict:
        return await self._request("PUT", f"/api/properties/{property_id}", json=data)

    async def delete_property(self, property_id: int) -> dict:
        return await self._request("DELETE", f"/api/properties/{property_id}")

    async def categories(self) -> List[str]:
        return await self._request("GET", "/api/categories")

    async def list_trash(self) -> List[dict]:
        return await self._request("GET", "/api/trash")

    async def restore_property(self, property_id: int) -> dict:
        return await self._request("POST", f"/api/trash/{property_id}/restore")

    async def purge_property(self, property_id: int) -> dict:
        return await self._request("DELETE", f"/api/trash/{property_id}")

    # ───── 문의 댓글 ─────
    async def list_comments(self, property_id: int) -> List[dict]:
        return await self._request("GET", f"/api/properties/{property_id}/comments")

    async def create_comment(self, property_id: int, data: dict) -> dict:
        return await self._request("POST", f"/api/properties/{property_id}/comments", json=data)

    async def update_comment(self, comment_id: int, data: dict) -> dict:
        return await self._request("PUT", f"/api/comments/{comment_id}", json=data)

    async def delete_comment(self, comment_id: int, *, permanent: bool = False) -> dict:
        return await self._request("DELETE", f"/api/comments/{comment_id}",
                                   params={"permanent": str(permanent).lower()})

    async def my_inquiries(self) -> List[dict]:
        return await self._request("GET", "/api/my-inquiries")

    async def admin_comments(self) -> List[dict]:
        return await self._request("GET", "/api/admin/comments")

    # ───── 관심 매물 ─────
    async def list_favorites(self) -> List[dict]:
        return await self._request("GET", "/api/favorites")

    async def favorite_status(self, property_id: int) -> bool:
        data = await self._request("GET", f"/api/favorites/{property_id}/status")
        return bool(data and data.get("is_favorite"))

    async def add_favorite(self, property_id: int) -> Optional[dict]:
        return await self._request("POST", f"/api/favorites/{property_id}")

    async def remove_favorite(self, property_id: int) -> Optional[dict]:
        return await self._request("DELETE", f"/api/favorites/{property_id}")
