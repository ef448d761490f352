"""Resend 메일 발송 (REST, httpx).

키가 없거나 발송 실패해도 예외를 올리지 않고 False 를 돌려준다.
가입 자체는 성공시키고, 재발송으로 복구할 수 있게.
"""
import html
import logging

import httpx

from app.core.logging import mask_secret
from app.core.settings import settings

logger = logging.getLogger(__name__)

RESEND_URL = "https://api.resend.com/emails"


def _verification_html(code: str, link: str) -> str:
    return f"""
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: Arial, sans-serif; color: #333;">
  <h1>🏠 Housing Buddy</h1>
  <p>Housing Buddy에 가입해주셔서 감사합니다. 계정 활성화를 위해 이메일 인증이 필요합니다.</p>
  <p><strong>인증 코드:</strong></p>
  <div style="font-size: 24px; font-weight: bold; letter-spacing: 3px;">{html.escape(code)}</div>
  <p>또는 아래 링크를 눌러 인증을 완료하세요:</p>
  <p><a href="{html.escape(link, quote=True)}">이메일 인증 완료</a></p>
  <p><small>이 링크는 {settings.VERIFICATION_TTL_HOURS}시간 후 만료됩니다.</small></p>
</body>
</html>
"""


async def send_email_verification(to: str, code: str, token: str,
                                  transport: httpx.AsyncBaseTransport | None = None) -> bool:
    api_key = settings.RESEND_API_KEY
    if not api_key:
        logger.warning("RESEND_API_KEY not configured; verification mail to %s skipped", to)
        return False

    link = f"{settings.APP_BASE_URL.rstrip('/')}/api/auth/verify-email?token={token}"
    payload = {
        "from": settings.EMAIL_FROM,
        "to": [to],
        "subject": "🏠 Housing Buddy 이메일 인증",
        "html": _verification_html(code, link),
    }
    headers = {"Authorization": f"Bearer {api_key}"}
    logger.info("[RESEND] → verification to=%s key=%s", to, mask_secret(api_key))
    try:
        async with httpx.AsyncClient(timeout=10.0, headers=headers, transport=transport) as c:
            r = await c.post(RESEND_URL, json=payload)
        r.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("[RESEND] ◁ status=%s body=%s", e.response.status_code, e.response.text[:200])
        return False
    except httpx.RequestError as e:
        logger.error("[RESEND] ◁ network error: %s", e)
        return False
    logger.info("[RESEND] ◁ OK status=%s", r.status_code)
    return True
