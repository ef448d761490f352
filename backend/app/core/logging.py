import logging

LOG_FORMAT = "%(asctime)s %(levelname)s | %(message)s"


def setup_logging(level: int = logging.INFO) -> None:
    """앱/스크립트 진입점에서 한 번 호출."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # 쿼리 로그는 너무 많아서 WARNING 이상만
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def mask_secret(value: str | None) -> str:
    if not value:
        return "<unset>"
    return f"****{value[-4:]}"
