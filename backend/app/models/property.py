"""SQLAlchemy model for rental listings (soft-delete aware)."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Index, Integer, Text
from sqlalchemy.sql import func

from app.db.orm_registry import Base, JSONType


class Property(Base):
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True)

    title = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    deposit = Column(Integer, nullable=False)                  # 보증금(원)
    monthly_rent = Column(Integer, nullable=False)             # 월세(원)
    maintenance_fee = Column(Integer, nullable=True)           # 관리비(원). NULL=미상, 0=없음
    description = Column(Text, nullable=False)
    other_info = Column(Text, nullable=True)                   # 기타 입력 (옵션)
    photos = Column(JSONType, nullable=False, default=list)    # 순서 있는 이미지 URL 목록
    category = Column(Text, nullable=True, index=True)
    original_url = Column(Text, nullable=True)                 # 원본 매물 링크

    # 상태: 0/1 정수 (원본 스키마 유지)
    is_active = Column(Integer, nullable=False, default=1)
    is_deleted = Column(Integer, nullable=False, default=0)    # 1 = 휴지통
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_properties_is_deleted_created", "is_deleted", "created_at"),
    )

    def __repr__(self):
        return f"<Property(id={self.id}, title={self.title!r}, is_deleted={self.is_deleted})>"
