"""SQLAlchemy model for property inquiries (comments)."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.orm_registry import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    author_name = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    author_contact = Column(Text, nullable=True)        # 관리자만 열람

    is_admin_only = Column(Integer, nullable=False, default=0)  # 1 = 관리자(와 작성자)만
    admin_memo = Column(Text, nullable=True)            # 관리자 내부 메모
    admin_reply = Column(Text, nullable=True)
    admin_reply_at = Column(DateTime(timezone=True), nullable=True)

    is_deleted = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    listing = relationship("Property", lazy="joined")

    def __repr__(self):
        return f"<Comment(id={self.id}, property_id={self.property_id}, user_id={self.user_id})>"
