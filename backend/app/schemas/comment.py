# app/schemas/comment.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(..., min_length=1)
    author_name: Optional[str] = None      # 미지정 시 로그인 사용자 이름
    author_contact: Optional[str] = None
    is_admin_only: bool = False


class CommentUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: Optional[str] = Field(None, min_length=1)
    author_contact: Optional[str] = None
    is_admin_only: Optional[bool] = None
    # 관리자 전용 필드
    admin_memo: Optional[str] = None
    admin_reply: Optional[str] = None


class CommentOut(BaseModel):
    """보는 사람에 따라 content/author_contact/admin_memo 가 빠질 수 있음."""
    id: int
    property_id: int
    user_id: Optional[int] = None
    author_name: str
    content: Optional[str] = None
    author_contact: Optional[str] = None
    is_admin_only: int
    admin_memo: Optional[str] = None
    admin_reply: Optional[str] = None
    admin_reply_at: Optional[datetime] = None
    is_hidden: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PropertyRef(BaseModel):
    id: int
    title: str


class InquiryOut(CommentOut):
    property: Optional[PropertyRef] = None
