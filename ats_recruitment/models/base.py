"""
SQLModel 基类模块

定义通用字段、混入类和时间处理工具
"""
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional
from pydantic import field_validator
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    """当前 UTC 时间（带时区）"""
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    统一转换为带时区的 UTC 时间

    SQLite 读回的时间不带时区，按 UTC 处理
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def DateTimeField(*args, **kwargs):
    """带时区的时间字段"""
    return Field(*args, sa_type=DateTime(timezone=True), **kwargs)


class ActorRole(str, Enum):
    """参与者角色（JWT 载荷中的 type 判别符）"""
    SYSTEM_ADMIN = "systemAdmin"
    HR_RECRUITER = "hrRecruiter"
    TECH_REVIEWER = "techReviewer"
    APPLICANT = "applicant"


# 请求体中的角色取值
ActorRoleName = Literal["systemAdmin", "hrRecruiter", "techReviewer", "applicant"]
ParticipantRoleName = Literal["applicant", "hrRecruiter", "techReviewer"]


class SQLModelBase(SQLModel):
    """
    SQLModel 基类配置

    所有 Schema 类都应继承此类
    """
    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }

    @field_validator("*", mode="after")
    @classmethod
    def normalize_datetimes(cls, v):
        if isinstance(v, datetime):
            return as_utc(v)
        return v


class TimestampMixin(SQLModel):
    """时间戳混入类 - 用于表模型"""
    created_at: datetime = DateTimeField(
        default_factory=utcnow,
        nullable=False,
        description="创建时间"
    )
    updated_at: datetime = DateTimeField(
        default_factory=utcnow,
        nullable=False,
        description="更新时间"
    )


class SoftDeleteMixin(SQLModel):
    """软删除混入类 - deleted_at 非空即视为已删除"""
    deleted_at: Optional[datetime] = DateTimeField(
        None,
        nullable=True,
        index=True,
        description="删除时间"
    )


class IDMixin(SQLModel):
    """ID 混入类 - 用于表模型"""
    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        primary_key=True,
        max_length=36,
        description="主键ID"
    )


class TimestampResponse(SQLModelBase):
    """带时间戳的响应基类"""
    id: str
    created_at: datetime
    updated_at: datetime


class SoftDeleteResponse(TimestampResponse):
    """可软删除实体的响应基类"""
    deleted_at: Optional[datetime] = None


class PageRequest(SQLModelBase):
    """
    列表检索请求基类

    各实体在此基础上追加可选筛选字段；
    区间筛选字段统一命名为 <列名>_from / <列名>_to
    """
    page: Optional[int] = Field(None, description="页码，从 1 开始")
    limit: Optional[int] = Field(None, description="每页数量")
    search: Optional[str] = Field(None, description="关键词（模糊匹配）")
    sort_by: Optional[str] = Field(None, description="排序字段")
    sort_order: Optional[Literal["asc", "desc"]] = Field(None, description="排序方向")
