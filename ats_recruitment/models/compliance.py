"""
合规日志模型模块 - SQLModel 版本

审计轨迹、访问日志、脱敏日志、数据删除日志、认证失败记录。
全部为只追加表，由系统写入，管理员只读
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field

from .base import (
    SQLModelBase,
    TimestampMixin,
    IDMixin,
    TimestampResponse,
    PageRequest,
    DateTimeField,
    utcnow,
)


# ==================== 审计轨迹 ====================

class AuditTrail(TimestampMixin, IDMixin, SQLModelBase, table=True):
    """审计轨迹表模型"""
    __tablename__ = "ats_recruitment_audit_trails"

    actor_id: Optional[str] = Field(None, max_length=36, index=True)
    actor_role: Optional[str] = Field(None, max_length=50)
    operation_type: str = Field(..., max_length=50, index=True, description="CREATE / UPDATE / DELETE")
    target_type: str = Field(..., max_length=100, index=True)
    target_id: Optional[str] = Field(None, max_length=36, index=True)
    event_detail: Optional[str] = Field(None, description="变更前后快照 JSON 文本")
    ip_address: Optional[str] = Field(None, max_length=64)
    user_agent: Optional[str] = Field(None, max_length=500)
    event_timestamp: datetime = DateTimeField(default_factory=utcnow, nullable=False, index=True)


class AuditTrailResponse(TimestampResponse):
    actor_id: Optional[str] = None
    actor_role: Optional[str] = None
    operation_type: str
    target_type: str
    target_id: Optional[str] = None
    event_detail: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    event_timestamp: datetime


class AuditTrailRequest(PageRequest):
    actor_id: Optional[str] = None
    actor_role: Optional[str] = None
    operation_type: Optional[str] = None
    target_type: Optional[str] = None
    target_id: Optional[str] = None
    event_timestamp_from: Optional[datetime] = None
    event_timestamp_to: Optional[datetime] = None


# ==================== 访问日志 ====================

class AccessLog(TimestampMixin, IDMixin, SQLModelBase, table=True):
    """敏感数据访问日志表模型"""
    __tablename__ = "ats_recruitment_access_logs"

    actor_id: str = Field(..., max_length=36, index=True)
    actor_role: str = Field(..., max_length=50)
    target_type: str = Field(..., max_length=100)
    target_id: str = Field(..., max_length=36, index=True)
    access_type: str = Field("read", max_length=50)
    accessed_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class AccessLogResponse(TimestampResponse):
    actor_id: str
    actor_role: str
    target_type: str
    target_id: str
    access_type: str
    accessed_at: datetime


class AccessLogRequest(PageRequest):
    actor_id: Optional[str] = None
    actor_role: Optional[str] = None
    target_type: Optional[str] = None
    target_id: Optional[str] = None
    accessed_at_from: Optional[datetime] = None
    accessed_at_to: Optional[datetime] = None


# ==================== 脱敏日志 ====================

class MaskingLog(TimestampMixin, IDMixin, SQLModelBase, table=True):
    """数据脱敏日志表模型"""
    __tablename__ = "ats_recruitment_masking_logs"

    actor_id: str = Field(..., max_length=36, index=True)
    actor_role: str = Field(..., max_length=50)
    target_type: str = Field(..., max_length=100)
    target_id: str = Field(..., max_length=36, index=True)
    masked_fields: str = Field(..., max_length=500, description="逗号分隔的字段名")
    reason: Optional[str] = Field(None, max_length=500)
    masked_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class MaskingLogResponse(TimestampResponse):
    actor_id: str
    actor_role: str
    target_type: str
    target_id: str
    masked_fields: str
    reason: Optional[str] = None
    masked_at: datetime


class MaskingLogRequest(PageRequest):
    actor_id: Optional[str] = None
    target_type: Optional[str] = None
    target_id: Optional[str] = None
    masked_at_from: Optional[datetime] = None
    masked_at_to: Optional[datetime] = None


# ==================== 数据删除日志 ====================

class DataDeletionLog(TimestampMixin, IDMixin, SQLModelBase, table=True):
    """数据删除日志表模型"""
    __tablename__ = "ats_recruitment_data_deletion_logs"

    actor_id: str = Field(..., max_length=36, index=True)
    actor_role: str = Field(..., max_length=50)
    target_type: str = Field(..., max_length=100)
    target_id: str = Field(..., max_length=36, index=True)
    reason: Optional[str] = Field(None, max_length=500)
    deleted_at_snapshot: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class DataDeletionLogResponse(TimestampResponse):
    actor_id: str
    actor_role: str
    target_type: str
    target_id: str
    reason: Optional[str] = None
    deleted_at_snapshot: datetime


class DataDeletionLogRequest(PageRequest):
    actor_id: Optional[str] = None
    target_type: Optional[str] = None
    target_id: Optional[str] = None
    deleted_at_snapshot_from: Optional[datetime] = None
    deleted_at_snapshot_to: Optional[datetime] = None


# ==================== 认证失败 ====================

class AuthenticationFailure(TimestampMixin, IDMixin, SQLModelBase, table=True):
    """登录失败记录表模型"""
    __tablename__ = "ats_recruitment_authentication_failures"

    attempted_email: str = Field(..., max_length=255, index=True)
    actor_role: str = Field(..., max_length=50)
    failure_reason: str = Field(..., max_length=255)
    ip_address: Optional[str] = Field(None, max_length=64)
    user_agent: Optional[str] = Field(None, max_length=500)
    attempted_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class AuthenticationFailureResponse(TimestampResponse):
    attempted_email: str
    actor_role: str
    failure_reason: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    attempted_at: datetime


class AuthenticationFailureRequest(PageRequest):
    attempted_email: Optional[str] = None
    actor_role: Optional[str] = None
    failure_reason: Optional[str] = None
    attempted_at_from: Optional[datetime] = None
    attempted_at_to: Optional[datetime] = None
