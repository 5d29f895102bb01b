"""
通知模型模块 - SQLModel 版本

通知模板、通知、投递记录与投递失败记录
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field

from .base import (
    SQLModelBase,
    TimestampMixin,
    SoftDeleteMixin,
    IDMixin,
    SoftDeleteResponse,
    PageRequest,
    ActorRoleName,
    DateTimeField,
    utcnow,
)


# ==================== 通知模板 ====================

class NotificationTemplateBase(SQLModelBase):
    template_code: str = Field(..., min_length=1, max_length=100, index=True, description="模板编码")
    channel: str = Field(..., min_length=1, max_length=50, description="email / sms / in_app")
    title: str = Field(..., min_length=1, max_length=255)
    body: str = Field(..., min_length=1)
    is_active: bool = Field(True)


class NotificationTemplate(NotificationTemplateBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """通知模板表模型"""
    __tablename__ = "ats_recruitment_notification_templates"


class NotificationTemplateCreate(NotificationTemplateBase):
    pass


class NotificationTemplateUpdate(SQLModelBase):
    template_code: Optional[str] = Field(None, min_length=1, max_length=100)
    channel: Optional[str] = Field(None, min_length=1, max_length=50)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    body: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None


class NotificationTemplateResponse(NotificationTemplateBase, SoftDeleteResponse):
    pass


class NotificationTemplateRequest(PageRequest):
    template_code: Optional[str] = None
    channel: Optional[str] = None
    is_active: Optional[bool] = None


# ==================== 通知 ====================

class NotificationBase(SQLModelBase):
    recipient_id: str = Field(..., max_length=36, index=True)
    recipient_role: str = Field(..., max_length=50, description="applicant / hrRecruiter / techReviewer / systemAdmin")
    notification_type: str = Field(..., min_length=1, max_length=100)
    reference_type: Optional[str] = Field(None, max_length=100)
    reference_id: Optional[str] = Field(None, max_length=36)
    status: str = Field("pending", max_length=50, index=True)
    payload: Optional[str] = Field(None, description="通知内容 JSON 文本")


class Notification(NotificationBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """通知表模型"""
    __tablename__ = "ats_recruitment_notifications"


class NotificationCreate(NotificationBase):
    recipient_role: ActorRoleName


class NotificationUpdate(SQLModelBase):
    status: Optional[str] = Field(None, max_length=50)
    payload: Optional[str] = None


class NotificationResponse(NotificationBase, SoftDeleteResponse):
    pass


class NotificationRequest(PageRequest):
    recipient_id: Optional[str] = None
    recipient_role: Optional[str] = None
    notification_type: Optional[str] = None
    reference_type: Optional[str] = None
    reference_id: Optional[str] = None
    status: Optional[str] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None


# ==================== 投递记录 ====================

class NotificationDeliveryBase(SQLModelBase):
    delivery_channel: str = Field(..., min_length=1, max_length=50)
    recipient_address: str = Field(..., min_length=1, max_length=255)
    delivery_status: str = Field("queued", max_length=50, index=True)
    attempt_count: int = Field(0, ge=0)
    delivered_at: Optional[datetime] = DateTimeField(None)
    error_message: Optional[str] = Field(None, max_length=2000)


class NotificationDelivery(NotificationDeliveryBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """通知投递表模型"""
    __tablename__ = "ats_recruitment_notification_deliveries"

    notification_id: str = Field(..., foreign_key="ats_recruitment_notifications.id", index=True)


class NotificationDeliveryCreate(NotificationDeliveryBase):
    pass


class NotificationDeliveryUpdate(SQLModelBase):
    delivery_status: Optional[str] = Field(None, max_length=50)
    attempt_count: Optional[int] = Field(None, ge=0)
    delivered_at: Optional[datetime] = None
    error_message: Optional[str] = Field(None, max_length=2000)


class NotificationDeliveryResponse(NotificationDeliveryBase, SoftDeleteResponse):
    notification_id: str


class NotificationDeliveryRequest(PageRequest):
    delivery_channel: Optional[str] = None
    delivery_status: Optional[str] = None
    delivered_at_from: Optional[datetime] = None
    delivered_at_to: Optional[datetime] = None


# ==================== 投递失败 ====================

class NotificationFailure(SoftDeleteMixin, TimestampMixin, IDMixin, SQLModelBase, table=True):
    """通知失败表模型（系统写入，只读）"""
    __tablename__ = "ats_recruitment_notification_failures"

    notification_id: str = Field(..., foreign_key="ats_recruitment_notifications.id", index=True)
    delivery_id: Optional[str] = Field(
        None, foreign_key="ats_recruitment_notification_deliveries.id", index=True
    )
    failure_type: str = Field(..., max_length=100)
    failure_message: Optional[str] = Field(None, max_length=2000)
    occurred_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class NotificationFailureResponse(SoftDeleteResponse):
    notification_id: str
    delivery_id: Optional[str] = None
    failure_type: str
    failure_message: Optional[str] = None
    occurred_at: datetime


class NotificationFailureRequest(PageRequest):
    delivery_id: Optional[str] = None
    failure_type: Optional[str] = None
    occurred_at_from: Optional[datetime] = None
    occurred_at_to: Optional[datetime] = None
