"""
通知 CRUD 操作
"""
from ats_recruitment.models.notification import (
    NotificationTemplate, Notification, NotificationDelivery, NotificationFailure,
)
from .base import CRUDBase

notification_template_crud = CRUDBase(
    NotificationTemplate,
    label="通知模板",
    search_fields=("template_code", "title", "body"),
    exact_filters=("template_code", "channel", "is_active"),
    sortable=("template_code", "channel"),
    unique_fields=(("template_code",),),
)

notification_crud = CRUDBase(
    Notification,
    label="通知",
    search_fields=("notification_type", "payload"),
    exact_filters=(
        "recipient_id", "recipient_role", "notification_type",
        "reference_type", "reference_id", "status",
    ),
    range_filters=("created_at",),
    sortable=("status", "notification_type"),
)

notification_delivery_crud = CRUDBase(
    NotificationDelivery,
    label="通知投递",
    search_fields=("recipient_address", "error_message"),
    exact_filters=("delivery_channel", "delivery_status"),
    range_filters=("delivered_at",),
    sortable=("delivered_at", "attempt_count", "delivery_status"),
)

notification_failure_crud = CRUDBase(
    NotificationFailure,
    label="通知失败记录",
    search_fields=("failure_message",),
    exact_filters=("delivery_id", "failure_type"),
    range_filters=("occurred_at",),
    sortable=("occurred_at",),
    default_sort="occurred_at",
)
