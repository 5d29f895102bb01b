"""
合规日志 CRUD 操作（只读检索）
"""
from ats_recruitment.models.compliance import (
    AuditTrail, AccessLog, MaskingLog, DataDeletionLog, AuthenticationFailure,
)
from .base import CRUDBase

audit_trail_crud = CRUDBase(
    AuditTrail,
    label="审计记录",
    search_fields=("event_detail",),
    exact_filters=("actor_id", "actor_role", "operation_type", "target_type", "target_id"),
    range_filters=("event_timestamp",),
    sortable=("event_timestamp", "operation_type", "target_type"),
    default_sort="event_timestamp",
)

access_log_crud = CRUDBase(
    AccessLog,
    label="访问日志",
    exact_filters=("actor_id", "actor_role", "target_type", "target_id"),
    range_filters=("accessed_at",),
    sortable=("accessed_at",),
    default_sort="accessed_at",
)

masking_log_crud = CRUDBase(
    MaskingLog,
    label="脱敏日志",
    search_fields=("reason", "masked_fields"),
    exact_filters=("actor_id", "target_type", "target_id"),
    range_filters=("masked_at",),
    sortable=("masked_at",),
    default_sort="masked_at",
)

data_deletion_log_crud = CRUDBase(
    DataDeletionLog,
    label="数据删除日志",
    search_fields=("reason",),
    exact_filters=("actor_id", "target_type", "target_id"),
    range_filters=("deleted_at_snapshot",),
    sortable=("deleted_at_snapshot",),
    default_sort="deleted_at_snapshot",
)

authentication_failure_crud = CRUDBase(
    AuthenticationFailure,
    label="认证失败记录",
    search_fields=("attempted_email",),
    exact_filters=("attempted_email", "actor_role", "failure_reason"),
    range_filters=("attempted_at",),
    sortable=("attempted_at", "attempted_email"),
    default_sort="attempted_at",
)
