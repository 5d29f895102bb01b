"""
合规日志检索服务（只读，仅管理员）
"""
from ats_recruitment.crud.compliance import (
    audit_trail_crud, access_log_crud, masking_log_crud, data_deletion_log_crud,
    authentication_failure_crud,
)
from ats_recruitment.models.compliance import (
    AuditTrailResponse, AuditTrailRequest,
    AccessLogResponse, AccessLogRequest,
    MaskingLogResponse, MaskingLogRequest,
    DataDeletionLogResponse, DataDeletionLogRequest,
    AuthenticationFailureResponse, AuthenticationFailureRequest,
)
from .base import ResourceService


class AuditTrailService(ResourceService):
    crud = audit_trail_crud
    response_model = AuditTrailResponse
    request_schema = AuditTrailRequest


class AccessLogService(ResourceService):
    crud = access_log_crud
    response_model = AccessLogResponse
    request_schema = AccessLogRequest


class MaskingLogService(ResourceService):
    crud = masking_log_crud
    response_model = MaskingLogResponse
    request_schema = MaskingLogRequest


class DataDeletionLogService(ResourceService):
    crud = data_deletion_log_crud
    response_model = DataDeletionLogResponse
    request_schema = DataDeletionLogRequest


class AuthenticationFailureService(ResourceService):
    crud = authentication_failure_crud
    response_model = AuthenticationFailureResponse
    request_schema = AuthenticationFailureRequest


audit_trail_service = AuditTrailService()
access_log_service = AccessLogService()
masking_log_service = MaskingLogService()
data_deletion_log_service = DataDeletionLogService()
authentication_failure_service = AuthenticationFailureService()
