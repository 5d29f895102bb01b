"""
业务服务模块
"""
from .base import ResourceService
from .auth import AuthService, auth_services
from .actors import (
    system_admin_service, hr_recruiter_service, tech_reviewer_service, applicant_service,
)
from .job import job_employment_type_service, job_posting_state_service, job_posting_service
from .application import (
    resume_service, application_service, application_status_history_service,
    application_feedback_service,
)
from .interview import (
    interview_service, interview_participant_service, interview_schedule_service,
    interview_question_service,
)
from .coding_test import (
    coding_test_service, coding_test_submission_service, coding_test_result_service,
    coding_test_review_comment_service,
)
from .notification import (
    notification_template_service, notification_service, notification_delivery_service,
    notification_failure_service,
)
from .compliance import (
    audit_trail_service, access_log_service, masking_log_service, data_deletion_log_service,
    authentication_failure_service,
)
from .export import export_job_service, export_job_detail_service, export_job_failure_service
from .system import system_setting_service, external_api_credential_service, ats_enum_service

__all__ = [
    "ResourceService",
    "AuthService",
    "auth_services",
    "system_admin_service",
    "hr_recruiter_service",
    "tech_reviewer_service",
    "applicant_service",
    "job_employment_type_service",
    "job_posting_state_service",
    "job_posting_service",
    "resume_service",
    "application_service",
    "application_status_history_service",
    "application_feedback_service",
    "interview_service",
    "interview_participant_service",
    "interview_schedule_service",
    "interview_question_service",
    "coding_test_service",
    "coding_test_submission_service",
    "coding_test_result_service",
    "coding_test_review_comment_service",
    "notification_template_service",
    "notification_service",
    "notification_delivery_service",
    "notification_failure_service",
    "audit_trail_service",
    "access_log_service",
    "masking_log_service",
    "data_deletion_log_service",
    "authentication_failure_service",
    "export_job_service",
    "export_job_detail_service",
    "export_job_failure_service",
    "system_setting_service",
    "external_api_credential_service",
    "ats_enum_service",
]
