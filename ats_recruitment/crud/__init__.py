"""
CRUD 操作模块
"""
from .actors import (
    system_admin_crud, hr_recruiter_crud, tech_reviewer_crud, applicant_crud, actor_cruds,
    get_actor_crud,
)
from .job import job_employment_type_crud, job_posting_state_crud, job_posting_crud
from .application import (
    resume_crud, application_crud, application_status_history_crud, application_feedback_crud,
)
from .interview import (
    interview_crud, interview_participant_crud, interview_schedule_crud, interview_question_crud,
)
from .coding_test import (
    coding_test_crud, coding_test_submission_crud, coding_test_result_crud,
    coding_test_review_comment_crud,
)
from .notification import (
    notification_template_crud, notification_crud, notification_delivery_crud,
    notification_failure_crud,
)
from .compliance import (
    audit_trail_crud, access_log_crud, masking_log_crud, data_deletion_log_crud,
    authentication_failure_crud,
)
from .export import export_job_crud, export_job_detail_crud, export_job_failure_crud
from .system import system_setting_crud, external_api_credential_crud, ats_enum_crud

__all__ = [
    "system_admin_crud",
    "hr_recruiter_crud",
    "tech_reviewer_crud",
    "applicant_crud",
    "actor_cruds",
    "get_actor_crud",
    "job_employment_type_crud",
    "job_posting_state_crud",
    "job_posting_crud",
    "resume_crud",
    "application_crud",
    "application_status_history_crud",
    "application_feedback_crud",
    "interview_crud",
    "interview_participant_crud",
    "interview_schedule_crud",
    "interview_question_crud",
    "coding_test_crud",
    "coding_test_submission_crud",
    "coding_test_result_crud",
    "coding_test_review_comment_crud",
    "notification_template_crud",
    "notification_crud",
    "notification_delivery_crud",
    "notification_failure_crud",
    "audit_trail_crud",
    "access_log_crud",
    "masking_log_crud",
    "data_deletion_log_crud",
    "authentication_failure_crud",
    "export_job_crud",
    "export_job_detail_crud",
    "export_job_failure_crud",
    "system_setting_crud",
    "external_api_credential_crud",
    "ats_enum_crud",
]
