"""
系统管理员 API 路由

管理员可管理全部实体，合规日志只读
"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.api.deps import authorize_system_admin
from ats_recruitment.api.router import ALL_OPS, READ_OPS, SEARCH, DETAIL, UPDATE, DELETE, include_resources
from ats_recruitment.core.database import get_db
from ats_recruitment.models.actors import ActorPayload, ApplicantMaskRequest, ApplicantResponse
from ats_recruitment.services import (
    system_admin_service, hr_recruiter_service, tech_reviewer_service, applicant_service,
    job_employment_type_service, job_posting_state_service, job_posting_service,
    resume_service, application_service, application_status_history_service,
    application_feedback_service,
    interview_service, interview_participant_service, interview_schedule_service,
    interview_question_service,
    coding_test_service, coding_test_submission_service, coding_test_result_service,
    coding_test_review_comment_service,
    notification_template_service, notification_service, notification_delivery_service,
    notification_failure_service,
    audit_trail_service, access_log_service, masking_log_service, data_deletion_log_service,
    authentication_failure_service,
    export_job_service, export_job_detail_service, export_job_failure_service,
    system_setting_service, external_api_credential_service, ats_enum_service,
)

ACTOR_OPS = (SEARCH, DETAIL, UPDATE, DELETE)

RESOURCES = [
    (system_admin_service, "/systemAdmins", "system_admins", ACTOR_OPS),
    (hr_recruiter_service, "/hrRecruiters", "hr_recruiters", ACTOR_OPS),
    (tech_reviewer_service, "/techReviewers", "tech_reviewers", ACTOR_OPS),
    (applicant_service, "/applicants", "applicants", ACTOR_OPS),
    (job_employment_type_service, "/jobEmploymentTypes", "job_employment_types", ALL_OPS),
    (job_posting_state_service, "/jobPostingStates", "job_posting_states", ALL_OPS),
    (job_posting_service, "/jobPostings", "job_postings", ALL_OPS),
    (resume_service, "/resumes", "resumes", ALL_OPS),
    (application_service, "/applications", "applications", ALL_OPS),
    (application_status_history_service, "/applications/{parent_id}/statusHistories",
     "application_status_histories", READ_OPS),
    (application_feedback_service, "/applications/{parent_id}/feedbacks", "application_feedbacks", ALL_OPS),
    (interview_service, "/interviews", "interviews", ALL_OPS),
    (interview_participant_service, "/interviews/{parent_id}/participants", "interview_participants", ALL_OPS),
    (interview_schedule_service, "/interviews/{parent_id}/schedules", "interview_schedules", ALL_OPS),
    (interview_question_service, "/interviews/{parent_id}/questions", "interview_questions", ALL_OPS),
    (coding_test_service, "/codingTests", "coding_tests", ALL_OPS),
    (coding_test_submission_service, "/codingTests/{parent_id}/submissions",
     "coding_test_submissions", ALL_OPS),
    (coding_test_result_service, "/codingTests/{parent_id}/results", "coding_test_results", ALL_OPS),
    (coding_test_review_comment_service, "/codingTestSubmissions/{parent_id}/reviewComments",
     "coding_test_review_comments", ALL_OPS),
    (notification_template_service, "/notificationTemplates", "notification_templates", ALL_OPS),
    (notification_service, "/notifications", "notifications", ALL_OPS),
    (notification_delivery_service, "/notifications/{parent_id}/deliveries",
     "notification_deliveries", ALL_OPS),
    (notification_failure_service, "/notifications/{parent_id}/failures", "notification_failures", READ_OPS),
    (audit_trail_service, "/auditTrails", "audit_trails", READ_OPS),
    (access_log_service, "/accessLogs", "access_logs", READ_OPS),
    (masking_log_service, "/maskingLogs", "masking_logs", READ_OPS),
    (data_deletion_log_service, "/dataDeletionLogs", "data_deletion_logs", READ_OPS),
    (authentication_failure_service, "/authenticationFailures", "authentication_failures", READ_OPS),
    (export_job_service, "/exportJobs", "export_jobs", ALL_OPS),
    (export_job_detail_service, "/exportJobs/{parent_id}/details", "export_job_details", READ_OPS),
    (export_job_failure_service, "/exportJobs/{parent_id}/failures", "export_job_failures", READ_OPS),
    (system_setting_service, "/systemSettings", "system_settings", ALL_OPS),
    (external_api_credential_service, "/externalApiCredentials", "external_api_credentials", ALL_OPS),
    (ats_enum_service, "/enums", "enums", ALL_OPS),
]

router = APIRouter()


@router.post("/applicants/{applicant_id}/mask", name="system_admin_applicants_mask",
             summary="脱敏应聘者信息", response_model=ApplicantResponse)
async def mask_applicant(
    applicant_id: str,
    body: ApplicantMaskRequest,
    actor: ActorPayload = Depends(authorize_system_admin),
    db: AsyncSession = Depends(get_db),
):
    """将应聘者姓名、电话替换为脱敏值并记录脱敏日志"""
    return await applicant_service.mask(db, actor, applicant_id, body.reason)


include_resources(router, authorize_system_admin, "system_admin", RESOURCES)
