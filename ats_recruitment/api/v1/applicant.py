"""
应聘者 API 路由

应聘者只能访问自己的账号、简历、申请及其下属资源
"""
from fastapi import APIRouter

from ats_recruitment.api.deps import authorize_applicant
from ats_recruitment.api.router import ALL_OPS, READ_OPS, SEARCH, DETAIL, CREATE, UPDATE, DELETE, include_resources
from ats_recruitment.services import (
    applicant_service, job_posting_service,
    resume_service, application_service, application_status_history_service,
    interview_service, interview_schedule_service, interview_question_service,
    coding_test_service, coding_test_submission_service, coding_test_result_service,
    notification_service,
)

RESOURCES = [
    (applicant_service, "/applicants", "applicants", (SEARCH, DETAIL, UPDATE, DELETE)),
    (job_posting_service, "/jobPostings", "job_postings", READ_OPS),
    (resume_service, "/resumes", "resumes", ALL_OPS),
    (application_service, "/applications", "applications", (SEARCH, DETAIL, CREATE, UPDATE)),
    (application_status_history_service, "/applications/{parent_id}/statusHistories",
     "application_status_histories", READ_OPS),
    (interview_service, "/interviews", "interviews", READ_OPS),
    (interview_schedule_service, "/interviews/{parent_id}/schedules", "interview_schedules", READ_OPS),
    (interview_question_service, "/interviews/{parent_id}/questions", "interview_questions", READ_OPS),
    (coding_test_service, "/codingTests", "coding_tests", READ_OPS),
    (coding_test_submission_service, "/codingTests/{parent_id}/submissions",
     "coding_test_submissions", (SEARCH, DETAIL, CREATE)),
    (coding_test_result_service, "/codingTests/{parent_id}/results", "coding_test_results", READ_OPS),
    (notification_service, "/notifications", "notifications", (SEARCH, DETAIL, UPDATE)),
]

router = APIRouter()
include_resources(router, authorize_applicant, "applicant", RESOURCES)
