"""
HR 招聘专员 API 路由
"""
from fastapi import APIRouter

from ats_recruitment.api.deps import authorize_hr_recruiter
from ats_recruitment.api.router import ALL_OPS, READ_OPS, SEARCH, DETAIL, CREATE, UPDATE, DELETE, include_resources
from ats_recruitment.services import (
    hr_recruiter_service, tech_reviewer_service, applicant_service,
    job_employment_type_service, job_posting_state_service, job_posting_service,
    resume_service, application_service, application_status_history_service,
    application_feedback_service,
    interview_service, interview_participant_service, interview_schedule_service,
    interview_question_service,
    coding_test_service, coding_test_submission_service, coding_test_result_service,
    coding_test_review_comment_service,
    notification_service,
    export_job_service, export_job_detail_service, export_job_failure_service,
)

RESOURCES = [
    (hr_recruiter_service, "/hrRecruiters", "hr_recruiters", (SEARCH, DETAIL, UPDATE)),
    (tech_reviewer_service, "/techReviewers", "tech_reviewers", READ_OPS),
    (applicant_service, "/applicants", "applicants", READ_OPS),
    (job_employment_type_service, "/jobEmploymentTypes", "job_employment_types", READ_OPS),
    (job_posting_state_service, "/jobPostingStates", "job_posting_states", READ_OPS),
    (job_posting_service, "/jobPostings", "job_postings", ALL_OPS),
    (resume_service, "/resumes", "resumes", READ_OPS),
    (application_service, "/applications", "applications", (SEARCH, DETAIL, UPDATE)),
    (application_status_history_service, "/applications/{parent_id}/statusHistories",
     "application_status_histories", READ_OPS),
    (application_feedback_service, "/applications/{parent_id}/feedbacks", "application_feedbacks", ALL_OPS),
    (interview_service, "/interviews", "interviews", ALL_OPS),
    (interview_participant_service, "/interviews/{parent_id}/participants", "interview_participants", ALL_OPS),
    (interview_schedule_service, "/interviews/{parent_id}/schedules", "interview_schedules", ALL_OPS),
    (interview_question_service, "/interviews/{parent_id}/questions", "interview_questions", ALL_OPS),
    (coding_test_service, "/codingTests", "coding_tests", ALL_OPS),
    (coding_test_submission_service, "/codingTests/{parent_id}/submissions",
     "coding_test_submissions", (SEARCH, DETAIL, UPDATE)),
    (coding_test_result_service, "/codingTests/{parent_id}/results", "coding_test_results", ALL_OPS),
    (coding_test_review_comment_service, "/codingTestSubmissions/{parent_id}/reviewComments",
     "coding_test_review_comments", READ_OPS),
    (notification_service, "/notifications", "notifications", (SEARCH, DETAIL, UPDATE)),
    (export_job_service, "/exportJobs", "export_jobs", (SEARCH, DETAIL, CREATE, UPDATE, DELETE)),
    (export_job_detail_service, "/exportJobs/{parent_id}/details", "export_job_details", READ_OPS),
    (export_job_failure_service, "/exportJobs/{parent_id}/failures", "export_job_failures", READ_OPS),
]

router = APIRouter()
include_resources(router, authorize_hr_recruiter, "hr_recruiter", RESOURCES)
