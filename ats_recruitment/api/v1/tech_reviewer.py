"""
技术评审 API 路由
"""
from fastapi import APIRouter

from ats_recruitment.api.deps import authorize_tech_reviewer
from ats_recruitment.api.router import ALL_OPS, READ_OPS, SEARCH, DETAIL, CREATE, UPDATE, include_resources
from ats_recruitment.services import (
    tech_reviewer_service, job_posting_service,
    application_service, application_status_history_service, application_feedback_service,
    interview_service, interview_participant_service, interview_schedule_service,
    interview_question_service,
    coding_test_service, coding_test_submission_service, coding_test_result_service,
    coding_test_review_comment_service,
    notification_service,
)

RESOURCES = [
    (tech_reviewer_service, "/techReviewers", "tech_reviewers", (SEARCH, DETAIL, UPDATE)),
    (job_posting_service, "/jobPostings", "job_postings", READ_OPS),
    (application_service, "/applications", "applications", READ_OPS),
    (application_status_history_service, "/applications/{parent_id}/statusHistories",
     "application_status_histories", READ_OPS),
    (application_feedback_service, "/applications/{parent_id}/feedbacks", "application_feedbacks", ALL_OPS),
    (interview_service, "/interviews", "interviews", READ_OPS),
    (interview_participant_service, "/interviews/{parent_id}/participants", "interview_participants", READ_OPS),
    (interview_schedule_service, "/interviews/{parent_id}/schedules", "interview_schedules", READ_OPS),
    (interview_question_service, "/interviews/{parent_id}/questions", "interview_questions", READ_OPS),
    (coding_test_service, "/codingTests", "coding_tests", READ_OPS),
    (coding_test_submission_service, "/codingTests/{parent_id}/submissions",
     "coding_test_submissions", (SEARCH, DETAIL, UPDATE)),
    (coding_test_result_service, "/codingTests/{parent_id}/results", "coding_test_results",
     (SEARCH, DETAIL, CREATE, UPDATE)),
    (coding_test_review_comment_service, "/codingTestSubmissions/{parent_id}/reviewComments",
     "coding_test_review_comments", ALL_OPS),
    (notification_service, "/notifications", "notifications", (SEARCH, DETAIL, UPDATE)),
]

router = APIRouter()
include_resources(router, authorize_tech_reviewer, "tech_reviewer", RESOURCES)
