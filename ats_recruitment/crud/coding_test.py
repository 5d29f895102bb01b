"""
笔试 CRUD 操作
"""
from ats_recruitment.models.coding_test import (
    CodingTest, CodingTestSubmission, CodingTestResult, CodingTestReviewComment,
)
from .base import CRUDBase

coding_test_crud = CRUDBase(
    CodingTest,
    label="笔试",
    search_fields=("test_provider", "test_external_id"),
    exact_filters=("application_id", "applicant_id", "hr_recruiter_id", "test_provider", "status"),
    range_filters=("scheduled_at",),
    sortable=("scheduled_at", "expiration_at", "status"),
)

coding_test_submission_crud = CRUDBase(
    CodingTestSubmission,
    label="笔试提交",
    search_fields=("answer_text",),
    exact_filters=("status", "review_status"),
    range_filters=("submitted_at",),
    sortable=("submitted_at", "review_status"),
    default_sort="submitted_at",
)

coding_test_result_crud = CRUDBase(
    CodingTestResult,
    label="笔试结果",
    exact_filters=("submission_id", "evaluation_method", "plagiarism_flag"),
    range_filters=("score",),
    sortable=("score", "ranking_percentile", "finalized_at"),
    unique_fields=(("submission_id",),),
)

coding_test_review_comment_crud = CRUDBase(
    CodingTestReviewComment,
    label="笔试评审意见",
    search_fields=("comment_text",),
    exact_filters=("reviewer_id", "comment_type", "is_resolved"),
    sortable=("comment_type",),
)
