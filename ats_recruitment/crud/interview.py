"""
面试 CRUD 操作
"""
from ats_recruitment.models.interview import (
    Interview, InterviewParticipant, InterviewSchedule, InterviewQuestion,
)
from .base import CRUDBase

interview_crud = CRUDBase(
    Interview,
    label="面试",
    search_fields=("title", "notes"),
    exact_filters=("application_id", "stage", "status"),
    like_filters=("title",),
    range_filters=("created_at",),
    sortable=("title", "stage", "status"),
)

interview_participant_crud = CRUDBase(
    InterviewParticipant,
    label="面试参与人",
    exact_filters=("participant_id", "participant_role", "role", "confirmation_status"),
    sortable=("invited_at", "role"),
    default_sort="invited_at",
    unique_fields=(("interview_id", "participant_id"),),
)

interview_schedule_crud = CRUDBase(
    InterviewSchedule,
    label="面试排期",
    search_fields=("cancellation_reason",),
    exact_filters=("schedule_status", "schedule_source"),
    range_filters=("start_at",),
    sortable=("start_at", "end_at", "schedule_status"),
    default_sort="start_at",
    default_order="asc",
)

interview_question_crud = CRUDBase(
    InterviewQuestion,
    label="面试题",
    search_fields=("question_text",),
    exact_filters=("question_type", "is_visible_to_candidate"),
    sortable=("order", "question_type"),
    default_sort="order",
    default_order="asc",
)
