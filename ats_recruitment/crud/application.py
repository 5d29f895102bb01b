"""
简历与应聘申请 CRUD 操作
"""
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.models.application import (
    Resume, Application, ApplicationStatusHistory, ApplicationFeedback, TERMINAL_STATUSES,
)
from .base import CRUDBase


class CRUDApplication(CRUDBase[Application]):
    """应聘申请 CRUD 操作类"""

    async def count_open_by_posting(self, db: AsyncSession, job_posting_id: str) -> int:
        """统计某岗位下未到终态的有效申请"""
        return await self.count(
            db,
            self.model.job_posting_id == job_posting_id,
            self.model.current_status.not_in(sorted(TERMINAL_STATUSES)),
        )


resume_crud = CRUDBase(
    Resume,
    label="简历",
    search_fields=("title", "parsed_name", "skills_summary"),
    exact_filters=("applicant_id",),
    like_filters=("title",),
    range_filters=("created_at",),
    sortable=("title",),
)

application_crud = CRUDApplication(
    Application,
    label="应聘申请",
    exact_filters=("applicant_id", "job_posting_id", "resume_id", "current_status"),
    range_filters=("submitted_at",),
    sortable=("submitted_at", "current_status", "last_state_change_at"),
    default_sort="submitted_at",
    unique_fields=(("applicant_id", "job_posting_id"),),
)

application_status_history_crud = CRUDBase(
    ApplicationStatusHistory,
    label="申请状态历史",
    search_fields=("change_reason",),
    exact_filters=("to_status", "from_status", "actor_id"),
    range_filters=("changed_at",),
    sortable=("changed_at", "to_status"),
    default_sort="changed_at",
)

application_feedback_crud = CRUDBase(
    ApplicationFeedback,
    label="评审反馈",
    search_fields=("feedback_body",),
    exact_filters=("reviewer_id", "reviewer_role", "rating", "is_final_recommendation"),
    sortable=("rating",),
)
