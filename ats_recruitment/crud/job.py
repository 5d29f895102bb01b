"""
岗位 CRUD 操作
"""
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.models.job import JobEmploymentType, JobPostingState, JobPosting
from .base import CRUDBase


class CRUDJobPosting(CRUDBase[JobPosting]):
    """岗位发布 CRUD 操作类"""

    async def count_visible_by_employment_type(self, db: AsyncSession, employment_type_id: str) -> int:
        """统计引用某雇佣类型且对外可见的有效岗位"""
        return await self.count(
            db,
            self.model.job_employment_type_id == employment_type_id,
            self.model.is_visible == True,  # noqa: E712
        )

    async def count_by_state(self, db: AsyncSession, state_id: str) -> int:
        """统计引用某岗位状态的有效岗位"""
        return await self.count(db, self.model.job_posting_state_id == state_id)

    async def count_by_recruiter(self, db: AsyncSession, hr_recruiter_id: str) -> int:
        """统计引用某 HR 的岗位（含已软删除）"""
        return await self.count(db, self.model.hr_recruiter_id == hr_recruiter_id, include_deleted=True)


job_employment_type_crud = CRUDBase(
    JobEmploymentType,
    label="雇佣类型",
    search_fields=("name", "description"),
    exact_filters=("is_active",),
    like_filters=("name",),
    range_filters=("created_at",),
    sortable=("name",),
    unique_fields=(("name",),),
)

job_posting_state_crud = CRUDBase(
    JobPostingState,
    label="岗位状态",
    search_fields=("state_code", "label"),
    exact_filters=("state_code", "is_active"),
    like_filters=("label",),
    sortable=("state_code", "label", "sort_order"),
    default_sort="sort_order",
    default_order="asc",
    unique_fields=(("state_code",),),
)

job_posting_crud = CRUDJobPosting(
    JobPosting,
    label="岗位",
    search_fields=("title", "description", "location"),
    exact_filters=("hr_recruiter_id", "job_employment_type_id", "job_posting_state_id", "is_visible"),
    like_filters=("title", "location"),
    range_filters=("application_deadline", "created_at"),
    sortable=("title", "application_deadline", "salary_range_min", "salary_range_max"),
)
