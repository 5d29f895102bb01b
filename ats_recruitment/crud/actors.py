"""
参与者 CRUD 操作
"""
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.exceptions import BadRequestException
from ats_recruitment.models.actors import SystemAdmin, HrRecruiter, TechReviewer, Applicant
from .base import CRUDBase, ModelType

ACTOR_FILTERS = dict(
    search_fields=("email", "name"),
    exact_filters=("is_active",),
    like_filters=("email",),
    range_filters=("created_at",),
    sortable=("email", "name"),
    unique_fields=(("email",),),
)


class CRUDActor(CRUDBase[ModelType]):
    """参与者 CRUD 操作类"""

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[ModelType]:
        """根据邮箱查找有效账号"""
        return await self.get_by(db, email=email)


class CRUDSystemAdmin(CRUDActor[SystemAdmin]):
    """系统管理员 CRUD 操作类"""

    async def count_active(self, db: AsyncSession) -> int:
        """统计有效且启用的管理员数量"""
        return await self.count(db, self.model.is_active == True)  # noqa: E712


system_admin_crud = CRUDSystemAdmin(
    SystemAdmin,
    label="系统管理员",
    **{**ACTOR_FILTERS, "exact_filters": ("is_active", "super_admin")},
)
hr_recruiter_crud = CRUDActor(
    HrRecruiter,
    label="HR 招聘专员",
    **{**ACTOR_FILTERS, "like_filters": ("email", "department")},
)
tech_reviewer_crud = CRUDActor(
    TechReviewer,
    label="技术评审",
    **{**ACTOR_FILTERS, "like_filters": ("email", "specialization")},
)
applicant_crud = CRUDActor(
    Applicant,
    label="应聘者",
    **{**ACTOR_FILTERS, "like_filters": ("email", "phone")},
)

# 角色 -> 参与者 CRUD
actor_cruds = {
    "systemAdmin": system_admin_crud,
    "hrRecruiter": hr_recruiter_crud,
    "techReviewer": tech_reviewer_crud,
    "applicant": applicant_crud,
}


def get_actor_crud(role: str) -> CRUDActor:
    """按角色取参与者 CRUD，未知角色 400"""
    crud = actor_cruds.get(role)
    if crud is None:
        raise BadRequestException(f"未知的参与者角色: {role}")
    return crud
