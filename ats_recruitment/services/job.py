"""
岗位相关服务

雇佣类型、岗位状态、岗位发布
"""
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.exceptions import BadRequestException, ConflictException
from ats_recruitment.crud.actors import hr_recruiter_crud
from ats_recruitment.crud.application import application_crud
from ats_recruitment.crud.job import job_employment_type_crud, job_posting_state_crud, job_posting_crud
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.base import ActorRole
from ats_recruitment.models.job import (
    JobEmploymentTypeCreate, JobEmploymentTypeUpdate, JobEmploymentTypeResponse, JobEmploymentTypeRequest,
    JobPostingStateCreate, JobPostingStateUpdate, JobPostingStateResponse, JobPostingStateRequest,
    JobPostingCreate, JobPostingUpdate, JobPostingResponse, JobPostingRequest,
)
from .base import ResourceService


class JobEmploymentTypeService(ResourceService):
    crud = job_employment_type_crud
    response_model = JobEmploymentTypeResponse
    create_schema = JobEmploymentTypeCreate
    update_schema = JobEmploymentTypeUpdate
    request_schema = JobEmploymentTypeRequest

    async def _ensure_unused(self, db: AsyncSession, row: Any, action: str) -> None:
        if await job_posting_crud.count_visible_by_employment_type(db, row.id):
            raise ConflictException(f"雇佣类型仍被可见岗位引用，不能{action}")

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        if data.get("is_active") is False and row.is_active:
            await self._ensure_unused(db, row, "停用")
        return data

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        await self._ensure_unused(db, row, "删除")


class JobPostingStateService(ResourceService):
    crud = job_posting_state_crud
    response_model = JobPostingStateResponse
    create_schema = JobPostingStateCreate
    update_schema = JobPostingStateUpdate
    request_schema = JobPostingStateRequest

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        if await job_posting_crud.count_by_state(db, row.id):
            raise ConflictException("岗位状态仍被岗位引用，不能删除")


def check_salary_range(salary_min: Optional[float], salary_max: Optional[float]) -> None:
    if salary_min is not None and salary_max is not None and salary_min > salary_max:
        raise BadRequestException("最低薪资不能高于最高薪资")


class JobPostingService(ResourceService):
    """
    岗位发布服务

    HR 可查看全部岗位，但只能修改、删除自己名下的岗位；
    应聘者与匿名访问只能看到对外可见的岗位
    """
    crud = job_posting_crud
    response_model = JobPostingResponse
    create_schema = JobPostingCreate
    update_schema = JobPostingUpdate
    request_schema = JobPostingRequest
    references = {
        "hr_recruiter_id": hr_recruiter_crud,
        "job_employment_type_id": job_employment_type_crud,
        "job_posting_state_id": job_posting_state_crud,
    }
    owned_by = {ActorRole.HR_RECRUITER.value: "hr_recruiter_id"}
    audited = True

    def scope(self, actor: Optional[ActorPayload]) -> List[Any]:
        if actor is None or actor.type == ActorRole.APPLICANT:
            return [self.model.is_visible == True]  # noqa: E712
        return []

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        check_salary_range(data.get("salary_range_min"), data.get("salary_range_max"))
        return data

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        check_salary_range(
            data.get("salary_range_min", row.salary_range_min),
            data.get("salary_range_max", row.salary_range_max),
        )
        return data

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        if await application_crud.count_open_by_posting(db, row.id):
            raise ConflictException("岗位仍有进行中的应聘申请，不能删除")


job_employment_type_service = JobEmploymentTypeService()
job_posting_state_service = JobPostingStateService()
job_posting_service = JobPostingService()
