"""
导出任务服务

导出任务只登记请求，状态由管理员维护；HR 只能看到并修改自己发起的任务
"""
from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.exceptions import ForbiddenException
from ats_recruitment.crud.export import export_job_crud, export_job_detail_crud, export_job_failure_crud
from ats_recruitment.crud.job import job_posting_crud
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.base import ActorRole, utcnow
from ats_recruitment.models.export import (
    ExportJobCreate, ExportJobUpdate, ExportJobResponse, ExportJobRequest,
    ExportJobDetailResponse, ExportJobDetailRequest,
    ExportJobFailureResponse, ExportJobFailureRequest,
)
from .base import ResourceService

PENDING = "pending"
COMPLETED = "completed"
ADMIN_ONLY_FIELDS = {"status", "file_uri", "completed_at"}


class ExportJobService(ResourceService):
    crud = export_job_crud
    response_model = ExportJobResponse
    create_schema = ExportJobCreate
    update_schema = ExportJobUpdate
    request_schema = ExportJobRequest
    references = {"target_job_posting_id": job_posting_crud}
    visible_to = {ActorRole.HR_RECRUITER.value: "requestor_id"}
    owned_by = {ActorRole.HR_RECRUITER.value: "requestor_id"}

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        data["requestor_id"] = actor.id
        data["requestor_role"] = actor.type
        data["status"] = PENDING
        return data

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        if actor is not None and actor.type != ActorRole.SYSTEM_ADMIN and data.keys() & ADMIN_ONLY_FIELDS:
            raise ForbiddenException("只有管理员可以修改导出任务状态")
        if data.get("status") == COMPLETED and "completed_at" not in data:
            data["completed_at"] = utcnow()
        return data

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        # 物理删除前清理明细与失败记录
        await export_job_crud.remove_children(db, row.id)


class ExportJobDetailService(ResourceService):
    crud = export_job_detail_crud
    response_model = ExportJobDetailResponse
    request_schema = ExportJobDetailRequest
    parent_field = "export_job_id"


class ExportJobFailureService(ResourceService):
    crud = export_job_failure_crud
    response_model = ExportJobFailureResponse
    request_schema = ExportJobFailureRequest
    parent_field = "export_job_id"


export_job_service = ExportJobService()
export_job_detail_service = ExportJobDetailService(parent=export_job_service)
export_job_failure_service = ExportJobFailureService(parent=export_job_service)
