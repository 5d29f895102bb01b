"""
简历与应聘申请服务

申请状态变更规则：
- 终态（hired / rejected / withdrawn）的申请不可再修改
- 应聘者只能撤回自己的申请或更换简历
- 每次状态变更追加一条状态历史，并给应聘者发一条通知
"""
import json
from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from ats_recruitment.core.exceptions import (
    BadRequestException,
    ConflictException,
    ForbiddenException,
    NotFoundException,
)
from ats_recruitment.crud.actors import applicant_crud
from ats_recruitment.crud.application import (
    resume_crud, application_crud, application_status_history_crud, application_feedback_crud,
)
from ats_recruitment.crud.job import job_posting_crud
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.application import (
    ApplicationStatus, TERMINAL_STATUSES, ApplicationStatusHistory,
    ResumeCreate, ResumeUpdate, ResumeResponse, ResumeRequest,
    ApplicationCreate, ApplicationUpdate, ApplicationResponse, ApplicationRequest,
    ApplicationStatusHistoryResponse, ApplicationStatusHistoryRequest,
    ApplicationFeedbackCreate, ApplicationFeedbackUpdate, ApplicationFeedbackResponse,
    ApplicationFeedbackRequest,
)
from ats_recruitment.models.base import ActorRole, SQLModelBase, as_utc, utcnow
from ats_recruitment.models.notification import Notification
from .base import ResourceService

APPLICANT_EDITABLE = {"resume_id", "current_status"}
STATUS_VALUES = {status.value for status in ApplicationStatus}


class ResumeService(ResourceService):
    crud = resume_crud
    response_model = ResumeResponse
    create_schema = ResumeCreate
    update_schema = ResumeUpdate
    request_schema = ResumeRequest
    references = {"applicant_id": applicant_crud}
    visible_to = {ActorRole.APPLICANT.value: "applicant_id"}
    owned_by = {ActorRole.APPLICANT.value: "applicant_id"}

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        if actor is not None and actor.type == ActorRole.APPLICANT:
            data["applicant_id"] = actor.id
        if not data.get("applicant_id"):
            raise BadRequestException("缺少 applicant_id")
        return data


async def ensure_resume_owner(db: AsyncSession, resume_id: Optional[str], applicant_id: str) -> None:
    """简历必须有效且属于该应聘者"""
    if resume_id is None:
        return
    resume = await resume_crud.get(db, resume_id)
    if resume is None:
        raise NotFoundException(f"简历不存在: {resume_id}")
    if resume.applicant_id != applicant_id:
        raise BadRequestException("简历不属于该应聘者")


class ApplicationService(ResourceService):
    crud = application_crud
    response_model = ApplicationResponse
    create_schema = ApplicationCreate
    update_schema = ApplicationUpdate
    request_schema = ApplicationRequest
    references = {"applicant_id": applicant_crud}
    visible_to = {ActorRole.APPLICANT.value: "applicant_id"}
    owned_by = {ActorRole.APPLICANT.value: "applicant_id"}
    audited = True

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        if actor is not None and actor.type == ActorRole.APPLICANT:
            data["applicant_id"] = actor.id
        if not data.get("applicant_id"):
            raise BadRequestException("缺少 applicant_id")

        posting = await job_posting_crud.get(db, data["job_posting_id"])
        if posting is None or not posting.is_visible:
            raise NotFoundException(f"岗位不存在或未开放: {data['job_posting_id']}")
        if posting.application_deadline and as_utc(posting.application_deadline) < utcnow():
            raise ConflictException("岗位已截止投递")

        await ensure_resume_owner(db, data.get("resume_id"), data["applicant_id"])

        now = utcnow()
        data["current_status"] = ApplicationStatus.APPLIED.value
        data["submitted_at"] = now
        data["last_state_change_at"] = now
        return data

    async def after_create(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        await self._append_history(db, actor, row, None, "投递申请")

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        if row.current_status in TERMINAL_STATUSES:
            raise ConflictException(f"申请已处于终态 {row.current_status}，不可修改")

        data.pop("change_reason", None)

        status = data.get("current_status")
        if "current_status" in data and status not in STATUS_VALUES:
            raise BadRequestException(f"无效的申请状态: {status}")

        if actor is not None and actor.type == ActorRole.APPLICANT:
            if not data.keys() <= APPLICANT_EDITABLE:
                raise ForbiddenException("应聘者只能更换简历或撤回申请")
            if status is not None and status != ApplicationStatus.WITHDRAWN.value:
                raise ForbiddenException("应聘者只能将申请撤回")

        if "resume_id" in data:
            await ensure_resume_owner(db, data["resume_id"], row.applicant_id)

        if status is not None and status != row.current_status:
            data["last_state_change_at"] = utcnow()
        return data

    async def after_update(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        row: Any,
        previous: Dict[str, Any],
        obj_in: SQLModelBase,
    ) -> None:
        from_status = previous.get("current_status")
        if from_status is None or from_status == row.current_status:
            return
        await self._append_history(db, actor, row, from_status, obj_in.change_reason)
        db.add(Notification(
            recipient_id=row.applicant_id,
            recipient_role=ActorRole.APPLICANT.value,
            notification_type="application_status_changed",
            reference_type="application",
            reference_id=row.id,
            payload=json.dumps(
                {"from_status": from_status, "to_status": row.current_status},
                ensure_ascii=False,
            ),
        ))
        await db.flush()
        logger.info(f"申请状态变更: {row.id} {from_status} -> {row.current_status}")

    async def _append_history(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        row: Any,
        from_status: Optional[str],
        reason: Optional[str],
    ) -> None:
        db.add(ApplicationStatusHistory(
            application_id=row.id,
            actor_id=actor.id if actor else None,
            actor_role=actor.type if actor else None,
            from_status=from_status,
            to_status=row.current_status,
            change_reason=reason,
        ))
        await db.flush()


class ApplicationStatusHistoryService(ResourceService):
    """状态历史只读，应聘者通过父资源可见范围限定为自己的申请"""
    crud = application_status_history_crud
    response_model = ApplicationStatusHistoryResponse
    request_schema = ApplicationStatusHistoryRequest
    parent_field = "application_id"


class ApplicationFeedbackService(ResourceService):
    crud = application_feedback_crud
    response_model = ApplicationFeedbackResponse
    create_schema = ApplicationFeedbackCreate
    update_schema = ApplicationFeedbackUpdate
    request_schema = ApplicationFeedbackRequest
    parent_field = "application_id"
    owned_by = {
        ActorRole.HR_RECRUITER.value: "reviewer_id",
        ActorRole.TECH_REVIEWER.value: "reviewer_id",
    }

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        data["reviewer_id"] = actor.id
        data["reviewer_role"] = actor.type
        return data

    def ensure_owner(self, actor: Optional[ActorPayload], row: Any) -> None:
        super().ensure_owner(actor, row)
        if actor is not None and actor.type in self.owned_by and row.reviewer_role != actor.type:
            raise ForbiddenException(f"无权操作他人的{self.label}")

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        if row.is_final_recommendation:
            raise ConflictException("最终推荐意见不能删除")


resume_service = ResumeService()
application_service = ApplicationService()
application_status_history_service = ApplicationStatusHistoryService(parent=application_service)
application_feedback_service = ApplicationFeedbackService(parent=application_service)
