"""
参与者管理服务

参与者由自助注册创建（见 auth 服务），此处处理检索、更新、删除：
- 非管理员只能看到并修改自己的账号
- 至少保留一名启用的系统管理员
- 删除账号写入数据删除日志
"""
from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from ats_recruitment.core.exceptions import ConflictException
from ats_recruitment.crud.actors import (
    system_admin_crud, hr_recruiter_crud, tech_reviewer_crud, applicant_crud,
)
from ats_recruitment.crud.application import application_feedback_crud
from ats_recruitment.crud.coding_test import coding_test_crud, coding_test_review_comment_crud
from ats_recruitment.crud.interview import interview_participant_crud
from ats_recruitment.crud.job import job_posting_crud
from ats_recruitment.models.actors import (
    ActorPayload,
    SystemAdminUpdate, SystemAdminResponse, SystemAdminRequest,
    HrRecruiterUpdate, HrRecruiterResponse, HrRecruiterRequest,
    TechReviewerUpdate, TechReviewerResponse, TechReviewerRequest,
    ApplicantUpdate, ApplicantResponse, ApplicantRequest,
)
from ats_recruitment.models.base import ActorRole, SQLModelBase
from ats_recruitment.models.coding_test import CodingTest, CodingTestReviewComment
from ats_recruitment.models.application import ApplicationFeedback
from ats_recruitment.models.interview import InterviewParticipant
from .audit import record_access, record_data_deletion, record_masking
from .base import ResourceService

MASK_CHAR = "*"


def mask_name(value: Optional[str]) -> Optional[str]:
    """保留首字符"""
    if not value:
        return value
    return value[0] + MASK_CHAR * max(len(value) - 1, 2)


def mask_phone(value: Optional[str]) -> Optional[str]:
    """保留末四位"""
    if not value:
        return value
    keep = value[-4:] if len(value) > 4 else ""
    return MASK_CHAR * max(len(value) - len(keep), 4) + keep


async def ensure_not_participant(db: AsyncSession, row: Any) -> None:
    """面试参与人按 ID 引用账号（无外键），物理删除前检查"""
    if await interview_participant_crud.count(db, InterviewParticipant.participant_id == row.id):
        raise ConflictException("该账号仍是面试参与人，不能删除")


class ActorService(ResourceService):
    """参与者服务基类"""

    role: ActorRole
    # 本角色只能访问自己的账号
    self_scoped: bool = True

    def __init__(self):
        super().__init__()
        if self.self_scoped:
            self.visible_to = {self.role.value: "id"}
            self.owned_by = {self.role.value: "id"}

    async def after_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        await record_data_deletion(db, actor, row, reason=f"{self.label}账号删除")
        logger.info(f"{self.label}账号已删除: {row.email}")


class SystemAdminService(ActorService):
    crud = system_admin_crud
    role = ActorRole.SYSTEM_ADMIN
    response_model = SystemAdminResponse
    update_schema = SystemAdminUpdate
    request_schema = SystemAdminRequest
    # 管理员之间互相可见、可管理
    self_scoped = False

    async def _ensure_not_last_admin(self, db: AsyncSession, row: Any) -> None:
        if row.is_active and await system_admin_crud.count_active(db) <= 1:
            raise ConflictException("至少需要保留一名启用的系统管理员")

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        if data.get("is_active") is False:
            await self._ensure_not_last_admin(db, row)
        return data

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        await self._ensure_not_last_admin(db, row)


class HrRecruiterService(ActorService):
    crud = hr_recruiter_crud
    role = ActorRole.HR_RECRUITER
    response_model = HrRecruiterResponse
    update_schema = HrRecruiterUpdate
    request_schema = HrRecruiterRequest

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        # 物理删除：已软删除的岗位、笔试仍指向该 HR，一并计入
        if await job_posting_crud.count_by_recruiter(db, row.id):
            raise ConflictException("该 HR 仍有岗位记录（含已删除），不能删除")
        if await coding_test_crud.count(db, CodingTest.hr_recruiter_id == row.id, include_deleted=True):
            raise ConflictException("该 HR 仍有笔试记录（含已删除），不能删除")
        if await application_feedback_crud.count(
            db, ApplicationFeedback.reviewer_id == row.id, include_deleted=True
        ):
            raise ConflictException("该 HR 仍有评审反馈，不能删除")
        await ensure_not_participant(db, row)


class TechReviewerService(ActorService):
    crud = tech_reviewer_crud
    role = ActorRole.TECH_REVIEWER
    response_model = TechReviewerResponse
    update_schema = TechReviewerUpdate
    request_schema = TechReviewerRequest

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        if await coding_test_review_comment_crud.count(db, CodingTestReviewComment.reviewer_id == row.id):
            raise ConflictException("该技术评审仍有笔试评审意见，不能删除")
        if await application_feedback_crud.count(
            db, ApplicationFeedback.reviewer_id == row.id, include_deleted=True
        ):
            raise ConflictException("该技术评审仍有评审反馈，不能删除")
        await ensure_not_participant(db, row)


class ApplicantService(ActorService):
    crud = applicant_crud
    role = ActorRole.APPLICANT
    response_model = ApplicantResponse
    update_schema = ApplicantUpdate
    request_schema = ApplicantRequest

    async def after_read(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        # HR 与管理员查看应聘者详情需留痕
        if actor is not None and actor.type in (ActorRole.HR_RECRUITER, ActorRole.SYSTEM_ADMIN):
            await record_access(db, actor, row)

    async def mask(
        self, db: AsyncSession, actor: ActorPayload, id: str, reason: str
    ) -> SQLModelBase:
        """脱敏应聘者姓名与电话"""
        row = await self.load(db, actor, id)
        data = {"name": mask_name(row.name), "phone": mask_phone(row.phone)}
        row = await self.crud.update(db, db_obj=row, obj_in=data)
        await record_masking(db, actor, row, list(data), reason=reason)
        return self.to_response(row)


system_admin_service = SystemAdminService()
hr_recruiter_service = HrRecruiterService()
tech_reviewer_service = TechReviewerService()
applicant_service = ApplicantService()
