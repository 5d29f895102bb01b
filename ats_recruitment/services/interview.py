"""
面试相关服务

面试、参与人、排期、面试题。应聘者只能看到自己申请下的面试，
面试题只能看到对候选人可见的部分
"""
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.exceptions import BadRequestException, NotFoundException
from ats_recruitment.crud.actors import get_actor_crud
from ats_recruitment.crud.application import application_crud
from ats_recruitment.crud.interview import (
    interview_crud, interview_participant_crud, interview_schedule_crud, interview_question_crud,
)
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.application import Application
from ats_recruitment.models.base import ActorRole, as_utc
from ats_recruitment.models.interview import (
    InterviewCreate, InterviewUpdate, InterviewResponse, InterviewRequest,
    InterviewParticipantCreate, InterviewParticipantUpdate, InterviewParticipantResponse,
    InterviewParticipantRequest,
    InterviewScheduleCreate, InterviewScheduleUpdate, InterviewScheduleResponse, InterviewScheduleRequest,
    InterviewQuestionCreate, InterviewQuestionUpdate, InterviewQuestionResponse, InterviewQuestionRequest,
)
from .base import ResourceService


def applicant_application_ids(applicant_id: str):
    """某应聘者的有效申请 ID 子查询"""
    return select(Application.id).where(
        Application.applicant_id == applicant_id,
        Application.deleted_at.is_(None),
    )


class InterviewService(ResourceService):
    crud = interview_crud
    response_model = InterviewResponse
    create_schema = InterviewCreate
    update_schema = InterviewUpdate
    request_schema = InterviewRequest
    references = {"application_id": application_crud}

    def scope(self, actor: Optional[ActorPayload]) -> List[Any]:
        if actor is not None and actor.type == ActorRole.APPLICANT:
            return [self.model.application_id.in_(applicant_application_ids(actor.id))]
        return []


class InterviewParticipantService(ResourceService):
    crud = interview_participant_crud
    response_model = InterviewParticipantResponse
    create_schema = InterviewParticipantCreate
    update_schema = InterviewParticipantUpdate
    request_schema = InterviewParticipantRequest
    parent_field = "interview_id"

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        crud = get_actor_crud(data["participant_role"])
        if await crud.get(db, data["participant_id"]) is None:
            raise NotFoundException(f"参与人不存在: {crud.label} {data['participant_id']}")
        return data


def check_schedule_window(start_at, end_at) -> None:
    if as_utc(end_at) <= as_utc(start_at):
        raise BadRequestException("结束时间必须晚于开始时间")


class InterviewScheduleService(ResourceService):
    crud = interview_schedule_crud
    response_model = InterviewScheduleResponse
    create_schema = InterviewScheduleCreate
    update_schema = InterviewScheduleUpdate
    request_schema = InterviewScheduleRequest
    parent_field = "interview_id"
    audited = True

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        check_schedule_window(data["start_at"], data["end_at"])
        return data

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        if "start_at" in data or "end_at" in data:
            check_schedule_window(data.get("start_at") or row.start_at, data.get("end_at") or row.end_at)
        return data


class InterviewQuestionService(ResourceService):
    crud = interview_question_crud
    response_model = InterviewQuestionResponse
    create_schema = InterviewQuestionCreate
    update_schema = InterviewQuestionUpdate
    request_schema = InterviewQuestionRequest
    parent_field = "interview_id"

    def scope(self, actor: Optional[ActorPayload]) -> List[Any]:
        if actor is not None and actor.type == ActorRole.APPLICANT:
            return [self.model.is_visible_to_candidate == True]  # noqa: E712
        return []


interview_service = InterviewService()
interview_participant_service = InterviewParticipantService(parent=interview_service)
interview_schedule_service = InterviewScheduleService(parent=interview_service)
interview_question_service = InterviewQuestionService(parent=interview_service)
