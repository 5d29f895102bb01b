"""
面试模型模块 - SQLModel 版本

面试、参与人、排期与面试题
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field

from .base import (
    SQLModelBase,
    TimestampMixin,
    SoftDeleteMixin,
    IDMixin,
    TimestampResponse,
    SoftDeleteResponse,
    PageRequest,
    ParticipantRoleName,
    DateTimeField,
    utcnow,
)


# ==================== 面试 ====================

class InterviewBase(SQLModelBase):
    title: str = Field(..., min_length=1, max_length=255)
    stage: str = Field(..., min_length=1, max_length=50, description="面试阶段，如 first_phase / technical_screen")
    status: str = Field("scheduled", max_length=50, description="面试状态")
    notes: Optional[str] = None


class Interview(InterviewBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """面试表模型"""
    __tablename__ = "ats_recruitment_interviews"

    application_id: str = Field(..., foreign_key="ats_recruitment_applications.id", index=True)


class InterviewCreate(InterviewBase):
    application_id: str


class InterviewUpdate(SQLModelBase):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    stage: Optional[str] = Field(None, min_length=1, max_length=50)
    status: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None


class InterviewResponse(InterviewBase, SoftDeleteResponse):
    application_id: str


class InterviewRequest(PageRequest):
    application_id: Optional[str] = None
    stage: Optional[str] = None
    status: Optional[str] = None
    title: Optional[str] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None


# ==================== 参与人（硬删除） ====================

class InterviewParticipant(TimestampMixin, IDMixin, SQLModelBase, table=True):
    """面试参与人表模型"""
    __tablename__ = "ats_recruitment_interview_participants"

    interview_id: str = Field(..., foreign_key="ats_recruitment_interviews.id", index=True)
    participant_id: str = Field(..., max_length=36, index=True)
    participant_role: str = Field(..., max_length=50, description="applicant / hrRecruiter / techReviewer")
    role: str = Field(..., max_length=50, description="面试中的角色，如 interviewer / candidate / observer")
    invited_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)
    confirmation_status: str = Field("pending", max_length=50)


class InterviewParticipantCreate(SQLModelBase):
    participant_id: str
    participant_role: ParticipantRoleName
    role: str = Field(..., min_length=1, max_length=50)
    confirmation_status: str = Field("pending", max_length=50)


class InterviewParticipantUpdate(SQLModelBase):
    role: Optional[str] = Field(None, min_length=1, max_length=50)
    confirmation_status: Optional[str] = Field(None, max_length=50)


class InterviewParticipantResponse(TimestampResponse):
    interview_id: str
    participant_id: str
    participant_role: str
    role: str
    invited_at: datetime
    confirmation_status: str


class InterviewParticipantRequest(PageRequest):
    participant_id: Optional[str] = None
    participant_role: Optional[str] = None
    role: Optional[str] = None
    confirmation_status: Optional[str] = None


# ==================== 排期 ====================

class InterviewScheduleBase(SQLModelBase):
    start_at: datetime = DateTimeField(...)
    end_at: datetime = DateTimeField(...)
    timezone: str = Field("UTC", max_length=64)
    schedule_source: str = Field("manual", max_length=50)
    schedule_status: str = Field("proposed", max_length=50)
    cancellation_reason: Optional[str] = Field(None, max_length=1000)


class InterviewSchedule(InterviewScheduleBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """面试排期表模型"""
    __tablename__ = "ats_recruitment_interview_schedules"

    interview_id: str = Field(..., foreign_key="ats_recruitment_interviews.id", index=True)


class InterviewScheduleCreate(InterviewScheduleBase):
    pass


class InterviewScheduleUpdate(SQLModelBase):
    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    timezone: Optional[str] = Field(None, max_length=64)
    schedule_source: Optional[str] = Field(None, max_length=50)
    schedule_status: Optional[str] = Field(None, max_length=50)
    cancellation_reason: Optional[str] = Field(None, max_length=1000)


class InterviewScheduleResponse(InterviewScheduleBase, SoftDeleteResponse):
    interview_id: str


class InterviewScheduleRequest(PageRequest):
    schedule_status: Optional[str] = None
    schedule_source: Optional[str] = None
    start_at_from: Optional[datetime] = None
    start_at_to: Optional[datetime] = None


# ==================== 面试题 ====================

class InterviewQuestionBase(SQLModelBase):
    order: int = Field(0, ge=0, description="题目顺序")
    question_text: str = Field(..., min_length=1)
    question_type: str = Field("general", max_length=50)
    is_visible_to_candidate: bool = Field(False)


class InterviewQuestion(InterviewQuestionBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """面试题表模型"""
    __tablename__ = "ats_recruitment_interview_questions"

    interview_id: str = Field(..., foreign_key="ats_recruitment_interviews.id", index=True)


class InterviewQuestionCreate(InterviewQuestionBase):
    pass


class InterviewQuestionUpdate(SQLModelBase):
    order: Optional[int] = Field(None, ge=0)
    question_text: Optional[str] = Field(None, min_length=1)
    question_type: Optional[str] = Field(None, max_length=50)
    is_visible_to_candidate: Optional[bool] = None


class InterviewQuestionResponse(InterviewQuestionBase, SoftDeleteResponse):
    interview_id: str


class InterviewQuestionRequest(PageRequest):
    question_type: Optional[str] = None
    is_visible_to_candidate: Optional[bool] = None
