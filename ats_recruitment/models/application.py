"""
应聘申请模型模块 - SQLModel 版本

Application 连接应聘者与岗位，是面试、笔试、反馈的关联主体
"""
from datetime import datetime
from enum import Enum
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
    DateTimeField,
    utcnow,
)


class ApplicationStatus(str, Enum):
    """应聘申请状态枚举"""
    APPLIED = "applied"              # 已投递
    SCREENING = "screening"          # 筛选中
    INTERVIEWING = "interviewing"    # 面试中
    CODING_TEST = "coding_test"      # 笔试中
    OFFERED = "offered"              # 已发 Offer
    HIRED = "hired"                  # 已录用
    REJECTED = "rejected"            # 已拒绝
    WITHDRAWN = "withdrawn"          # 已撤回


TERMINAL_STATUSES = frozenset({
    ApplicationStatus.HIRED.value,
    ApplicationStatus.REJECTED.value,
    ApplicationStatus.WITHDRAWN.value,
})


# ==================== 简历 ====================

class ResumeBase(SQLModelBase):
    title: str = Field(..., min_length=1, max_length=255, description="简历标题")
    parsed_name: Optional[str] = Field(None, max_length=100)
    parsed_email: Optional[str] = Field(None, max_length=255)
    parsed_mobile: Optional[str] = Field(None, max_length=50)
    skills_summary: Optional[str] = Field(None, description="技能摘要")


class Resume(ResumeBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """简历表模型"""
    __tablename__ = "ats_recruitment_resumes"

    applicant_id: str = Field(..., foreign_key="ats_recruitment_applicants.id", index=True)


class ResumeCreate(ResumeBase):
    """创建简历请求（应聘者本人创建时 applicant_id 取自令牌）"""
    applicant_id: Optional[str] = None


class ResumeUpdate(SQLModelBase):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    parsed_name: Optional[str] = Field(None, max_length=100)
    parsed_email: Optional[str] = Field(None, max_length=255)
    parsed_mobile: Optional[str] = Field(None, max_length=50)
    skills_summary: Optional[str] = None


class ResumeResponse(ResumeBase, SoftDeleteResponse):
    applicant_id: str


class ResumeRequest(PageRequest):
    applicant_id: Optional[str] = None
    title: Optional[str] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None


# ==================== 应聘申请 ====================

class Application(SoftDeleteMixin, TimestampMixin, IDMixin, SQLModelBase, table=True):
    """应聘申请表模型（核心表）"""
    __tablename__ = "ats_recruitment_applications"

    applicant_id: str = Field(..., foreign_key="ats_recruitment_applicants.id", index=True)
    job_posting_id: str = Field(..., foreign_key="ats_recruitment_job_postings.id", index=True)
    resume_id: Optional[str] = Field(None, foreign_key="ats_recruitment_resumes.id", index=True)
    current_status: str = Field(
        default=ApplicationStatus.APPLIED.value, max_length=50, index=True, description="申请状态"
    )
    submitted_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)
    last_state_change_at: Optional[datetime] = DateTimeField(None)

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, status={self.current_status})>"


class ApplicationCreate(SQLModelBase):
    """创建应聘申请请求（应聘者本人投递时 applicant_id 取自令牌）"""
    job_posting_id: str
    resume_id: Optional[str] = None
    applicant_id: Optional[str] = None


class ApplicationUpdate(SQLModelBase):
    """更新应聘申请请求"""
    resume_id: Optional[str] = None
    current_status: Optional[str] = Field(None, max_length=50)
    change_reason: Optional[str] = Field(None, max_length=1000, description="状态变更原因（仅写入历史）")


class ApplicationResponse(SoftDeleteResponse):
    applicant_id: str
    job_posting_id: str
    resume_id: Optional[str] = None
    current_status: str
    submitted_at: datetime
    last_state_change_at: Optional[datetime] = None


class ApplicationRequest(PageRequest):
    applicant_id: Optional[str] = None
    job_posting_id: Optional[str] = None
    resume_id: Optional[str] = None
    current_status: Optional[str] = None
    submitted_at_from: Optional[datetime] = None
    submitted_at_to: Optional[datetime] = None


# ==================== 状态历史（只追加） ====================

class ApplicationStatusHistory(TimestampMixin, IDMixin, SQLModelBase, table=True):
    """申请状态变更历史表模型"""
    __tablename__ = "ats_recruitment_application_status_histories"

    application_id: str = Field(..., foreign_key="ats_recruitment_applications.id", index=True)
    actor_id: Optional[str] = Field(None, max_length=36)
    actor_role: Optional[str] = Field(None, max_length=50)
    from_status: Optional[str] = Field(None, max_length=50)
    to_status: str = Field(..., max_length=50)
    change_reason: Optional[str] = Field(None, max_length=1000)
    changed_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class ApplicationStatusHistoryResponse(TimestampResponse):
    application_id: str
    actor_id: Optional[str] = None
    actor_role: Optional[str] = None
    from_status: Optional[str] = None
    to_status: str
    change_reason: Optional[str] = None
    changed_at: datetime


class ApplicationStatusHistoryRequest(PageRequest):
    to_status: Optional[str] = None
    from_status: Optional[str] = None
    actor_id: Optional[str] = None
    changed_at_from: Optional[datetime] = None
    changed_at_to: Optional[datetime] = None


# ==================== 评审反馈 ====================

class ApplicationFeedbackBase(SQLModelBase):
    feedback_body: str = Field(..., min_length=1, description="反馈内容")
    rating: Optional[int] = Field(None, ge=1, le=5, description="评分 1-5")
    is_final_recommendation: bool = Field(False, description="是否为最终推荐意见")


class ApplicationFeedback(ApplicationFeedbackBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """评审反馈表模型"""
    __tablename__ = "ats_recruitment_application_feedbacks"

    application_id: str = Field(..., foreign_key="ats_recruitment_applications.id", index=True)
    reviewer_id: str = Field(..., max_length=36, index=True)
    reviewer_role: str = Field(..., max_length=50)


class ApplicationFeedbackCreate(ApplicationFeedbackBase):
    pass


class ApplicationFeedbackUpdate(SQLModelBase):
    feedback_body: Optional[str] = Field(None, min_length=1)
    rating: Optional[int] = Field(None, ge=1, le=5)
    is_final_recommendation: Optional[bool] = None


class ApplicationFeedbackResponse(ApplicationFeedbackBase, SoftDeleteResponse):
    application_id: str
    reviewer_id: str
    reviewer_role: str


class ApplicationFeedbackRequest(PageRequest):
    reviewer_id: Optional[str] = None
    reviewer_role: Optional[str] = None
    rating: Optional[int] = None
    is_final_recommendation: Optional[bool] = None
