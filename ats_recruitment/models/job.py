"""
岗位模型模块 - SQLModel 版本

雇佣类型、岗位状态与岗位发布
"""
from datetime import datetime
from typing import Optional
from sqlmodel import Field

from .base import (
    SQLModelBase,
    TimestampMixin,
    SoftDeleteMixin,
    IDMixin,
    SoftDeleteResponse,
    PageRequest,
    DateTimeField,
)


# ==================== 雇佣类型 ====================

class JobEmploymentTypeBase(SQLModelBase):
    name: str = Field(..., min_length=1, max_length=100, index=True, description="类型名称")
    description: Optional[str] = Field(None, max_length=1000)
    is_active: bool = Field(True, description="是否启用")


class JobEmploymentType(JobEmploymentTypeBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """雇佣类型表模型"""
    __tablename__ = "ats_recruitment_job_employment_types"


class JobEmploymentTypeCreate(JobEmploymentTypeBase):
    pass


class JobEmploymentTypeUpdate(SQLModelBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    is_active: Optional[bool] = None


class JobEmploymentTypeResponse(JobEmploymentTypeBase, SoftDeleteResponse):
    pass


class JobEmploymentTypeRequest(PageRequest):
    name: Optional[str] = None
    is_active: Optional[bool] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None


# ==================== 岗位状态 ====================

class JobPostingStateBase(SQLModelBase):
    state_code: str = Field(..., min_length=1, max_length=50, index=True, description="状态编码")
    label: str = Field(..., min_length=1, max_length=100, description="显示名称")
    description: Optional[str] = Field(None, max_length=1000)
    is_active: bool = Field(True)
    sort_order: int = Field(0, description="排序值")


class JobPostingState(JobPostingStateBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """岗位状态表模型"""
    __tablename__ = "ats_recruitment_job_posting_states"


class JobPostingStateCreate(JobPostingStateBase):
    pass


class JobPostingStateUpdate(SQLModelBase):
    state_code: Optional[str] = Field(None, min_length=1, max_length=50)
    label: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    is_active: Optional[bool] = None
    sort_order: Optional[int] = None


class JobPostingStateResponse(JobPostingStateBase, SoftDeleteResponse):
    pass


class JobPostingStateRequest(PageRequest):
    state_code: Optional[str] = None
    label: Optional[str] = None
    is_active: Optional[bool] = None


# ==================== 岗位发布 ====================

class JobPostingBase(SQLModelBase):
    hr_recruiter_id: str = Field(..., foreign_key="ats_recruitment_hr_recruiters.id", index=True)
    job_employment_type_id: str = Field(
        ..., foreign_key="ats_recruitment_job_employment_types.id", index=True
    )
    job_posting_state_id: str = Field(
        ..., foreign_key="ats_recruitment_job_posting_states.id", index=True
    )
    title: str = Field(..., min_length=1, max_length=255, description="岗位名称")
    description: str = Field(..., min_length=1, description="岗位描述/JD")
    location: Optional[str] = Field(None, max_length=255)
    salary_range_min: Optional[float] = Field(None, ge=0)
    salary_range_max: Optional[float] = Field(None, ge=0)
    application_deadline: Optional[datetime] = DateTimeField(None)
    is_visible: bool = Field(True, index=True, description="是否对外可见")


class JobPosting(JobPostingBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """岗位发布表模型"""
    __tablename__ = "ats_recruitment_job_postings"

    def __repr__(self) -> str:
        return f"<JobPosting(id={self.id}, title={self.title})>"


class JobPostingCreate(JobPostingBase):
    pass


class JobPostingUpdate(SQLModelBase):
    job_employment_type_id: Optional[str] = None
    job_posting_state_id: Optional[str] = None
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, max_length=255)
    salary_range_min: Optional[float] = Field(None, ge=0)
    salary_range_max: Optional[float] = Field(None, ge=0)
    application_deadline: Optional[datetime] = None
    is_visible: Optional[bool] = None


class JobPostingResponse(JobPostingBase, SoftDeleteResponse):
    pass


class JobPostingRequest(PageRequest):
    hr_recruiter_id: Optional[str] = None
    job_employment_type_id: Optional[str] = None
    job_posting_state_id: Optional[str] = None
    title: Optional[str] = None
    location: Optional[str] = None
    is_visible: Optional[bool] = None
    application_deadline_from: Optional[datetime] = None
    application_deadline_to: Optional[datetime] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None
