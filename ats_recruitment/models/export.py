"""
导出任务模型模块 - SQLModel 版本

导出任务只是带状态字段的记录，本服务不执行实际导出
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
    DateTimeField,
    utcnow,
)


# ==================== 导出任务（硬删除） ====================

class ExportJobBase(SQLModelBase):
    job_type: str = Field(..., min_length=1, max_length=50, description="applications / interviews / coding_tests")
    target_job_posting_id: Optional[str] = Field(
        None, foreign_key="ats_recruitment_job_postings.id", index=True
    )
    filter_criteria: Optional[str] = Field(None, description="筛选条件 JSON 文本")
    delivery_method: str = Field("download", max_length=50)


class ExportJob(ExportJobBase, TimestampMixin, IDMixin, table=True):
    """导出任务表模型"""
    __tablename__ = "ats_recruitment_export_jobs"

    requestor_id: str = Field(..., max_length=36, index=True)
    requestor_role: str = Field(..., max_length=50)
    status: str = Field("pending", max_length=50, index=True)
    file_uri: Optional[str] = Field(None, max_length=1000)
    completed_at: Optional[datetime] = DateTimeField(None)


class ExportJobCreate(ExportJobBase):
    pass


class ExportJobUpdate(SQLModelBase):
    filter_criteria: Optional[str] = None
    delivery_method: Optional[str] = Field(None, max_length=50)
    status: Optional[str] = Field(None, max_length=50)
    file_uri: Optional[str] = Field(None, max_length=1000)
    completed_at: Optional[datetime] = None


class ExportJobResponse(ExportJobBase, TimestampResponse):
    requestor_id: str
    requestor_role: str
    status: str
    file_uri: Optional[str] = None
    completed_at: Optional[datetime] = None


class ExportJobRequest(PageRequest):
    requestor_id: Optional[str] = None
    requestor_role: Optional[str] = None
    job_type: Optional[str] = None
    status: Optional[str] = None
    target_job_posting_id: Optional[str] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None


# ==================== 导出明细（只读） ====================

class ExportJobDetail(SoftDeleteMixin, TimestampMixin, IDMixin, SQLModelBase, table=True):
    """导出明细表模型"""
    __tablename__ = "ats_recruitment_export_job_details"

    export_job_id: str = Field(..., foreign_key="ats_recruitment_export_jobs.id", index=True)
    record_type: str = Field(..., max_length=100)
    record_id: str = Field(..., max_length=36)
    exported_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class ExportJobDetailResponse(SoftDeleteResponse):
    export_job_id: str
    record_type: str
    record_id: str
    exported_at: datetime


class ExportJobDetailRequest(PageRequest):
    record_type: Optional[str] = None
    record_id: Optional[str] = None


# ==================== 导出失败（只读） ====================

class ExportJobFailure(SoftDeleteMixin, TimestampMixin, IDMixin, SQLModelBase, table=True):
    """导出失败表模型"""
    __tablename__ = "ats_recruitment_export_job_failures"

    export_job_id: str = Field(..., foreign_key="ats_recruitment_export_jobs.id", index=True)
    failure_reason: str = Field(..., max_length=2000)
    failed_at: datetime = DateTimeField(default_factory=utcnow, nullable=False)


class ExportJobFailureResponse(SoftDeleteResponse):
    export_job_id: str
    failure_reason: str
    failed_at: datetime


class ExportJobFailureRequest(PageRequest):
    failed_at_from: Optional[datetime] = None
    failed_at_to: Optional[datetime] = None
