"""
导出任务 CRUD 操作
"""
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.models.export import ExportJob, ExportJobDetail, ExportJobFailure
from .base import CRUDBase


class CRUDExportJob(CRUDBase[ExportJob]):
    """导出任务 CRUD 操作类"""

    async def remove_children(self, db: AsyncSession, export_job_id: str) -> None:
        """物理删除任务前先清理明细与失败记录"""
        for child in (ExportJobDetail, ExportJobFailure):
            await db.execute(delete(child).where(child.export_job_id == export_job_id))


export_job_crud = CRUDExportJob(
    ExportJob,
    label="导出任务",
    search_fields=("job_type", "filter_criteria"),
    exact_filters=("requestor_id", "requestor_role", "job_type", "status", "target_job_posting_id"),
    range_filters=("created_at",),
    sortable=("status", "job_type", "completed_at"),
)

export_job_detail_crud = CRUDBase(
    ExportJobDetail,
    label="导出明细",
    exact_filters=("record_type", "record_id"),
    sortable=("exported_at",),
    default_sort="exported_at",
)

export_job_failure_crud = CRUDBase(
    ExportJobFailure,
    label="导出失败记录",
    search_fields=("failure_reason",),
    range_filters=("failed_at",),
    sortable=("failed_at",),
    default_sort="failed_at",
)
