"""
公开 API 路由（无需登录）

仅开放对外可见岗位与通用枚举的只读访问
"""
from fastapi import APIRouter

from ats_recruitment.api.deps import public_actor
from ats_recruitment.api.router import READ_OPS, include_resources
from ats_recruitment.services import job_posting_service, ats_enum_service

RESOURCES = [
    (job_posting_service, "/jobPostings", "job_postings", READ_OPS),
    (ats_enum_service, "/enums", "enums", READ_OPS),
]

router = APIRouter()
include_resources(router, public_actor, "public", RESOURCES)
