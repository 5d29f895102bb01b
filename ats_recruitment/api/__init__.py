"""
API 路由模块
"""
from fastapi import APIRouter

from .v1 import auth, public, system_admin, hr_recruiter, tech_reviewer, applicant

# 创建主路由
api_router = APIRouter()

# 认证
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["认证"]
)

# 公开只读
api_router.include_router(
    public.router,
    prefix="/atsRecruitment",
    tags=["公开接口"]
)

# 各角色路由
api_router.include_router(
    system_admin.router,
    prefix="/atsRecruitment/systemAdmin",
    tags=["系统管理员"]
)
api_router.include_router(
    hr_recruiter.router,
    prefix="/atsRecruitment/hrRecruiter",
    tags=["HR 招聘专员"]
)
api_router.include_router(
    tech_reviewer.router,
    prefix="/atsRecruitment/techReviewer",
    tags=["技术评审"]
)
api_router.include_router(
    applicant.router,
    prefix="/atsRecruitment/applicant",
    tags=["应聘者"]
)
