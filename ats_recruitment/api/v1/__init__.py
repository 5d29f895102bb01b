"""
API v1 路由模块
"""
from . import auth, public, system_admin, hr_recruiter, tech_reviewer, applicant

__all__ = [
    "auth",
    "public",
    "system_admin",
    "hr_recruiter",
    "tech_reviewer",
    "applicant",
]
