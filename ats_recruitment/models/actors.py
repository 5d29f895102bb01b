"""
参与者模型模块 - SQLModel 版本

四类参与者：系统管理员、HR 招聘专员、技术评审、应聘者。
HR 招聘专员与技术评审为硬删除，管理员与应聘者为软删除。
"""
from datetime import datetime
from typing import Optional
from pydantic import EmailStr, field_validator
from sqlmodel import Field

from .base import (
    SQLModelBase,
    TimestampMixin,
    SoftDeleteMixin,
    IDMixin,
    TimestampResponse,
    SoftDeleteResponse,
    PageRequest,
)

# ==================== 通用 Schema ====================

class EmailInput(SQLModelBase):
    """
    注册 / 登录请求中的邮箱

    格式由 EmailStr 校验，统一转小写后再查重与比对
    """
    email: EmailStr

    @field_validator("email", mode="after")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(EmailInput):
    """登录请求"""
    password: str = Field(..., min_length=1, max_length=128)


class RefreshRequest(SQLModelBase):
    """刷新令牌请求"""
    refresh_token: str = Field(..., min_length=1)


class AuthorizationToken(SQLModelBase):
    """令牌信息"""
    access: str
    refresh: str
    expired_at: datetime
    refreshable_until: datetime


class ActorPayload(SQLModelBase):
    """已认证参与者（令牌载荷 + 请求来源）"""
    id: str
    type: str
    email: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class ActorRequest(PageRequest):
    """参与者检索请求"""
    email: Optional[str] = None
    is_active: Optional[bool] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None


class ActorBase(SQLModelBase):
    """参与者公共字段"""
    email: str = Field(..., max_length=255, index=True, description="登录邮箱")
    name: str = Field(..., min_length=1, max_length=100, description="姓名")


# ==================== 系统管理员 ====================

class SystemAdminBase(ActorBase):
    super_admin: bool = Field(False, description="是否为超级管理员")


class SystemAdmin(SystemAdminBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """系统管理员表模型"""
    __tablename__ = "ats_recruitment_system_admins"

    password_hash: str = Field(..., max_length=255)
    is_active: bool = Field(default=True, index=True)

    def __repr__(self) -> str:
        return f"<SystemAdmin(id={self.id}, email={self.email})>"


class SystemAdminJoin(EmailInput, SystemAdminBase):
    """管理员注册请求"""
    password: str = Field(..., min_length=8, max_length=128)


class SystemAdminUpdate(SQLModelBase):
    """更新管理员请求 - 所有字段可选"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    super_admin: Optional[bool] = None
    is_active: Optional[bool] = None


class SystemAdminResponse(SystemAdminBase, SoftDeleteResponse):
    """管理员响应"""
    is_active: bool


class SystemAdminAuthorized(SystemAdminResponse):
    """管理员认证响应"""
    token: AuthorizationToken


class SystemAdminRequest(ActorRequest):
    super_admin: Optional[bool] = None


# ==================== HR 招聘专员 ====================

class HrRecruiterBase(ActorBase):
    department: Optional[str] = Field(None, max_length=255, description="所属部门")


class HrRecruiter(HrRecruiterBase, TimestampMixin, IDMixin, table=True):
    """HR 招聘专员表模型（硬删除）"""
    __tablename__ = "ats_recruitment_hr_recruiters"

    password_hash: str = Field(..., max_length=255)
    is_active: bool = Field(default=True, index=True)

    def __repr__(self) -> str:
        return f"<HrRecruiter(id={self.id}, email={self.email})>"


class HrRecruiterJoin(EmailInput, HrRecruiterBase):
    """HR 注册请求"""
    password: str = Field(..., min_length=8, max_length=128)


class HrRecruiterUpdate(SQLModelBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    department: Optional[str] = Field(None, max_length=255)
    is_active: Optional[bool] = None


class HrRecruiterResponse(HrRecruiterBase, TimestampResponse):
    is_active: bool


class HrRecruiterAuthorized(HrRecruiterResponse):
    token: AuthorizationToken


class HrRecruiterRequest(ActorRequest):
    department: Optional[str] = None


# ==================== 技术评审 ====================

class TechReviewerBase(ActorBase):
    specialization: Optional[str] = Field(None, max_length=255, description="技术方向")


class TechReviewer(TechReviewerBase, TimestampMixin, IDMixin, table=True):
    """技术评审表模型（硬删除）"""
    __tablename__ = "ats_recruitment_tech_reviewers"

    password_hash: str = Field(..., max_length=255)
    is_active: bool = Field(default=True, index=True)

    def __repr__(self) -> str:
        return f"<TechReviewer(id={self.id}, email={self.email})>"


class TechReviewerJoin(EmailInput, TechReviewerBase):
    password: str = Field(..., min_length=8, max_length=128)


class TechReviewerUpdate(SQLModelBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    specialization: Optional[str] = Field(None, max_length=255)
    is_active: Optional[bool] = None


class TechReviewerResponse(TechReviewerBase, TimestampResponse):
    is_active: bool


class TechReviewerAuthorized(TechReviewerResponse):
    token: AuthorizationToken


class TechReviewerRequest(ActorRequest):
    specialization: Optional[str] = None


# ==================== 应聘者 ====================

class ApplicantBase(ActorBase):
    phone: Optional[str] = Field(None, max_length=50, description="联系电话")


class Applicant(ApplicantBase, SoftDeleteMixin, TimestampMixin, IDMixin, table=True):
    """应聘者表模型"""
    __tablename__ = "ats_recruitment_applicants"

    password_hash: str = Field(..., max_length=255)
    is_active: bool = Field(default=True, index=True)

    def __repr__(self) -> str:
        return f"<Applicant(id={self.id}, email={self.email})>"


class ApplicantJoin(EmailInput, ApplicantBase):
    password: str = Field(..., min_length=8, max_length=128)


class ApplicantUpdate(SQLModelBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=50)
    is_active: Optional[bool] = None


class ApplicantResponse(ApplicantBase, SoftDeleteResponse):
    is_active: bool


class ApplicantAuthorized(ApplicantResponse):
    token: AuthorizationToken


class ApplicantRequest(ActorRequest):
    phone: Optional[str] = None


class ApplicantMaskRequest(SQLModelBase):
    """应聘者信息脱敏请求"""
    reason: str = Field(..., min_length=1, max_length=500, description="脱敏原因")
