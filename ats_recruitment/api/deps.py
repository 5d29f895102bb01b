"""
API 依赖注入

每个角色一个 RoleAuthorizer 实例：校验 Bearer 令牌、角色判别符与账号状态，
返回当前参与者载荷
"""
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.database import get_db
from ats_recruitment.core.exceptions import ForbiddenException, UnauthorizedException
from ats_recruitment.core.security import ACCESS_TOKEN, decode_token
from ats_recruitment.crud.actors import (
    CRUDActor, system_admin_crud, hr_recruiter_crud, tech_reviewer_crud, applicant_crud,
)
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.base import ActorRole

bearer_scheme = HTTPBearer(auto_error=False)


class RoleAuthorizer:
    """
    角色授权依赖

    - 缺少、格式错误或过期的令牌 -> 401
    - 角色不符、账号不存在（含已删除）或已停用 -> 403
    """

    def __init__(self, role: ActorRole, crud: CRUDActor):
        self.role = role
        self.crud = crud

    async def __call__(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        db: AsyncSession = Depends(get_db),
    ) -> ActorPayload:
        if credentials is None or credentials.scheme.lower() != "bearer":
            raise UnauthorizedException("缺少访问令牌")

        payload = decode_token(credentials.credentials, token_use=ACCESS_TOKEN)
        if payload["type"] != self.role.value:
            raise ForbiddenException(f"需要 {self.role.value} 角色")

        actor = await self.crud.get(db, payload["id"])
        if actor is None:
            raise ForbiddenException(f"{self.crud.label}不存在")
        if not actor.is_active:
            raise ForbiddenException(f"{self.crud.label}已停用")

        return ActorPayload(
            id=actor.id,
            type=self.role.value,
            email=actor.email,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )


def public_actor() -> None:
    """公开接口不需要身份"""
    return None


authorize_system_admin = RoleAuthorizer(ActorRole.SYSTEM_ADMIN, system_admin_crud)
authorize_hr_recruiter = RoleAuthorizer(ActorRole.HR_RECRUITER, hr_recruiter_crud)
authorize_tech_reviewer = RoleAuthorizer(ActorRole.TECH_REVIEWER, tech_reviewer_crud)
authorize_applicant = RoleAuthorizer(ActorRole.APPLICANT, applicant_crud)
