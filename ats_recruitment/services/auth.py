"""
认证服务

每个角色一套：注册（join）、登录（login）、刷新令牌（refresh）。
登录失败先提交认证失败记录，再返回 401
"""
from typing import Optional, Type
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from ats_recruitment.core.config import settings
from ats_recruitment.core.exceptions import (
    ConflictException,
    ForbiddenException,
    UnauthorizedException,
)
from ats_recruitment.core.security import (
    REFRESH_TOKEN,
    decode_token,
    get_password_hash,
    issue_tokens,
    verify_password,
)
from ats_recruitment.crud.actors import (
    CRUDActor, system_admin_crud, hr_recruiter_crud, tech_reviewer_crud, applicant_crud,
)
from ats_recruitment.models.actors import (
    LoginRequest,
    SystemAdminJoin, SystemAdminResponse, SystemAdminAuthorized,
    HrRecruiterJoin, HrRecruiterResponse, HrRecruiterAuthorized,
    TechReviewerJoin, TechReviewerResponse, TechReviewerAuthorized,
    ApplicantJoin, ApplicantResponse, ApplicantAuthorized,
)
from ats_recruitment.models.base import ActorRole, SQLModelBase
from ats_recruitment.models.compliance import AuthenticationFailure


class AuthService:
    """单一角色的认证服务"""

    def __init__(
        self,
        role: ActorRole,
        crud: CRUDActor,
        join_schema: Type[SQLModelBase],
        response_model: Type[SQLModelBase],
        authorized_model: Type[SQLModelBase],
    ):
        self.role = role
        self.crud = crud
        self.join_schema = join_schema
        self.response_model = response_model
        self.authorized_model = authorized_model

    def authorize(self, actor) -> SQLModelBase:
        """组装 参与者 DTO + token"""
        tokens = issue_tokens(actor.id, self.role.value, actor.email)
        body = self.response_model.model_validate(actor).model_dump()
        return self.authorized_model.model_validate({**body, "token": tokens})

    async def join(self, db: AsyncSession, obj_in: SQLModelBase) -> SQLModelBase:
        """注册"""
        if self.role == ActorRole.SYSTEM_ADMIN and not settings.admin_join_enabled:
            raise ForbiddenException("系统管理员自助注册已关闭")

        if await self.crud.get_by_email(db, obj_in.email):
            raise ConflictException(f"{self.crud.label}邮箱已被注册: {obj_in.email}")

        data = obj_in.model_dump(exclude={"password"})
        data["password_hash"] = get_password_hash(obj_in.password)
        actor = await self.crud.create(db, obj_in=data)

        logger.info(f"{self.crud.label}注册成功: {actor.email}")
        return self.authorize(actor)

    async def _record_failure(
        self,
        db: AsyncSession,
        email: str,
        reason: str,
        ip_address: Optional[str],
        user_agent: Optional[str],
    ) -> None:
        db.add(AuthenticationFailure(
            attempted_email=email,
            actor_role=self.role.value,
            failure_reason=reason,
            ip_address=ip_address,
            user_agent=user_agent,
        ))
        # 失败记录必须落库，不随后续的异常回滚
        await db.commit()
        logger.warning(f"{self.crud.label}登录失败: {email} ({reason})")

    async def login(
        self,
        db: AsyncSession,
        credentials: LoginRequest,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> SQLModelBase:
        """登录"""
        actor = await self.crud.get_by_email(db, credentials.email)
        if actor is None or not verify_password(credentials.password, actor.password_hash):
            await self._record_failure(db, credentials.email, "invalid_credentials", ip_address, user_agent)
            raise UnauthorizedException("邮箱或密码错误")
        if not actor.is_active:
            await self._record_failure(db, credentials.email, "inactive_account", ip_address, user_agent)
            raise ForbiddenException("账号已停用")

        logger.info(f"{self.crud.label}登录成功: {actor.email}")
        return self.authorize(actor)

    async def refresh(self, db: AsyncSession, refresh_token: str) -> SQLModelBase:
        """用刷新令牌换取新令牌"""
        payload = decode_token(refresh_token, token_use=REFRESH_TOKEN)
        if payload["type"] != self.role.value:
            raise ForbiddenException("令牌角色不匹配")

        actor = await self.crud.get(db, payload["id"])
        if actor is None or not actor.is_active:
            raise ForbiddenException("账号不存在或已停用")
        return self.authorize(actor)


auth_services = {
    ActorRole.SYSTEM_ADMIN.value: AuthService(
        ActorRole.SYSTEM_ADMIN, system_admin_crud,
        SystemAdminJoin, SystemAdminResponse, SystemAdminAuthorized,
    ),
    ActorRole.HR_RECRUITER.value: AuthService(
        ActorRole.HR_RECRUITER, hr_recruiter_crud,
        HrRecruiterJoin, HrRecruiterResponse, HrRecruiterAuthorized,
    ),
    ActorRole.TECH_REVIEWER.value: AuthService(
        ActorRole.TECH_REVIEWER, tech_reviewer_crud,
        TechReviewerJoin, TechReviewerResponse, TechReviewerAuthorized,
    ),
    ActorRole.APPLICANT.value: AuthService(
        ActorRole.APPLICANT, applicant_crud,
        ApplicantJoin, ApplicantResponse, ApplicantAuthorized,
    ),
}
