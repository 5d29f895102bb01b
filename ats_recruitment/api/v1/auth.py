"""
认证 API 路由

每个角色一组：
    POST /auth/{role}/join
    POST /auth/{role}/login
    POST /auth/{role}/refresh
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.database import get_db
from ats_recruitment.models.actors import LoginRequest, RefreshRequest
from ats_recruitment.services.auth import AuthService, auth_services

router = APIRouter()


def build_auth_router(role: str, service: AuthService) -> APIRouter:
    """生成单一角色的认证路由"""
    auth_router = APIRouter(prefix=f"/{role}")
    join_schema = service.join_schema
    authorized_model = service.authorized_model

    @auth_router.post("/join", name=f"{role}_join", summary="注册",
                      response_model=authorized_model, status_code=status.HTTP_201_CREATED)
    async def join(body: join_schema, db: AsyncSession = Depends(get_db)):
        return await service.join(db, body)

    @auth_router.post("/login", name=f"{role}_login", summary="登录", response_model=authorized_model)
    async def login(body: LoginRequest, request: Request, db: AsyncSession = Depends(get_db)):
        return await service.login(
            db,
            body,
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )

    @auth_router.post("/refresh", name=f"{role}_refresh", summary="刷新令牌", response_model=authorized_model)
    async def refresh(body: RefreshRequest, db: AsyncSession = Depends(get_db)):
        return await service.refresh(db, body.refresh_token)

    return auth_router


for _role, _service in auth_services.items():
    router.include_router(build_auth_router(_role, _service))
