"""
资源路由工厂

按服务元数据生成一组标准 CRUD 路由：
    PATCH  {path}            分页检索
    GET    {path}/{item_id}  详情
    POST   {path}            创建（201）
    PUT    {path}/{item_id}  稀疏更新
    DELETE {path}/{item_id}  删除（204）

path 中包含 {parent_id} 时为嵌套路由，父资源 ID 取自路径
"""
from typing import Callable, Iterable, Optional
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.database import get_db
from ats_recruitment.core.response import Page
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.services.base import ResourceService

SEARCH = "search"
DETAIL = "detail"
CREATE = "create"
UPDATE = "update"
DELETE = "delete"

ALL_OPS = (SEARCH, DETAIL, CREATE, UPDATE, DELETE)
READ_OPS = (SEARCH, DETAIL)


def nested_parent(parent_id: str) -> str:
    return parent_id


def no_parent() -> None:
    return None


def build_resource_router(
    service: ResourceService,
    authorize: Callable,
    *,
    path: str,
    name: str,
    ops: Iterable[str] = ALL_OPS,
    tags: Optional[list] = None,
) -> APIRouter:
    """
    生成资源路由

    Args:
        service: 资源服务
        authorize: 身份依赖（RoleAuthorizer 实例或 public_actor）
        path: 路由路径，如 /jobPostings 或 /applications/{parent_id}/feedbacks
        name: 路由名前缀，作为 OpenAPI operationId 的一部分，全局唯一
        ops: 开放的操作
    """
    router = APIRouter(tags=tags)
    ops = set(ops)
    parent_dep = nested_parent if "{parent_id}" in path else no_parent
    response_model = service.response_model
    label = service.label

    if SEARCH in ops:
        request_schema = service.request_schema

        @router.patch(path, name=f"{name}_search", summary=f"检索{label}",
                      response_model=Page[response_model])
        async def search(
            request: Optional[request_schema] = Body(None),
            parent_id: Optional[str] = Depends(parent_dep),
            actor: Optional[ActorPayload] = Depends(authorize),
            db: AsyncSession = Depends(get_db),
        ):
            return await service.search(db, actor, request, parent_id)

    if DETAIL in ops:
        @router.get(f"{path}/{{item_id}}", name=f"{name}_detail", summary=f"获取{label}详情",
                    response_model=response_model)
        async def detail(
            item_id: str,
            parent_id: Optional[str] = Depends(parent_dep),
            actor: Optional[ActorPayload] = Depends(authorize),
            db: AsyncSession = Depends(get_db),
        ):
            return await service.detail(db, actor, item_id, parent_id)

    if CREATE in ops:
        create_schema = service.create_schema

        @router.post(path, name=f"{name}_create", summary=f"创建{label}",
                     response_model=response_model, status_code=status.HTTP_201_CREATED)
        async def create(
            body: create_schema,
            parent_id: Optional[str] = Depends(parent_dep),
            actor: Optional[ActorPayload] = Depends(authorize),
            db: AsyncSession = Depends(get_db),
        ):
            return await service.create(db, actor, body, parent_id)

    if UPDATE in ops:
        update_schema = service.update_schema

        @router.put(f"{path}/{{item_id}}", name=f"{name}_update", summary=f"更新{label}",
                    response_model=response_model)
        async def update(
            item_id: str,
            body: update_schema,
            parent_id: Optional[str] = Depends(parent_dep),
            actor: Optional[ActorPayload] = Depends(authorize),
            db: AsyncSession = Depends(get_db),
        ):
            return await service.update(db, actor, item_id, body, parent_id)

    if DELETE in ops:
        @router.delete(f"{path}/{{item_id}}", name=f"{name}_delete", summary=f"删除{label}",
                       status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
        async def delete(
            item_id: str,
            parent_id: Optional[str] = Depends(parent_dep),
            actor: Optional[ActorPayload] = Depends(authorize),
            db: AsyncSession = Depends(get_db),
        ):
            await service.delete(db, actor, item_id, parent_id)
            return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def include_resources(
    router: APIRouter,
    authorize: Callable,
    name_prefix: str,
    resources: Iterable[tuple],
    tags: Optional[list] = None,
) -> None:
    """按 (服务, 路径, 名称, 操作) 表批量挂载资源路由"""
    for service, path, name, ops in resources:
        router.include_router(build_resource_router(
            service, authorize, path=path, name=f"{name_prefix}_{name}", ops=ops, tags=tags,
        ))
