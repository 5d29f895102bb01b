"""
资源服务基类

所有实体共用一套处理流程：
    授权 -> 存在性校验 -> 读取/变更 -> 映射响应 DTO（可选写审计）

子类通过类属性声明元数据，通过钩子方法实现实体业务规则
"""
from typing import Any, Dict, List, Optional, Type
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel
from loguru import logger

from ats_recruitment.core.exceptions import ForbiddenException, NotFoundException
from ats_recruitment.core.response import build_page
from ats_recruitment.crud.base import CRUDBase
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.base import PageRequest, SQLModelBase
from .audit import AuditOperation, record_audit, snapshot


class ResourceService:
    """
    资源服务基类

    类属性:
        crud: 数据访问对象
        response_model: 响应 DTO
        create_schema / update_schema / request_schema: 请求体 Schema
        parent: 嵌套路由的父资源服务，parent_field 为本表指向父资源的列
        references: 外键列 -> 被引用实体的 CRUD，写入前校验被引用记录有效
        visible_to: 角色 -> 列名，该角色只能读取此列等于自身 ID 的记录
        owned_by: 角色 -> 列名，该角色只能修改/删除此列等于自身 ID 的记录，
                  创建时此列缺省为自身 ID
        audited: 写操作是否写入审计轨迹
    """

    crud: CRUDBase
    response_model: Type[SQLModelBase]
    create_schema: Optional[Type[SQLModelBase]] = None
    update_schema: Optional[Type[SQLModelBase]] = None
    request_schema: Type[PageRequest] = PageRequest

    parent: Optional["ResourceService"] = None
    parent_field: Optional[str] = None
    references: Dict[str, CRUDBase] = {}
    visible_to: Dict[str, str] = {}
    owned_by: Dict[str, str] = {}
    audited: bool = False

    def __init__(self, parent: Optional["ResourceService"] = None):
        if parent is not None:
            self.parent = parent

    @property
    def model(self) -> Type[SQLModel]:
        return self.crud.model

    @property
    def label(self) -> str:
        return self.crud.label

    # ==================== 钩子 ====================

    def scope(self, actor: Optional[ActorPayload]) -> List[Any]:
        """读取可见范围条件，actor 为 None 表示公开访问"""
        if actor is None:
            return []
        field = self.visible_to.get(actor.type)
        if field is None:
            return []
        return [getattr(self.model, field) == actor.id]

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        """创建前的实体规则，返回最终写入的数据"""
        return data

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """更新前的实体规则，返回最终写入的稀疏数据"""
        return data

    async def validate_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        """删除前的引用保护等规则"""

    async def after_read(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        pass

    async def after_create(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        pass

    async def after_update(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        row: Any,
        previous: Dict[str, Any],
        obj_in: SQLModelBase,
    ) -> None:
        """previous 为本次变更字段的旧值"""

    async def after_delete(self, db: AsyncSession, actor: Optional[ActorPayload], row: Any) -> None:
        pass

    # ==================== 通用校验 ====================

    def to_response(self, row: Any) -> SQLModelBase:
        return self.response_model.model_validate(row)

    async def load_parent(
        self, db: AsyncSession, actor: Optional[ActorPayload], parent_id: Optional[str]
    ) -> Any:
        """加载父资源（按父资源自身的可见范围），不存在则 404"""
        if self.parent is None or parent_id is None:
            return None
        return await self.parent.load(db, actor, parent_id)

    async def load(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        id: str,
        parent_id: Optional[str] = None,
    ) -> Any:
        """加载有效记录，交叉校验父资源 ID 与可见范围"""
        conditions = self.scope(actor)
        if self.parent_field and parent_id is not None:
            await self.load_parent(db, actor, parent_id)
            conditions.append(getattr(self.model, self.parent_field) == parent_id)
        return await self.crud.get_or_404(db, id, *conditions)

    def ensure_owner(self, actor: Optional[ActorPayload], row: Any) -> None:
        """所有权校验，失败 403"""
        if actor is None:
            return
        field = self.owned_by.get(actor.type)
        if field and getattr(row, field) != actor.id:
            raise ForbiddenException(f"无权操作他人的{self.label}")

    async def check_references(self, db: AsyncSession, data: Dict[str, Any]) -> None:
        """被引用的记录必须存在且未被删除"""
        for field, crud in self.references.items():
            value = data.get(field)
            if value is not None and await crud.get(db, value) is None:
                raise NotFoundException(f"关联的{crud.label}不存在: {value}")

    async def check_unique(self, db: AsyncSession, row: Any, data: Dict[str, Any]) -> None:
        """唯一键字段发生变化时重新检查唯一性"""
        fields = {field for key in self.crud.unique_fields for field in key}
        if not fields & data.keys():
            return
        merged = {field: data.get(field, getattr(row, field)) for field in fields}
        await self.crud.ensure_unique(db, merged, exclude_id=row.id)

    # ==================== 操作 ====================

    async def search(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        request: Optional[PageRequest],
        parent_id: Optional[str] = None,
    ) -> dict:
        """分页检索"""
        conditions = self.scope(actor)
        if self.parent_field and parent_id is not None:
            await self.load_parent(db, actor, parent_id)
            conditions.append(getattr(self.model, self.parent_field) == parent_id)
        rows, records, page, limit = await self.crud.search(db, request, *conditions)
        return build_page([self.to_response(row) for row in rows], records, page, limit)

    async def detail(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        id: str,
        parent_id: Optional[str] = None,
    ) -> SQLModelBase:
        """获取详情"""
        row = await self.load(db, actor, id, parent_id)
        await self.after_read(db, actor, row)
        return self.to_response(row)

    async def create(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        obj_in: SQLModelBase,
        parent_id: Optional[str] = None,
    ) -> SQLModelBase:
        """创建记录"""
        parent = await self.load_parent(db, actor, parent_id)
        data = obj_in.model_dump()
        if self.parent_field and parent is not None:
            data[self.parent_field] = parent.id

        owner_field = self.owned_by.get(actor.type) if actor else None
        if owner_field and data.get(owner_field) is None:
            data[owner_field] = actor.id

        data = await self.prepare_create(db, actor, data, parent)
        await self.check_references(db, data)
        await self.crud.ensure_unique(db, data)

        row = await self.crud.create(db, obj_in=data)
        if self.audited:
            await record_audit(db, actor, AuditOperation.CREATE, row, after=snapshot(row))
        await self.after_create(db, actor, row)

        logger.info(f"创建{self.label}: {row.id}")
        return self.to_response(row)

    async def update(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        id: str,
        obj_in: SQLModelBase,
        parent_id: Optional[str] = None,
    ) -> SQLModelBase:
        """稀疏更新"""
        row = await self.load(db, actor, id, parent_id)
        self.ensure_owner(actor, row)

        data = obj_in.model_dump(exclude_unset=True)
        data = await self.validate_update(db, actor, row, data)
        await self.check_references(db, data)
        await self.check_unique(db, row, data)

        previous = {field: getattr(row, field) for field in data}
        before = snapshot(row) if self.audited else None
        row = await self.crud.update(db, db_obj=row, obj_in=data)
        if self.audited:
            await record_audit(db, actor, AuditOperation.UPDATE, row, before=before, after=snapshot(row))
        await self.after_update(db, actor, row, previous, obj_in)

        logger.info(f"更新{self.label}: {row.id} fields={sorted(data)}")
        return self.to_response(row)

    async def delete(
        self,
        db: AsyncSession,
        actor: Optional[ActorPayload],
        id: str,
        parent_id: Optional[str] = None,
    ) -> None:
        """删除记录（软删除或物理删除由表结构决定）"""
        row = await self.load(db, actor, id, parent_id)
        self.ensure_owner(actor, row)
        await self.validate_delete(db, actor, row)

        before = snapshot(row) if self.audited else None
        await self.crud.remove(db, db_obj=row)
        if self.audited:
            await record_audit(db, actor, AuditOperation.DELETE, row, before=before)
        await self.after_delete(db, actor, row)

        logger.info(f"删除{self.label}: {row.id}")
