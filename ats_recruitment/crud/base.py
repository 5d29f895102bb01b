"""
CRUD 基类模块 - SQLModel 版本

直接使用 SQLModel 对象，由实体元数据驱动：
- 软删除可见性（deleted_at 为空才是有效记录）
- 列表检索（精确/模糊/区间筛选、关键词、排序白名单、分页）
- 唯一键预检查
"""
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict, Sequence, Tuple
from sqlalchemy import select, func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel
from loguru import logger

from ats_recruitment.core.config import settings
from ats_recruitment.core.exceptions import BadRequestException, ConflictException, NotFoundException
from ats_recruitment.models.base import PageRequest, utcnow

ModelType = TypeVar("ModelType", bound=SQLModel)

BASE_SORTABLE = ("created_at", "updated_at")


def clamp_page(page: Optional[int]) -> int:
    """页码最小为 1"""
    return max(page or 1, 1)


def clamp_limit(limit: Optional[int]) -> int:
    """每页数量缺省为默认值，并限制在 [1, max_page_limit]"""
    if limit is None:
        limit = settings.default_page_limit
    return min(max(limit, 1), settings.max_page_limit)


class CRUDBase(Generic[ModelType]):
    """
    CRUD 基类

    Args:
        model: 表模型
        label: 实体中文名，用于错误信息
        search_fields: 关键词 search 模糊匹配的列
        exact_filters: 等值筛选列（请求字段同名）
        like_filters: 包含匹配筛选列（请求字段同名）
        range_filters: 区间筛选列，请求字段为 <列名>_from / <列名>_to
        sortable: 允许排序的列（created_at / updated_at 总是允许）
        unique_fields: 唯一键，每项为列名元组，仅在有效记录中检查
    """

    def __init__(
        self,
        model: Type[ModelType],
        *,
        label: str,
        search_fields: Sequence[str] = (),
        exact_filters: Sequence[str] = (),
        like_filters: Sequence[str] = (),
        range_filters: Sequence[str] = (),
        sortable: Sequence[str] = (),
        default_sort: str = "created_at",
        default_order: str = "desc",
        unique_fields: Sequence[Tuple[str, ...]] = (),
    ):
        self.model = model
        self.label = label
        self.search_fields = tuple(search_fields)
        self.exact_filters = tuple(exact_filters)
        self.like_filters = tuple(like_filters)
        self.range_filters = tuple(range_filters)
        self.sortable = frozenset(BASE_SORTABLE) | frozenset(sortable)
        self.default_sort = default_sort
        self.default_order = default_order
        self.unique_fields = tuple(unique_fields)
        self.soft_delete = "deleted_at" in model.model_fields

    # ==================== 查询 ====================

    def live(self, query):
        """排除软删除记录"""
        if self.soft_delete:
            return query.where(self.model.deleted_at.is_(None))
        return query

    async def get(self, db: AsyncSession, id: str, *conditions: Any) -> Optional[ModelType]:
        """根据 ID 获取有效记录，可附加额外条件（父资源、可见范围）"""
        result = await db.execute(
            self.live(select(self.model).where(self.model.id == id, *conditions))
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, db: AsyncSession, id: str, *conditions: Any) -> ModelType:
        """获取有效记录，不存在则抛出 404"""
        obj = await self.get(db, id, *conditions)
        if obj is None:
            raise NotFoundException(f"{self.label}不存在")
        return obj

    async def get_by(self, db: AsyncSession, **filters: Any) -> Optional[ModelType]:
        """按字段等值查找第一条有效记录"""
        query = select(self.model).where(
            *(getattr(self.model, field) == value for field, value in filters.items())
        )
        result = await db.execute(self.live(query).limit(1))
        return result.scalars().first()

    async def count(self, db: AsyncSession, *conditions: Any, include_deleted: bool = False) -> int:
        """
        统计满足条件的记录数

        include_deleted 为真时连同软删除记录一起统计，
        用于物理删除前检查是否仍有记录（含已软删除）引用该行
        """
        query = select(func.count()).select_from(self.model).where(*conditions)
        result = await db.execute(query if include_deleted else self.live(query))
        return result.scalar() or 0

    async def exists(self, db: AsyncSession, *conditions: Any) -> bool:
        return await self.count(db, *conditions) > 0

    # ==================== 列表检索 ====================

    def build_conditions(self, request: Optional[PageRequest]) -> List[Any]:
        """
        根据请求构建筛选条件

        每个筛选字段仅在请求中出现（非 None）时才生效
        """
        if request is None:
            return []

        conditions: List[Any] = []
        values = request.model_dump(exclude_none=True)

        for field in self.exact_filters:
            if field in values:
                conditions.append(getattr(self.model, field) == values[field])

        for field in self.like_filters:
            if field in values:
                conditions.append(getattr(self.model, field).ilike(f"%{values[field]}%"))

        for field in self.range_filters:
            column = getattr(self.model, field)
            if f"{field}_from" in values:
                conditions.append(column >= values[f"{field}_from"])
            if f"{field}_to" in values:
                conditions.append(column <= values[f"{field}_to"])

        keyword = values.get("search")
        if keyword and self.search_fields:
            conditions.append(or_(
                *(getattr(self.model, field).ilike(f"%{keyword}%") for field in self.search_fields)
            ))

        return conditions

    def order_by(self, sort_by: Optional[str], sort_order: Optional[str]):
        """排序字段必须在白名单内，否则 400"""
        field = sort_by or self.default_sort
        if field not in self.sortable:
            raise BadRequestException(f"不支持的排序字段: {field}")
        column = getattr(self.model, field)
        direction = sort_order or self.default_order
        return column.asc() if direction == "asc" else column.desc()

    async def search(
        self,
        db: AsyncSession,
        request: Optional[PageRequest],
        *scope: Any,
    ) -> Tuple[List[ModelType], int, int, int]:
        """
        分页检索

        Returns:
            (当前页数据, 总记录数, 页码, 每页数量)
        """
        page = clamp_page(request.page if request else None)
        limit = clamp_limit(request.limit if request else None)
        order = self.order_by(
            request.sort_by if request else None,
            request.sort_order if request else None,
        )
        conditions = [*scope, *self.build_conditions(request)]

        # 同一会话内不能并发执行语句，计数与取数依次进行
        records = await self.count(db, *conditions)
        offset = (page - 1) * limit
        if offset >= records:
            # 超出末页直接返回空页，过大的页码不下发到数据库
            return [], records, page, limit
        result = await db.execute(
            self.live(select(self.model).where(*conditions))
            .order_by(order, self.model.id)
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all()), records, page, limit

    # ==================== 写入 ====================

    async def ensure_unique(
        self,
        db: AsyncSession,
        values: Dict[str, Any],
        *,
        exclude_id: Optional[str] = None,
    ) -> None:
        """在有效记录中预检查唯一键，冲突则抛出 409"""
        for fields in self.unique_fields:
            if any(values.get(field) is None for field in fields):
                continue
            conditions = [getattr(self.model, field) == values[field] for field in fields]
            if exclude_id is not None:
                conditions.append(self.model.id != exclude_id)
            if await self.exists(db, *conditions):
                raise ConflictException(f"{self.label}的 {' + '.join(fields)} 已存在")

    async def _flush(self, db: AsyncSession, db_obj: ModelType) -> ModelType:
        try:
            await db.flush()
        except IntegrityError as exc:
            logger.warning(f"{self.label} 写入违反约束: {exc.orig}")
            raise ConflictException(f"{self.label}违反唯一性或引用约束")
        await db.refresh(db_obj)
        return db_obj

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: SQLModel | Dict[str, Any]
    ) -> ModelType:
        """创建记录，ID 与时间戳由模型默认值生成"""
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        return await self._flush(db, db_obj)

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: SQLModel | Dict[str, Any]
    ) -> ModelType:
        """
        稀疏更新

        只写入请求中出现的字段（显式 null 也会写入），并总是刷新 updated_at
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        columns = self.model.__table__.columns
        for field, value in update_data.items():
            if value is None and field in columns and not columns[field].nullable:
                raise BadRequestException(f"字段 {field} 不能为空")
            setattr(db_obj, field, value)
        db_obj.updated_at = utcnow()

        return await self._flush(db, db_obj)

    async def remove(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """删除记录：软删除表写 deleted_at，其余物理删除"""
        if self.soft_delete:
            now = utcnow()
            db_obj.deleted_at = now
            db_obj.updated_at = now
            return await self._flush(db, db_obj)

        await db.delete(db_obj)
        try:
            await db.flush()
        except IntegrityError as exc:
            logger.warning(f"{self.label} 删除违反约束: {exc.orig}")
            raise ConflictException(f"{self.label}仍被其他记录引用")
        return db_obj
