"""
合规日志写入

审计轨迹、访问日志、脱敏日志、数据删除日志与业务写入共用同一会话，
由 get_db 的请求级事务统一提交或回滚
"""
import json
from typing import Any, Dict, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel
from loguru import logger

from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.compliance import AuditTrail, AccessLog, MaskingLog, DataDeletionLog

SENSITIVE_FIELDS = {"password_hash", "credential_json"}


class AuditOperation:
    """审计操作类型"""
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    MASK = "MASK"


def snapshot(obj: SQLModel) -> Dict[str, Any]:
    """记录快照（JSON 可序列化，排除敏感字段）"""
    return obj.model_dump(mode="json", exclude=SENSITIVE_FIELDS)


async def record_audit(
    db: AsyncSession,
    actor: Optional[ActorPayload],
    operation: str,
    target: SQLModel,
    *,
    before: Optional[Dict[str, Any]] = None,
    after: Optional[Dict[str, Any]] = None,
) -> AuditTrail:
    """写入审计轨迹"""
    entry = AuditTrail(
        actor_id=actor.id if actor else None,
        actor_role=actor.type if actor else None,
        operation_type=operation,
        target_type=type(target).__name__,
        target_id=target.id,
        event_detail=json.dumps({"before": before, "after": after}, ensure_ascii=False),
        ip_address=actor.ip_address if actor else None,
        user_agent=actor.user_agent if actor else None,
    )
    db.add(entry)
    await db.flush()
    logger.info(f"审计: {operation} {entry.target_type}({entry.target_id}) by {entry.actor_role}:{entry.actor_id}")
    return entry


async def record_access(
    db: AsyncSession,
    actor: ActorPayload,
    target: SQLModel,
    access_type: str = "read",
) -> AccessLog:
    """写入敏感数据访问日志"""
    entry = AccessLog(
        actor_id=actor.id,
        actor_role=actor.type,
        target_type=type(target).__name__,
        target_id=target.id,
        access_type=access_type,
    )
    db.add(entry)
    await db.flush()
    return entry


async def record_masking(
    db: AsyncSession,
    actor: ActorPayload,
    target: SQLModel,
    masked_fields: list[str],
    reason: Optional[str] = None,
) -> MaskingLog:
    """写入脱敏日志"""
    entry = MaskingLog(
        actor_id=actor.id,
        actor_role=actor.type,
        target_type=type(target).__name__,
        target_id=target.id,
        masked_fields=",".join(masked_fields),
        reason=reason,
    )
    db.add(entry)
    await db.flush()
    logger.info(f"脱敏: {entry.target_type}({entry.target_id}) fields={entry.masked_fields}")
    return entry


async def record_data_deletion(
    db: AsyncSession,
    actor: ActorPayload,
    target: SQLModel,
    reason: Optional[str] = None,
) -> DataDeletionLog:
    """写入数据删除日志"""
    entry = DataDeletionLog(
        actor_id=actor.id,
        actor_role=actor.type,
        target_type=type(target).__name__,
        target_id=target.id,
        reason=reason,
    )
    db.add(entry)
    await db.flush()
    return entry
