"""
通知相关服务

通知只是带状态的记录，本服务不负责实际投递。
非管理员只能看到发给自己的通知，且只能修改通知状态（如标记已读）
"""
from typing import Any, Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from ats_recruitment.core.exceptions import ForbiddenException, NotFoundException
from ats_recruitment.crud.actors import get_actor_crud
from ats_recruitment.crud.notification import (
    notification_template_crud, notification_crud, notification_delivery_crud,
    notification_failure_crud,
)
from ats_recruitment.models.actors import ActorPayload
from ats_recruitment.models.base import ActorRole
from ats_recruitment.models.notification import (
    NotificationTemplateCreate, NotificationTemplateUpdate, NotificationTemplateResponse,
    NotificationTemplateRequest,
    NotificationCreate, NotificationUpdate, NotificationResponse, NotificationRequest,
    NotificationDeliveryCreate, NotificationDeliveryUpdate, NotificationDeliveryResponse,
    NotificationDeliveryRequest,
    NotificationFailureResponse, NotificationFailureRequest,
)
from .base import ResourceService

RECIPIENT_EDITABLE = {"status"}


class NotificationTemplateService(ResourceService):
    crud = notification_template_crud
    response_model = NotificationTemplateResponse
    create_schema = NotificationTemplateCreate
    update_schema = NotificationTemplateUpdate
    request_schema = NotificationTemplateRequest


class NotificationService(ResourceService):
    crud = notification_crud
    response_model = NotificationResponse
    create_schema = NotificationCreate
    update_schema = NotificationUpdate
    request_schema = NotificationRequest

    def scope(self, actor: Optional[ActorPayload]) -> List[Any]:
        if actor is None or actor.type == ActorRole.SYSTEM_ADMIN:
            return []
        return [
            self.model.recipient_id == actor.id,
            self.model.recipient_role == actor.type,
        ]

    async def prepare_create(
        self, db: AsyncSession, actor: Optional[ActorPayload], data: Dict[str, Any], parent: Any
    ) -> Dict[str, Any]:
        crud = get_actor_crud(data["recipient_role"])
        if await crud.get(db, data["recipient_id"]) is None:
            raise NotFoundException(f"接收人不存在: {crud.label} {data['recipient_id']}")
        return data

    async def validate_update(
        self, db: AsyncSession, actor: Optional[ActorPayload], row: Any, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        if actor is not None and actor.type != ActorRole.SYSTEM_ADMIN:
            if not data.keys() <= RECIPIENT_EDITABLE:
                raise ForbiddenException("只能修改通知状态")
        return data


class NotificationDeliveryService(ResourceService):
    crud = notification_delivery_crud
    response_model = NotificationDeliveryResponse
    create_schema = NotificationDeliveryCreate
    update_schema = NotificationDeliveryUpdate
    request_schema = NotificationDeliveryRequest
    parent_field = "notification_id"


class NotificationFailureService(ResourceService):
    crud = notification_failure_crud
    response_model = NotificationFailureResponse
    request_schema = NotificationFailureRequest
    parent_field = "notification_id"


notification_template_service = NotificationTemplateService()
notification_service = NotificationService()
notification_delivery_service = NotificationDeliveryService(parent=notification_service)
notification_failure_service = NotificationFailureService(parent=notification_service)
