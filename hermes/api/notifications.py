# hermes/api/notifications.py
import logging

from fastapi import APIRouter, Depends

from hermes.models.notification import NotificationResponse
from hermes.services.notification_generator import (
    NotificationGenerator,
    notification_generator,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


def get_notification_generator() -> NotificationGenerator:
    return notification_generator


@router.get("/notifications/{user_id}", response_model=NotificationResponse)
async def get_notifications(
    user_id: str,
    generator: NotificationGenerator = Depends(get_notification_generator),
):
    """
    Devuelve las notificaciones de un usuario.
    No hay validación del user_id ni autenticación: cualquier valor devuelve 200.
    """
    logger.info("Fetching notifications for user: %s", user_id)
    return generator.get_user_notifications(user_id)
