# hermes/services/notification_generator.py
from datetime import datetime, timedelta
import logging
from typing import Callable, List

from hermes.models.notification import (
    AlertMetadata,
    Notification,
    NotificationResponse,
    NotificationType,
    Priority,
    RouteRecommendationMetadata,
    UpdateMetadata,
)

logger = logging.getLogger(__name__)


class NotificationGenerator:
    """
    Genera notificaciones de ejemplo para un usuario.
    Todavía no hay fuente de datos real: el user_id solo se devuelve en userId.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock

    def get_user_notifications(self, user_id: str) -> NotificationResponse:
        logger.info("Generating notifications for user: %s", user_id)
        notifications = self.generate_notifications(user_id)
        return NotificationResponse.from_notifications(user_id, notifications)

    def generate_notifications(self, user_id: str) -> List[Notification]:
        # un solo "ahora" para que los offsets queden exactos
        now = self.clock()

        route = Notification(
            type=NotificationType.ROUTE_RECOMMENDATION,
            message="Recommended route to downtown: Via Highway 101 saves 15 minutes",
            priority=Priority.MEDIUM,
            timestamp=now - timedelta(minutes=10),
            metadata=RouteRecommendationMetadata(
                routeName="Highway 101",
                timeSavedMinutes=15,
                destination="downtown",
            ).model_dump(),
            read=False,
        )

        alert = Notification(
            type=NotificationType.ALERT,
            message="Heavy traffic detected on your usual route",
            priority=Priority.HIGH,
            timestamp=now - timedelta(minutes=5),
            metadata=AlertMetadata(
                location="Main Street",
                alertType="heavy_traffic",
            ).model_dump(),
            read=False,
        )

        update = Notification(
            type=NotificationType.UPDATE,
            message="Your route preferences have been updated based on recent travel patterns",
            priority=Priority.LOW,
            timestamp=now - timedelta(hours=1),
            metadata=UpdateMetadata(updateType="route_preferences").model_dump(),
            read=True,
        )

        return [route, alert, update]


# instancia global
notification_generator = NotificationGenerator()
