# hermes/models/notification.py
from datetime import datetime
from enum import Enum
from typing import Dict, List, Union
import uuid

from pydantic import BaseModel, Field, model_validator

MetadataValue = Union[bool, int, str]


class NotificationType(str, Enum):
    ROUTE_RECOMMENDATION = "ROUTE_RECOMMENDATION"
    ALERT = "ALERT"
    UPDATE = "UPDATE"
    SYSTEM = "SYSTEM"  # reservado, el generador no lo produce


class Priority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"  # reservado

    @property
    def rank(self) -> int:
        """Orden LOW < MEDIUM < HIGH < URGENT."""
        return list(Priority).index(self)


class Notification(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: NotificationType
    message: str
    priority: Priority
    timestamp: datetime      # sin zona horaria
    metadata: Dict[str, MetadataValue] = Field(default_factory=dict)
    read: bool = False


class NotificationResponse(BaseModel):
    userId: str
    notifications: List[Notification]
    totalCount: int

    @model_validator(mode="after")
    def check_total_count(self):
        if self.totalCount != len(self.notifications):
            raise ValueError(
                f"totalCount={self.totalCount} no coincide con "
                f"{len(self.notifications)} notificaciones"
            )
        return self

    @classmethod
    def from_notifications(
        cls, user_id: str, notifications: List[Notification]
    ) -> "NotificationResponse":
        return cls(
            userId=user_id,
            notifications=notifications,
            totalCount=len(notifications),
        )


# =========================
# Metadata por tipo
# =========================

class RouteRecommendationMetadata(BaseModel):
    routeName: str
    timeSavedMinutes: int
    destination: str
    alternativeAvailable: bool = True


class AlertMetadata(BaseModel):
    location: str
    alertType: str
    severity: str = "high"


class UpdateMetadata(BaseModel):
    updateType: str
    source: str = "recommendation_engine"

