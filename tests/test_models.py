from datetime import datetime

import pytest
from pydantic import ValidationError

from hermes.models.notification import (
    AlertMetadata,
    Notification,
    NotificationResponse,
    NotificationType,
    Priority,
    RouteRecommendationMetadata,
    UpdateMetadata,
)


def _notification(**kwargs):
    data = {
        "type": NotificationType.ALERT,
        "message": "hola",
        "priority": Priority.HIGH,
        "timestamp": datetime(2024, 5, 1, 12, 30, 0),
    }
    data.update(kwargs)
    return Notification(**data)


def test_priority_rank_is_ordinal():
    ranks = [p.rank for p in (Priority.LOW, Priority.MEDIUM, Priority.HIGH, Priority.URGENT)]
    assert ranks == [0, 1, 2, 3]


def test_reserved_enum_values_exist():
    assert NotificationType("SYSTEM") is NotificationType.SYSTEM
    assert Priority("URGENT") is Priority.URGENT


def test_notification_defaults():
    n = _notification()
    assert n.read is False
    assert n.metadata == {}
    assert n.id != _notification().id


def test_notification_serializes_enums_and_naive_timestamp():
    data = _notification(metadata={"a": "x", "b": 3, "c": True}).model_dump(mode="json")
    assert data["type"] == "ALERT"
    assert data["priority"] == "HIGH"
    assert data["timestamp"] == "2024-05-01T12:30:00"
    assert data["metadata"] == {"a": "x", "b": 3, "c": True}


def test_metadata_keeps_value_types():
    n = _notification(metadata={"flag": True, "count": 15, "name": "x"})
    assert n.metadata["flag"] is True
    assert type(n.metadata["count"]) is int
    assert n.metadata["name"] == "x"


def test_response_from_notifications_counts():
    items = [_notification(), _notification()]
    resp = NotificationResponse.from_notifications("u1", items)
    assert resp.userId == "u1"
    assert resp.totalCount == 2


def test_response_rejects_mismatched_count():
    with pytest.raises(ValidationError):
        NotificationResponse(userId="u1", notifications=[_notification()], totalCount=3)


def test_typed_metadata_defaults():
    assert RouteRecommendationMetadata(
        routeName="r", timeSavedMinutes=1, destination="d"
    ).model_dump()["alternativeAvailable"] is True
    assert AlertMetadata(location="l", alertType="t").severity == "high"
    assert UpdateMetadata(updateType="u").source == "recommendation_engine"
