"""Heart rate notifications transformer.

One notification fans out into a parent row plus one detail row per heart
rate sample and per heart rate variation sample, all linked by an id
generated here.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from health_export_server.models.base import generate_uuid
from health_export_server.models.heart_rate_notification import (
    HeartRateNotificationDetail,
    HeartRateNotificationEvent,
)
from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    Row,
    parse_export_timestamp,
)

if TYPE_CHECKING:
    from health_export_server.schemas.export import (
        HeartRateNotification,
        HeartRateNotificationSample,
        HeartRateNotificationsMetric,
        HeartRateVariationSample,
        TimestampInterval,
    )


def _interval_columns(timestamp: TimestampInterval) -> dict[str, Any]:
    return {
        "start_time": parse_export_timestamp(timestamp.start),
        "end_time": parse_export_timestamp(timestamp.end),
        "duration": timestamp.interval.duration,
    }


class HeartRateNotificationsTransformer:
    """Transform HeartRateNotificationsMetric -> notification + detail rows."""

    @staticmethod
    def transform(
        notification: HeartRateNotification,
        user_id: str,
        notification_id: str,
    ) -> dict[str, Any]:
        """Convert a notification to its parent row.

        Args:
            notification: Notification from the export
            user_id: User identifier for database record
            notification_id: Generated linking key shared with the detail rows
        """
        return {
            "id": notification_id,
            "user_id": user_id,
            "start_time": parse_export_timestamp(notification.start),
            "end_time": parse_export_timestamp(notification.end),
            "threshold": notification.threshold,
            "source": INGESTION_SOURCE,
        }

    @staticmethod
    def transform_heart_rate(
        sample: HeartRateNotificationSample, notification_id: str
    ) -> dict[str, Any]:
        return {
            "notification_id": notification_id,
            "hr": sample.hr,
            "hrv": None,
            **_interval_columns(sample.timestamp),
        }

    @staticmethod
    def transform_variation(
        sample: HeartRateVariationSample, notification_id: str
    ) -> dict[str, Any]:
        return {
            "notification_id": notification_id,
            "hr": None,
            "hrv": sample.hrv,
            **_interval_columns(sample.timestamp),
        }

    @classmethod
    def rows(cls, metric: HeartRateNotificationsMetric, user_id: str) -> Iterator[Row]:
        """Yield each parent row followed by its HR then HRV detail rows."""
        for notification in metric.data:
            notification_id = generate_uuid()
            yield HeartRateNotificationEvent, cls.transform(notification, user_id, notification_id)

            for sample in notification.heart_rate or []:
                yield HeartRateNotificationDetail, cls.transform_heart_rate(sample, notification_id)

            for sample in notification.heart_rate_variation or []:
                yield HeartRateNotificationDetail, cls.transform_variation(sample, notification_id)
