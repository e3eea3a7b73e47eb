"""Database models."""

from health_export_server.models.base import Base
from health_export_server.models.blood_glucose import BloodGlucoseReading
from health_export_server.models.blood_pressure import BloodPressureReading
from health_export_server.models.common_metric import CommonMetricReading
from health_export_server.models.ecg import ECGReading, ECGVoltageSample
from health_export_server.models.heart_rate import HeartRateReading
from health_export_server.models.heart_rate_notification import (
    HeartRateNotificationDetail,
    HeartRateNotificationEvent,
)
from health_export_server.models.hygiene import HandwashingEvent, ToothbrushingEvent
from health_export_server.models.insulin_delivery import InsulinDeliveryEvent
from health_export_server.models.sexual_activity import SexualActivityEntry
from health_export_server.models.sleep_analysis import SleepAnalysisEntry
from health_export_server.models.state_of_mind import StateOfMindEntry
from health_export_server.models.symptom import SymptomEntry
from health_export_server.models.workout import (
    WorkoutHeartRateSample,
    WorkoutRoutePoint,
    WorkoutSession,
)

__all__ = [
    "Base",
    "BloodGlucoseReading",
    "BloodPressureReading",
    "CommonMetricReading",
    "ECGReading",
    "ECGVoltageSample",
    "HandwashingEvent",
    "HeartRateNotificationDetail",
    "HeartRateNotificationEvent",
    "HeartRateReading",
    "InsulinDeliveryEvent",
    "SexualActivityEntry",
    "SleepAnalysisEntry",
    "StateOfMindEntry",
    "SymptomEntry",
    "ToothbrushingEvent",
    "WorkoutHeartRateSample",
    "WorkoutRoutePoint",
    "WorkoutSession",
]
