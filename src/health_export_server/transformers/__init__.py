"""Export model -> Database model transformers."""

from health_export_server.transformers.base import (
    INGESTION_SOURCE,
    TimestampParseError,
    parse_export_date,
    parse_export_timestamp,
)
from health_export_server.transformers.common import CommonMetricTransformer
from health_export_server.transformers.ecg import ECGTransformer
from health_export_server.transformers.heart_rate_notifications import (
    HeartRateNotificationsTransformer,
)
from health_export_server.transformers.hygiene import (
    HandwashingTransformer,
    ToothbrushingTransformer,
)
from health_export_server.transformers.insulin_delivery import InsulinDeliveryTransformer
from health_export_server.transformers.sexual_activity import SexualActivityTransformer
from health_export_server.transformers.sleep_analysis import SleepAnalysisTransformer
from health_export_server.transformers.state_of_mind import StateOfMindTransformer
from health_export_server.transformers.symptoms import SymptomsTransformer
from health_export_server.transformers.vitals import (
    BloodGlucoseTransformer,
    BloodPressureTransformer,
    HeartRateTransformer,
)
from health_export_server.transformers.workout import WorkoutTransformer

__all__ = [
    "INGESTION_SOURCE",
    "BloodGlucoseTransformer",
    "BloodPressureTransformer",
    "CommonMetricTransformer",
    "ECGTransformer",
    "HandwashingTransformer",
    "HeartRateNotificationsTransformer",
    "HeartRateTransformer",
    "InsulinDeliveryTransformer",
    "SexualActivityTransformer",
    "SleepAnalysisTransformer",
    "StateOfMindTransformer",
    "SymptomsTransformer",
    "TimestampParseError",
    "ToothbrushingTransformer",
    "WorkoutTransformer",
    "parse_export_date",
    "parse_export_timestamp",
]
