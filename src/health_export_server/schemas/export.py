"""Pydantic models for the Health Auto Export document.

The export carries a single untyped ``metrics`` list. Its entries are kept as
raw mappings here and only become one of the ``MetricRecord`` variants once
the classifier has inspected their fields and stamped a ``kind`` on them.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


class ExportModel(BaseModel):
    """Base for every export shape: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# ==============================================================================
# Values with units
# ==============================================================================


class EnergyValue(ExportModel):
    qty: float
    units: str  # kcal, kJ


class HeartRateValue(ExportModel):
    qty: float
    units: str = "bpm"


class StepValue(ExportModel):
    qty: float
    units: str = "steps"


class CadenceValue(ExportModel):
    qty: float
    units: str = "spm"


class CountValue(ExportModel):
    qty: float
    units: str = "count"


class DistanceValue(ExportModel):
    qty: float
    units: str  # km, mi


class SpeedValue(ExportModel):
    qty: float
    units: str  # km/h, mph


class IntensityValue(ExportModel):
    qty: float
    units: str = "MET"


class TemperatureValue(ExportModel):
    qty: float
    units: str  # degC, degF


class HumidityValue(ExportModel):
    qty: float
    units: str = "%"


class ElevationValue(ExportModel):
    ascent: float
    descent: float
    units: str  # m, ft


# ==============================================================================
# Workouts
# ==============================================================================


class HeartRatePoint(ExportModel):
    """Heart rate sample recorded during (or after) a workout."""

    date: str
    qty: float
    units: str = "count"


class RoutePoint(ExportModel):
    """GPS route point, altitude in meters."""

    lat: float
    lon: float
    altitude: float
    timestamp: str


class Workout(ExportModel):
    """One exercise session.

    ``start`` and ``end`` use the export timestamp format
    (``2024-01-01 08:00:00 +0000``). Every summary value is optional and is
    either present with its unit or absent altogether.
    """

    name: str
    start: str
    end: str

    heart_rate_data: list[HeartRatePoint] | None = None
    heart_rate_recovery: list[HeartRatePoint] | None = None
    route: list[RoutePoint] | None = None

    total_energy: EnergyValue | None = None
    active_energy: EnergyValue | None = None
    max_heart_rate: HeartRateValue | None = None
    avg_heart_rate: HeartRateValue | None = None
    step_count: StepValue | None = None
    step_cadence: CadenceValue | None = None
    total_swimming_stroke_count: CountValue | None = None
    swim_cadence: CadenceValue | None = None
    distance: DistanceValue | None = None
    speed: SpeedValue | None = None
    flights_climbed: CountValue | None = None
    intensity: IntensityValue | None = None
    temperature: TemperatureValue | None = None
    humidity: HumidityValue | None = None
    elevation: ElevationValue | None = None


# ==============================================================================
# Metrics
# ==============================================================================


class MetricKind(str, Enum):
    """Closed set of metric variants the classifier can produce."""

    COMMON = "common"
    BLOOD_PRESSURE = "blood_pressure"
    HEART_RATE = "heart_rate"
    SLEEP_ANALYSIS = "sleep_analysis"
    BLOOD_GLUCOSE = "blood_glucose"
    SEXUAL_ACTIVITY = "sexual_activity"
    HANDWASHING = "handwashing"
    TOOTHBRUSHING = "toothbrushing"
    INSULIN_DELIVERY = "insulin_delivery"
    HEART_RATE_NOTIFICATIONS = "heart_rate_notifications"
    SYMPTOMS = "symptoms"
    STATE_OF_MIND = "state_of_mind"
    ECG = "ecg"


class CommonSample(ExportModel):
    qty: float
    date: str


class BloodPressureSample(ExportModel):
    date: str
    systolic: float
    diastolic: float


class HeartRateSample(ExportModel):
    date: str
    min_rate: float = Field(alias="Min")
    avg_rate: float = Field(alias="Avg")
    max_rate: float = Field(alias="Max")


class SleepAnalysisSample(ExportModel):
    date: str  # yyyy-MM-dd, sometimes with a time suffix
    asleep: float
    sleep_start: str
    sleep_end: str
    sleep_source: str
    in_bed: float
    in_bed_start: str
    in_bed_end: str
    in_bed_source: str


class BloodGlucoseSample(ExportModel):
    date: str
    qty: float
    meal_time: str  # Before Meal, After Meal, Unspecified


class SexualActivitySample(ExportModel):
    date: str
    unspecified: float | None = Field(default=None, alias="Unspecified")
    protection_used: float | None = Field(default=None, alias="Protection Used")
    protection_not_used: float | None = Field(default=None, alias="Protection Not Used")


class HygieneSample(ExportModel):
    """Handwashing and toothbrushing share one sample shape."""

    date: str
    qty: float
    value: str  # Complete, Incomplete


class InsulinDeliverySample(ExportModel):
    date: str
    qty: float
    reason: str  # Bolus, Basal


class Interval(ExportModel):
    duration: float
    units: str = "s"


class TimestampInterval(ExportModel):
    start: str
    end: str
    interval: Interval


class HeartRateNotificationSample(ExportModel):
    hr: float
    units: str = "bpm"
    timestamp: TimestampInterval


class HeartRateVariationSample(ExportModel):
    hrv: float
    units: str = "ms"
    timestamp: TimestampInterval


class HeartRateNotification(ExportModel):
    start: str
    end: str
    threshold: float | None = None  # Only for high/low heart rate notifications
    heart_rate: list[HeartRateNotificationSample] | None = None
    heart_rate_variation: list[HeartRateVariationSample] | None = None


class SymptomSample(ExportModel):
    start: str
    end: str
    name: str
    severity: str
    user_entered: bool
    source: str


class StateOfMindSample(ExportModel):
    id: str
    start: str
    end: str
    kind: str
    labels: list[str]
    associations: list[str]
    valence: float
    valence_classification: int
    metadata: dict[str, JsonValue] = Field(default_factory=dict)


class VoltageMeasurement(ExportModel):
    date: str
    voltage: float
    units: str


class ECGRecording(ExportModel):
    start: str
    end: str
    classification: str  # Sinus Rhythm, Atrial Fibrillation, ...
    severity: str
    average_heart_rate: float
    number_of_voltage_measurements: int
    voltage_measurements: list[VoltageMeasurement]
    sampling_frequency: float  # Hz
    source: str


class CommonMetric(ExportModel):
    kind: Literal[MetricKind.COMMON]
    name: str
    units: str | None = None
    data: list[CommonSample]


class BloodPressureMetric(ExportModel):
    kind: Literal[MetricKind.BLOOD_PRESSURE]
    name: str = "Blood Pressure"
    units: str | None = None
    data: list[BloodPressureSample]


class HeartRateMetric(ExportModel):
    kind: Literal[MetricKind.HEART_RATE]
    name: str = "Heart Rate"
    units: str | None = None
    data: list[HeartRateSample]


class SleepAnalysisMetric(ExportModel):
    kind: Literal[MetricKind.SLEEP_ANALYSIS]
    name: str = "Sleep Analysis"
    units: str | None = None
    data: list[SleepAnalysisSample]


class BloodGlucoseMetric(ExportModel):
    kind: Literal[MetricKind.BLOOD_GLUCOSE]
    name: str = "Blood Glucose"
    units: str | None = None
    data: list[BloodGlucoseSample]


class SexualActivityMetric(ExportModel):
    kind: Literal[MetricKind.SEXUAL_ACTIVITY]
    name: str = "Sexual Activity"
    units: str | None = None
    data: list[SexualActivitySample]


class HandwashingMetric(ExportModel):
    kind: Literal[MetricKind.HANDWASHING]
    name: str = "Handwashing"
    units: str | None = None
    data: list[HygieneSample]


class ToothbrushingMetric(ExportModel):
    kind: Literal[MetricKind.TOOTHBRUSHING]
    name: str = "Toothbrushing"
    units: str | None = None
    data: list[HygieneSample]


class InsulinDeliveryMetric(ExportModel):
    kind: Literal[MetricKind.INSULIN_DELIVERY]
    name: str = "Insulin Delivery"
    units: str | None = None
    data: list[InsulinDeliverySample]


class HeartRateNotificationsMetric(ExportModel):
    kind: Literal[MetricKind.HEART_RATE_NOTIFICATIONS]
    name: str = "Heart Rate Notifications"
    units: str | None = None
    data: list[HeartRateNotification]


class SymptomsMetric(ExportModel):
    kind: Literal[MetricKind.SYMPTOMS]
    name: str = "Symptoms"
    units: str | None = None
    data: list[SymptomSample]


class StateOfMindMetric(ExportModel):
    kind: Literal[MetricKind.STATE_OF_MIND]
    name: str = "State of Mind"
    units: str | None = None
    data: list[StateOfMindSample]


class ECGMetric(ExportModel):
    kind: Literal[MetricKind.ECG]
    name: str = "ECG"
    units: str | None = None
    data: list[ECGRecording]


MetricRecord = Annotated[
    CommonMetric
    | BloodPressureMetric
    | HeartRateMetric
    | SleepAnalysisMetric
    | BloodGlucoseMetric
    | SexualActivityMetric
    | HandwashingMetric
    | ToothbrushingMetric
    | InsulinDeliveryMetric
    | HeartRateNotificationsMetric
    | SymptomsMetric
    | StateOfMindMetric
    | ECGMetric,
    Field(discriminator="kind"),
]

METRIC_MODELS: dict[MetricKind, type[ExportModel]] = {
    MetricKind.COMMON: CommonMetric,
    MetricKind.BLOOD_PRESSURE: BloodPressureMetric,
    MetricKind.HEART_RATE: HeartRateMetric,
    MetricKind.SLEEP_ANALYSIS: SleepAnalysisMetric,
    MetricKind.BLOOD_GLUCOSE: BloodGlucoseMetric,
    MetricKind.SEXUAL_ACTIVITY: SexualActivityMetric,
    MetricKind.HANDWASHING: HandwashingMetric,
    MetricKind.TOOTHBRUSHING: ToothbrushingMetric,
    MetricKind.INSULIN_DELIVERY: InsulinDeliveryMetric,
    MetricKind.HEART_RATE_NOTIFICATIONS: HeartRateNotificationsMetric,
    MetricKind.SYMPTOMS: SymptomsMetric,
    MetricKind.STATE_OF_MIND: StateOfMindMetric,
    MetricKind.ECG: ECGMetric,
}


# ==============================================================================
# Document
# ==============================================================================


class HealthData(ExportModel):
    """Metrics stay raw until classified; workouts decode directly."""

    metrics: list[Any] = Field(default_factory=list)
    workouts: list[Workout] = Field(default_factory=list)


class HealthExport(ExportModel):
    """Top-level document posted by the Health Auto Export app."""

    data: HealthData
