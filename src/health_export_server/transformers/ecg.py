"""ECG data transformer.

Converts exported ECG recordings to a parent row plus one row per voltage
sample.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from health_export_server.models.base import generate_uuid
from health_export_server.models.ecg import ECGReading, ECGVoltageSample
from health_export_server.transformers.base import Row, parse_export_timestamp

if TYPE_CHECKING:
    from health_export_server.schemas.export import ECGMetric, ECGRecording, VoltageMeasurement


class ECGTransformer:
    """Transform ECGRecording -> ecg row + ecg_voltage_measurements rows.

    Export Fields -> Database Fields:
    - start -> start_time
    - end -> end_time
    - classification -> classification
    - severity -> severity
    - averageHeartRate -> average_heart_rate
    - numberOfVoltageMeasurements -> number_of_voltage_measurements (as reported,
      not recounted)
    - samplingFrequency -> sampling_frequency
    - source -> source
    - voltageMeasurements[] -> ecg_voltage_measurements rows keyed by ecg_id
    """

    @staticmethod
    def transform(recording: ECGRecording, user_id: str, ecg_id: str) -> dict[str, Any]:
        """Convert an ECG recording to its parent row.

        Args:
            recording: ECG recording from the export
            user_id: User identifier for database record
            ecg_id: Generated linking key shared with the voltage rows

        Returns:
            Dict ready for database insertion
        """
        return {
            "id": ecg_id,
            "user_id": user_id,
            "start_time": parse_export_timestamp(recording.start),
            "end_time": parse_export_timestamp(recording.end),
            "classification": recording.classification,
            "severity": recording.severity,
            "average_heart_rate": recording.average_heart_rate,
            "number_of_voltage_measurements": recording.number_of_voltage_measurements,
            "sampling_frequency": recording.sampling_frequency,
            "source": recording.source,
        }

    @staticmethod
    def transform_voltage(measurement: VoltageMeasurement, ecg_id: str) -> dict[str, Any]:
        return {
            "ecg_id": ecg_id,
            "timestamp": parse_export_timestamp(measurement.date),
            "voltage": measurement.voltage,
            "units": measurement.units,
        }

    @classmethod
    def rows(cls, metric: ECGMetric, user_id: str) -> Iterator[Row]:
        for recording in metric.data:
            ecg_id = generate_uuid()
            yield ECGReading, cls.transform(recording, user_id, ecg_id)

            for measurement in recording.voltage_measurements:
                yield ECGVoltageSample, cls.transform_voltage(measurement, ecg_id)
