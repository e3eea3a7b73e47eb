"""Builders for Health Auto Export documents used across tests.

Values are modeled on real exports from the iOS app: timestamps in
``yyyy-MM-dd HH:mm:ss Z`` form, camelCase keys, and metric-specific fields
on the samples inside ``data``.
"""

from typing import Any


def export(
    metrics: list[Any] | None = None,
    workouts: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Wrap metrics and workouts in the top-level document shape."""
    return {"data": {"metrics": metrics or [], "workouts": workouts or []}}


def step_count(*samples: tuple[float, str]) -> dict[str, Any]:
    """Common metric with one sample per ``(qty, date)`` pair."""
    return {
        "name": "step_count",
        "units": "count",
        "data": [{"qty": qty, "date": date} for qty, date in samples],
    }


def blood_pressure() -> dict[str, Any]:
    return {
        "name": "blood_pressure",
        "units": "mmHg",
        "data": [{"date": "2024-01-01 08:00:00 +0000", "systolic": 120, "diastolic": 80}],
    }


def heart_rate() -> dict[str, Any]:
    return {
        "name": "heart_rate",
        "units": "count/min",
        "data": [{"date": "2024-01-01 08:00:00 +0000", "Min": 55, "Avg": 68.5, "Max": 91}],
    }


def sleep_analysis() -> dict[str, Any]:
    return {
        "name": "sleep_analysis",
        "units": "hr",
        "data": [
            {
                "date": "2024-01-02 00:00:00 +0000",
                "asleep": 7.25,
                "sleepStart": "2024-01-01 23:10:00 +0000",
                "sleepEnd": "2024-01-02 06:40:00 +0000",
                "sleepSource": "Apple Watch",
                "inBed": 7.75,
                "inBedStart": "2024-01-01 22:55:00 +0000",
                "inBedEnd": "2024-01-02 06:45:00 +0000",
                "inBedSource": "iPhone",
            }
        ],
    }


def blood_glucose() -> dict[str, Any]:
    return {
        "name": "blood_glucose",
        "units": "mg/dL",
        "data": [{"date": "2024-01-01 12:30:00 +0000", "qty": 104, "mealTime": "After Meal"}],
    }


def sexual_activity() -> dict[str, Any]:
    return {
        "name": "sexual_activity",
        "data": [{"date": "2024-01-01 22:00:00 +0000", "Protection Used": 1}],
    }


def handwashing() -> dict[str, Any]:
    return {
        "name": "Handwashing",
        "units": "s",
        "data": [{"date": "2024-01-01 09:00:00 +0000", "qty": 22, "value": "Complete"}],
    }


def toothbrushing() -> dict[str, Any]:
    return {
        "name": "Toothbrushing",
        "units": "s",
        "data": [{"date": "2024-01-01 07:30:00 +0000", "qty": 118, "value": "Incomplete"}],
    }


def insulin_delivery() -> dict[str, Any]:
    return {
        "name": "insulin_delivery",
        "units": "IU",
        "data": [{"date": "2024-01-01 12:00:00 +0000", "qty": 4.5, "reason": "Bolus"}],
    }


def _interval(start: str, end: str, duration: float) -> dict[str, Any]:
    return {"start": start, "end": end, "interval": {"duration": duration, "units": "s"}}


def heart_rate_notifications() -> dict[str, Any]:
    """One high heart rate notification: two HR samples and one HRV sample."""
    return {
        "name": "heart_rate_notifications",
        "data": [
            {
                "start": "2024-01-01 14:00:00 +0000",
                "end": "2024-01-01 14:10:00 +0000",
                "threshold": 120,
                "heartRate": [
                    {
                        "hr": 125,
                        "units": "bpm",
                        "timestamp": _interval(
                            "2024-01-01 14:00:00 +0000", "2024-01-01 14:05:00 +0000", 300
                        ),
                    },
                    {
                        "hr": 131,
                        "units": "bpm",
                        "timestamp": _interval(
                            "2024-01-01 14:05:00 +0000", "2024-01-01 14:10:00 +0000", 300
                        ),
                    },
                ],
                "heartRateVariation": [
                    {
                        "hrv": 23.4,
                        "units": "ms",
                        "timestamp": _interval(
                            "2024-01-01 14:00:00 +0000", "2024-01-01 14:10:00 +0000", 600
                        ),
                    }
                ],
            }
        ],
    }


def symptoms() -> dict[str, Any]:
    return {
        "name": "symptoms",
        "data": [
            {
                "start": "2024-01-01 10:00:00 +0000",
                "end": "2024-01-01 12:00:00 +0000",
                "name": "Headache",
                "severity": "Mild",
                "userEntered": True,
                "source": "Health",
            }
        ],
    }


def state_of_mind() -> dict[str, Any]:
    return {
        "name": "state_of_mind",
        "data": [
            {
                "id": "6C1B8E2A-0D55-4C1A-9F0E-2B7C1E8B4D11",
                "start": "2024-01-01 20:00:00 +0000",
                "end": "2024-01-01 20:00:00 +0000",
                "kind": "momentaryEmotion",
                "labels": ["calm", "content"],
                "associations": ["family", "fitness"],
                "valence": 0.62,
                "valenceClassification": 5,
                "metadata": {
                    "HKMetadataKeySyncVersion": 1,
                    "timeZone": "Europe/Berlin",
                    "tags": ["evening", 3],
                    "device": {"name": "iPhone", "watch": False, "battery": None},
                },
            }
        ],
    }


def ecg(voltages: int = 3) -> dict[str, Any]:
    return {
        "name": "ecg",
        "data": [
            {
                "start": "2024-01-01 18:00:00 +0000",
                "end": "2024-01-01 18:00:30 +0000",
                "classification": "Sinus Rhythm",
                "severity": "None",
                "averageHeartRate": 72,
                "numberOfVoltageMeasurements": voltages,
                "voltageMeasurements": [
                    {
                        "date": f"2024-01-01 18:00:{index:02d} +0000",
                        "voltage": -0.000012 * (index + 1),
                        "units": "V",
                    }
                    for index in range(voltages)
                ],
                "samplingFrequency": 512,
                "source": "Apple Watch",
            }
        ],
    }


def minimal_workout(name: str = "Indoor Walk") -> dict[str, Any]:
    return {
        "name": name,
        "start": "2024-01-01 07:00:00 +0000",
        "end": "2024-01-01 07:45:00 +0000",
    }


def outdoor_run() -> dict[str, Any]:
    """Workout with every summary value and all three child collections."""
    return {
        **minimal_workout("Outdoor Run"),
        "totalEnergy": {"qty": 512.3, "units": "kcal"},
        "activeEnergy": {"qty": 430.1, "units": "kcal"},
        "maxHeartRate": {"qty": 171, "units": "bpm"},
        "avgHeartRate": {"qty": 148, "units": "bpm"},
        "stepCount": {"qty": 6120, "units": "steps"},
        "stepCadence": {"qty": 162, "units": "spm"},
        "distance": {"qty": 7.4, "units": "km"},
        "speed": {"qty": 9.9, "units": "km/h"},
        "flightsClimbed": {"qty": 3, "units": "count"},
        "intensity": {"qty": 9.1, "units": "MET"},
        "temperature": {"qty": 11.5, "units": "degC"},
        "humidity": {"qty": 78, "units": "%"},
        "elevation": {"ascent": 64.2, "descent": 61.8, "units": "m"},
        "heartRateData": [
            {"date": "2024-01-01 07:00:00 +0000", "qty": 120, "units": "count"},
            {"date": "2024-01-01 07:01:00 +0000", "qty": 135, "units": "count"},
        ],
        "heartRateRecovery": [
            {"date": "2024-01-01 07:46:00 +0000", "qty": 110, "units": "count"},
        ],
        "route": [
            {
                "lat": 52.5200,
                "lon": 13.4050,
                "altitude": 34.0,
                "timestamp": "2024-01-01 07:00:00 +0000",
            },
            {
                "lat": 52.5210,
                "lon": 13.4065,
                "altitude": 35.5,
                "timestamp": "2024-01-01 07:00:05 +0000",
            },
            {
                "lat": 52.5222,
                "lon": 13.4081,
                "altitude": 36.1,
                "timestamp": "2024-01-01 07:00:10 +0000",
            },
        ],
    }
