"""Tests for metric classification and document decoding."""

import json

import pytest

from health_export_server.schemas.export import (
    BloodGlucoseMetric,
    CommonMetric,
    HeartRateMetric,
    MetricKind,
)
from health_export_server.services.classifier import (
    ExportDecodeError,
    classify_export,
    classify_metric,
    decode_export,
    match_kind,
    metric_fields,
)
from tests.fixtures import export_payloads as payloads


class TestMetricFields:
    """Tests for the field set used by the predicates."""

    def test_includes_top_level_and_sample_keys(self) -> None:
        record = {"name": "heart_rate", "units": "bpm", "data": [{"date": "d", "Min": 1}]}

        assert metric_fields(record) == {"name", "units", "data", "date", "Min"}

    def test_explicit_null_counts_as_present(self) -> None:
        record = {"name": "x", "data": [{"date": "d", "mealTime": None}]}

        assert "mealTime" in metric_fields(record)

    def test_non_mapping_samples_are_ignored(self) -> None:
        record = {"name": "x", "data": [1, "two", {"qty": 3}]}

        assert metric_fields(record) == {"name", "data", "qty"}


class TestMatchKind:
    """Tests for predicate order and first-match-wins semantics."""

    @pytest.mark.parametrize(
        ("builder", "expected"),
        [
            (payloads.blood_pressure, MetricKind.BLOOD_PRESSURE),
            (payloads.heart_rate, MetricKind.HEART_RATE),
            (payloads.sleep_analysis, MetricKind.SLEEP_ANALYSIS),
            (payloads.blood_glucose, MetricKind.BLOOD_GLUCOSE),
            (payloads.sexual_activity, MetricKind.SEXUAL_ACTIVITY),
            (payloads.handwashing, MetricKind.HANDWASHING),
            (payloads.toothbrushing, MetricKind.TOOTHBRUSHING),
            (payloads.insulin_delivery, MetricKind.INSULIN_DELIVERY),
            (payloads.heart_rate_notifications, MetricKind.HEART_RATE_NOTIFICATIONS),
            (payloads.symptoms, MetricKind.SYMPTOMS),
            (payloads.state_of_mind, MetricKind.STATE_OF_MIND),
            (payloads.ecg, MetricKind.ECG),
        ],
    )
    def test_recognizes_each_variant(self, builder, expected: MetricKind) -> None:
        """Each realistic record lands on its own variant."""
        assert match_kind(builder()) == expected

    def test_quantity_record_falls_back_to_common(self) -> None:
        record = payloads.step_count((1200, "2024-01-01 08:00:00 +0000"))

        assert match_kind(record) == MetricKind.COMMON

    def test_blood_glucose_wins_over_sexual_activity(self) -> None:
        """A record satisfying predicates 4 and 5 is blood glucose."""
        record = {
            "name": "mixed",
            "data": [
                {
                    "date": "2024-01-01 08:00:00 +0000",
                    "qty": 90,
                    "mealTime": "Unspecified",
                    "Protection Used": 1,
                }
            ],
        }

        assert match_kind(record) == MetricKind.BLOOD_GLUCOSE

    def test_blood_pressure_wins_over_heart_rate(self) -> None:
        record = {
            "name": "mixed",
            "data": [{"systolic": 1, "diastolic": 2, "Min": 1, "Avg": 2, "Max": 3}],
        }

        assert match_kind(record) == MetricKind.BLOOD_PRESSURE

    def test_heart_rate_needs_all_three_fields(self) -> None:
        record = {"name": "heart_rate", "data": [{"date": "d", "Min": 50, "Max": 90}]}

        assert match_kind(record) == MetricKind.COMMON

    def test_hygiene_needs_matching_name(self) -> None:
        """``value`` alone does not make a record handwashing."""
        record = {"name": "Mindful Minutes", "data": [{"date": "d", "qty": 5, "value": "x"}]}

        assert match_kind(record) == MetricKind.COMMON

    def test_either_protection_field_is_enough(self) -> None:
        record = {"name": "sexual_activity", "data": [{"date": "d", "Protection Not Used": 0}]}

        assert match_kind(record) == MetricKind.SEXUAL_ACTIVITY

    def test_threshold_alone_is_a_notification(self) -> None:
        record = {"name": "notifications", "data": [{"start": "a", "end": "b", "threshold": 40}]}

        assert match_kind(record) == MetricKind.HEART_RATE_NOTIFICATIONS

    def test_severity_without_user_entered_is_not_symptoms(self) -> None:
        record = {"name": "x", "data": [{"date": "d", "qty": 1, "severity": "Mild"}]}

        assert match_kind(record) == MetricKind.COMMON


class TestClassifyMetric:
    """Tests for classifying and decoding a single record."""

    def test_decodes_common_metric(self) -> None:
        metric = classify_metric(payloads.step_count((1200, "2024-01-01 08:00:00 +0000")))

        assert isinstance(metric, CommonMetric)
        assert metric.kind == MetricKind.COMMON
        assert metric.name == "step_count"
        assert metric.units == "count"
        assert metric.data[0].qty == 1200

    def test_decodes_heart_rate_aliases(self) -> None:
        metric = classify_metric(payloads.heart_rate())

        assert isinstance(metric, HeartRateMetric)
        sample = metric.data[0]
        assert (sample.min_rate, sample.avg_rate, sample.max_rate) == (55, 68.5, 91)

    def test_kind_comes_from_classifier_not_input(self) -> None:
        """A ``kind`` key in the input is overwritten by the matched variant."""
        record = {**payloads.blood_glucose(), "kind": "ecg"}

        metric = classify_metric(record)

        assert isinstance(metric, BloodGlucoseMetric)
        assert metric.kind == MetricKind.BLOOD_GLUCOSE

    def test_common_metric_without_units(self) -> None:
        record = {"name": "vo2_max", "data": [{"qty": 41.2, "date": "2024-01-01 08:00:00 +0000"}]}

        metric = classify_metric(record)

        assert isinstance(metric, CommonMetric)
        assert metric.units is None

    def test_matched_but_undecodable_record_is_dropped(self) -> None:
        """Blood pressure without a date is dropped, not retried as common."""
        record = {"name": "blood_pressure", "data": [{"systolic": 120, "diastolic": 80}]}

        assert classify_metric(record) is None

    def test_common_record_without_qty_is_dropped(self) -> None:
        record = {"name": "unknown", "data": [{"date": "2024-01-01 08:00:00 +0000"}]}

        assert classify_metric(record) is None

    @pytest.mark.parametrize("record", [None, 42, "step_count", ["a", "b"]])
    def test_non_object_record_is_dropped(self, record) -> None:
        assert classify_metric(record) is None

    def test_sexual_activity_fields_are_optional(self) -> None:
        metric = classify_metric(payloads.sexual_activity())

        sample = metric.data[0]
        assert sample.protection_used == 1
        assert sample.protection_not_used is None
        assert sample.unspecified is None

    def test_state_of_mind_metadata_stays_structured(self) -> None:
        metric = classify_metric(payloads.state_of_mind())

        metadata = metric.data[0].metadata
        assert metadata["device"] == {"name": "iPhone", "watch": False, "battery": None}
        assert metadata["tags"] == ["evening", 3]

    def test_state_of_mind_metadata_defaults_to_empty(self) -> None:
        record = payloads.state_of_mind()
        del record["data"][0]["metadata"]

        metric = classify_metric(record)

        assert metric.data[0].metadata == {}


class TestClassifyExport:
    """Tests for classifying a whole document."""

    def test_preserves_order_and_counts_drops(self) -> None:
        document = payloads.export(
            metrics=[
                payloads.step_count((1, "2024-01-01 08:00:00 +0000")),
                "garbage",
                payloads.blood_pressure(),
                {"name": "blood_pressure", "data": [{"systolic": 1, "diastolic": 2}]},
                payloads.ecg(),
            ],
            workouts=[payloads.minimal_workout()],
        )

        classified = classify_export(decode_export(document))

        assert [m.kind for m in classified.metrics] == [
            MetricKind.COMMON,
            MetricKind.BLOOD_PRESSURE,
            MetricKind.ECG,
        ]
        assert classified.dropped_metrics == 2
        assert len(classified.workouts) == 1

    def test_empty_document(self) -> None:
        classified = classify_export(decode_export(payloads.export()))

        assert classified.metrics == []
        assert classified.workouts == []
        assert classified.dropped_metrics == 0


class TestDecodeExport:
    """Tests for decoding the raw document."""

    def test_decodes_json_bytes(self) -> None:
        body = json.dumps(payloads.export(workouts=[payloads.outdoor_run()])).encode()

        document = decode_export(body)

        workout = document.data.workouts[0]
        assert workout.name == "Outdoor Run"
        assert workout.total_energy.qty == 512.3
        assert workout.elevation.ascent == 64.2
        assert len(workout.route) == 3

    def test_missing_lists_default_to_empty(self) -> None:
        document = decode_export('{"data": {}}')

        assert document.data.metrics == []
        assert document.data.workouts == []

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ExportDecodeError, match="Invalid health export document"):
            decode_export(b"{not json")

    def test_missing_data_block_raises(self) -> None:
        with pytest.raises(ExportDecodeError, match="data"):
            decode_export({"metrics": []})

    def test_malformed_workout_raises(self) -> None:
        """Workouts are not classified, so a bad one rejects the document."""
        with pytest.raises(ExportDecodeError):
            decode_export(payloads.export(workouts=[{"name": "Run"}]))

    def test_decode_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_export("[]")
