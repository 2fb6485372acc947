"""
Тесты для MeasurementHistory.
"""

import re
from unittest.mock import patch

import pytest

from lpg_density.history.measurement_history import MeasurementHistory, generate_measurement_id
from lpg_density.models.gas import GasType, MeasurementRecord


class TestMeasurementHistory:
    """Тесты для MeasurementHistory."""

    @pytest.fixture
    def history(self):
        return MeasurementHistory()

    def test_add_creates_snapshot(self, history):
        record = history.add(15, GasType.PROPANE, 60)

        assert isinstance(record, MeasurementRecord)
        assert record.density == 0.508
        assert record.temperature == 15
        assert record.gas_type == GasType.PROPANE
        assert history.records == [record]

    def test_add_prepends(self, history):
        first = history.add(0, GasType.PROPANE, 60)
        second = history.add(10, GasType.BUTANE, 60)

        assert history.records == [second, first]

    def test_add_stores_clamped_temperature(self, history):
        record = history.add(100, GasType.BUTANE, 60)
        assert record.temperature == 50

    def test_add_mixed_uses_ratio(self, history):
        record = history.add(15, GasType.MIXED, 0)
        assert record.density == pytest.approx(0.573)
        assert record.gas_type == GasType.MIXED

    def test_capacity_keeps_most_recent(self, history):
        """60 добавлений оставляют 50 последних, 10 старейших вытеснены."""
        added = [history.add(t - 30, GasType.PROPANE, 60) for t in range(60)]

        assert len(history) == 50
        assert history.records == list(reversed(added[10:]))

    def test_ids_unique(self, history):
        for _ in range(50):
            history.add(15, GasType.PROPANE, 60)

        ids = [record.id for record in history]
        assert len(set(ids)) == 50

    def test_id_collision_regenerated(self, history):
        """При совпадении идентификатора генерируется новый."""
        with patch(
            "lpg_density.history.measurement_history.generate_measurement_id",
            side_effect=["1-aaaaaaaaa", "1-aaaaaaaaa", "1-bbbbbbbbb"],
        ):
            first = history.add(15, GasType.PROPANE, 60)
            second = history.add(15, GasType.PROPANE, 60)

        assert first.id == "1-aaaaaaaaa"
        assert second.id == "1-bbbbbbbbb"

    def test_remove(self, history):
        keep = history.add(0, GasType.PROPANE, 60)
        drop = history.add(5, GasType.PROPANE, 60)

        assert history.remove(drop.id) is True
        assert history.records == [keep]

    def test_remove_missing_is_noop(self, history):
        record = history.add(0, GasType.PROPANE, 60)

        assert history.remove("missing") is False
        assert history.records == [record]

    def test_clear(self, history):
        history.add(0, GasType.PROPANE, 60)
        history.add(1, GasType.PROPANE, 60)
        history.clear()

        assert len(history) == 0
        assert history.records == []

    def test_initial_records_truncated(self):
        seed = MeasurementHistory(capacity=5)
        for t in range(8):
            seed.add(t, GasType.PROPANE, 60)

        history = MeasurementHistory(seed.records, capacity=3)
        assert history.records == seed.records[:3]

    def test_records_is_a_copy(self, history):
        history.add(0, GasType.PROPANE, 60)
        history.records.clear()

        assert len(history) == 1

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            MeasurementHistory(capacity=0)


def test_generate_measurement_id_format():
    assert re.fullmatch(r"1700000000000-[a-z0-9]{9}", generate_measurement_id(1700000000000))
