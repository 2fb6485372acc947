"""
Интеграционный тест: дашборд поверх файлового хранилища.
"""

import json

import pytest

from lpg_density.dashboard import DensityDashboard
from lpg_density.formatting import TableFormatter, format_density
from lpg_density.models.gas import DensityUnit, GasType
from lpg_density.storage import JsonFileStorage, StateRepository


@pytest.fixture
def state_dir(tmp_path):
    return tmp_path / "state"


def open_dashboard(state_dir) -> DensityDashboard:
    return DensityDashboard(StateRepository(JsonFileStorage(state_dir)))


def test_first_start_uses_defaults(state_dir):
    dashboard = open_dashboard(state_dir)

    assert dashboard.temperature == 15.0
    assert dashboard.gas_type == GasType.PROPANE
    assert dashboard.mixture_propane_percent == 60
    assert dashboard.density_unit == DensityUnit.KG_PER_L
    assert dashboard.measurements == []
    assert not state_dir.exists()


def test_session_survives_restart(state_dir):
    dashboard = open_dashboard(state_dir)
    dashboard.set_gas_type(GasType.BUTANE)
    dashboard.set_temperature(-50)
    dashboard.set_density_unit(DensityUnit.G_PER_CM3)
    record = dashboard.add_measurement()

    restarted = open_dashboard(state_dir)

    assert restarted.gas_type == GasType.BUTANE
    assert restarted.temperature == -50
    assert restarted.density == pytest.approx(0.6406)
    assert format_density(restarted.density, restarted.density_unit) == "0.641"
    assert restarted.measurements == [record]

    table = TableFormatter().format_history_table(restarted.measurements, restarted.density_unit)
    assert record.id in table


def test_state_file_layout(state_dir):
    dashboard = open_dashboard(state_dir)
    dashboard.set_gas_type(GasType.MIXED)
    dashboard.set_mixture_propane_percent(70)

    data = json.loads((state_dir / "propane-dashboard-state.json").read_text(encoding="utf-8"))

    assert data == {
        "currentTemperature": 15.0,
        "gasType": "mixed",
        "mixturePropanePercent": 70,
        "densityUnit": "kg/L",
        "measurements": [],
    }


def test_corrupt_file_falls_back_to_defaults(state_dir):
    state_dir.mkdir(parents=True)
    (state_dir / "propane-dashboard-state.json").write_text("{\"gasType\": \"butane\",", encoding="utf-8")

    dashboard = open_dashboard(state_dir)
    assert dashboard.gas_type == GasType.PROPANE

    dashboard.set_temperature(0)
    assert open_dashboard(state_dir).temperature == 0


def test_history_bound_across_restarts(state_dir):
    dashboard = open_dashboard(state_dir)
    ids = [dashboard.add_measurement().id for _ in range(30)]

    dashboard = open_dashboard(state_dir)
    ids += [dashboard.add_measurement().id for _ in range(30)]

    restarted = open_dashboard(state_dir)
    assert [record.id for record in restarted.measurements] == list(reversed(ids[10:]))
