"""
Демонстрация расчёта плотности и работы с историей измерений.

Сравнивает пропан, бутан и смесь по диапазону температур и сохраняет
несколько снимков в хранилище в памяти.
"""

import logging
import sys
from pathlib import Path

# Добавляем путь к src для импорта
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lpg_density.calculations import build_chart_series, calculate_density
from lpg_density.dashboard import DensityDashboard
from lpg_density.formatting import TableFormatter, format_density
from lpg_density.logging import setup_logging
from lpg_density.models import DensityUnit, GasType
from lpg_density.storage import InMemoryStorage, StateRepository

setup_logging("INFO")
logger = logging.getLogger(__name__)


def compare_gases() -> None:
    """Плотность трёх вариантов газа при нескольких температурах."""
    print("T (°C)   пропан   бутан   смесь 60/40")
    for temperature in (-40, -20, 0, 15, 30, 45):
        row = [
            calculate_density(temperature, gas_type, 60).density
            for gas_type in (GasType.PROPANE, GasType.BUTANE, GasType.MIXED)
        ]
        print(f"{temperature:>6}   " + "   ".join(f"{d:.4f}" for d in row))


def record_session() -> None:
    """Несколько измерений через API дашборда."""
    dashboard = DensityDashboard(StateRepository(InMemoryStorage()))
    dashboard.set_gas_type(GasType.MIXED)
    dashboard.set_mixture_propane_percent(70)

    for temperature in (-25, -5, 20):
        dashboard.set_temperature(temperature)
        dashboard.add_measurement()

    dashboard.set_density_unit(DensityUnit.KG_PER_M3)
    formatter = TableFormatter()
    print(formatter.format_history_table(dashboard.measurements, dashboard.density_unit))
    print()
    print(formatter.format_series_table(build_chart_series(GasType.MIXED, 70, sample_count=11), DensityUnit.KG_PER_M3))
    logger.info(f"Текущая плотность: {format_density(dashboard.density, dashboard.density_unit)} kg/m³")


if __name__ == "__main__":
    compare_gases()
    print()
    record_session()
