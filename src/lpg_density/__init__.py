"""
LPG density dashboard core.

Плотность жидкого пропана, бутана и их смеси в зависимости от температуры,
перевод единиц, точки графика и сохраняемая история измерений.
"""

from .calculations import (
    GAS_PROPERTIES,
    DensityCalculator,
    build_chart_series,
    calculate_density,
    convert_density,
    generate_chart_series,
)
from .dashboard import DensityDashboard
from .history import MeasurementHistory
from .models import DashboardState, DensityUnit, GasType, MeasurementRecord
from .storage import InMemoryStorage, JsonFileStorage, StateRepository

__version__ = "1.0.0"

__all__ = [
    "GAS_PROPERTIES",
    "DensityCalculator",
    "build_chart_series",
    "calculate_density",
    "convert_density",
    "generate_chart_series",
    "DensityDashboard",
    "MeasurementHistory",
    "DashboardState",
    "DensityUnit",
    "GasType",
    "MeasurementRecord",
    "InMemoryStorage",
    "JsonFileStorage",
    "StateRepository",
]
