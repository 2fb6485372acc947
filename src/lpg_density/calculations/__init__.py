"""
Модуль расчётов плотности СУГ.

Содержит калькулятор плотности, перевод единиц и генерацию точек графика.
"""

from .density_calculator import (
    GAS_PROPERTIES,
    DensityCalculator,
    calculate_density,
    calculate_density_delta,
    calculate_mixture_properties,
)
from .unit_converter import convert_density, format_density, from_base, to_base
from .chart_series import ChartPoint, ChartSeries, build_chart_series, generate_chart_series

__all__ = [
    "GAS_PROPERTIES",
    "DensityCalculator",
    "calculate_density",
    "calculate_density_delta",
    "calculate_mixture_properties",
    "convert_density",
    "format_density",
    "from_base",
    "to_base",
    "ChartPoint",
    "ChartSeries",
    "build_chart_series",
    "generate_chart_series",
]
