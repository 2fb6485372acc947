"""Модели данных дашборда плотности."""

from .gas import (
    GasType,
    DensityUnit,
    GasProperties,
    DensityCalculation,
    MeasurementRecord,
    DashboardState,
    clamp_mixture_percent,
)

__all__ = [
    "GasType",
    "DensityUnit",
    "GasProperties",
    "DensityCalculation",
    "MeasurementRecord",
    "DashboardState",
    "clamp_mixture_percent",
]
