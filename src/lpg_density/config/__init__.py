"""
Конфигурация дашборда плотности.

Содержит константы модели и настройки окружения.
"""

from .dashboard_config import (
    DASHBOARD_CONFIG,
    DEFAULT_STORAGE_KEY,
    MAX_MEASUREMENTS,
    REFERENCE_TEMPERATURE,
    MIN_DENSITY,
    MAX_DENSITY,
    DEFAULT_CHART_SAMPLES,
    DashboardSettings,
    get_dashboard_config,
    get_chart_samples,
    validate_config,
)

__all__ = [
    "DASHBOARD_CONFIG",
    "DEFAULT_STORAGE_KEY",
    "MAX_MEASUREMENTS",
    "REFERENCE_TEMPERATURE",
    "MIN_DENSITY",
    "MAX_DENSITY",
    "DEFAULT_CHART_SAMPLES",
    "DashboardSettings",
    "get_dashboard_config",
    "get_chart_samples",
    "validate_config",
]
