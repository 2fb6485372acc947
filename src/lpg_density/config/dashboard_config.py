"""
Конфигурация дашборда плотности сжиженного газа.

Содержит константы модели плотности, параметры хранения истории измерений
и настройки окружения (директория состояния, логирование).
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Конфигурация расчётов и хранения
DASHBOARD_CONFIG: Dict[str, Any] = {
    # Хранилище состояния
    "storage_key": "propane-dashboard-state",
    "max_measurements": 50,  # Ограничение истории, старые записи вытесняются

    # Модель плотности
    "reference_temperature": 15.0,  # Температура калибровки, °C
    "min_density": 0.45,  # Нижняя граница плотности СУГ, кг/л
    "max_density": 0.65,  # Верхняя граница плотности СУГ, кг/л
    "density_precision": 4,  # Знаков после запятой

    # График
    "chart_samples": 50,

    # Состояние по умолчанию
    "default_temperature": 15.0,
    "default_gas_type": "propane",
    "default_mixture_percent": 60,
    "default_density_unit": "kg/L",
}

DEFAULT_STORAGE_KEY: str = DASHBOARD_CONFIG["storage_key"]
MAX_MEASUREMENTS: int = DASHBOARD_CONFIG["max_measurements"]
REFERENCE_TEMPERATURE: float = DASHBOARD_CONFIG["reference_temperature"]
MIN_DENSITY: float = DASHBOARD_CONFIG["min_density"]
MAX_DENSITY: float = DASHBOARD_CONFIG["max_density"]
DEFAULT_CHART_SAMPLES: int = DASHBOARD_CONFIG["chart_samples"]


def get_dashboard_config() -> Dict[str, Any]:
    """Получить копию конфигурации дашборда."""
    return DASHBOARD_CONFIG.copy()


def get_chart_samples(override: Optional[int] = None) -> int:
    """
    Получить количество точек графика.

    Args:
        override: Переопределение значения

    Returns:
        Количество точек графика
    """
    if override is not None:
        return override
    return DASHBOARD_CONFIG["chart_samples"]


def validate_config() -> bool:
    """
    Валидировать конфигурацию дашборда.

    Returns:
        True если конфигурация корректна
    """
    errors = []

    if not isinstance(DASHBOARD_CONFIG["storage_key"], str) or not DASHBOARD_CONFIG["storage_key"]:
        errors.append("storage_key должен быть непустой строкой")

    if not isinstance(DASHBOARD_CONFIG["max_measurements"], int):
        errors.append("max_measurements должен быть int")
    elif DASHBOARD_CONFIG["max_measurements"] < 1:
        errors.append("max_measurements должен быть >= 1")

    if DASHBOARD_CONFIG["min_density"] >= DASHBOARD_CONFIG["max_density"]:
        errors.append("min_density должен быть меньше max_density")

    if DASHBOARD_CONFIG["chart_samples"] < 2:
        errors.append("chart_samples должен быть >= 2")

    if not 0 <= DASHBOARD_CONFIG["default_mixture_percent"] <= 100:
        errors.append("default_mixture_percent должен быть в диапазоне 0-100")

    if errors:
        for error in errors:
            logger.error(f"Ошибка в конфигурации DASHBOARD_CONFIG: {error}")
        return False

    return True


@dataclass
class DashboardSettings:
    """Настройки окружения для запуска дашборда"""

    state_dir: str = "data/state"
    log_level: str = "INFO"
    logs_dir: str = "logs"
    enable_file_logging: bool = False
    chart_samples: int = DEFAULT_CHART_SAMPLES

    @classmethod
    def from_env(cls) -> 'DashboardSettings':
        """Создание настроек из переменных окружения"""
        return cls(
            state_dir=os.getenv("LPG_STATE_DIR", "data/state"),
            log_level=os.getenv("LPG_LOG_LEVEL", "INFO").upper(),
            logs_dir=os.getenv("LPG_LOGS_DIR", "logs"),
            enable_file_logging=os.getenv("LPG_FILE_LOGGING", "false").lower() == "true",
            chart_samples=int(os.getenv("LPG_CHART_SAMPLES", str(DEFAULT_CHART_SAMPLES))),
        )

    @property
    def state_path(self) -> Path:
        return Path(self.state_dir)


# Валидация конфигурации при импорте
if not validate_config():
    raise ValueError("Некорректная конфигурация дашборда плотности")
