"""
Генерация точек графика зависимости плотности от температуры.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

import numpy as np
import pandas as pd

from ..config import REFERENCE_TEMPERATURE, get_chart_samples
from ..models.gas import GasType
from .density_calculator import (
    DEFAULT_MIXTURE_PERCENT,
    GAS_PROPERTIES,
    DensityCalculator,
)


@dataclass
class ChartPoint:
    """Точка графика."""
    temperature: float  # °C
    density: float  # кг/л

    def to_dict(self) -> dict:
        return {'temperature': self.temperature, 'density': self.density}


@dataclass
class ChartSeries:
    """Серия точек по всему допустимому диапазону температур газа."""
    gas_type: GasType
    mixture_percent: int
    points: List[ChartPoint] = field(default_factory=list)
    reference_temperature: float = REFERENCE_TEMPERATURE

    @property
    def min_density(self) -> float:
        return min(point.density for point in self.points)

    @property
    def max_density(self) -> float:
        return max(point.density for point in self.points)

    def to_dict(self) -> dict:
        """Преобразование в словарь для форматтера."""
        return {
            'gas_type': self.gas_type.value,
            'mixture_percent': self.mixture_percent,
            'reference_temperature': self.reference_temperature,
            'data': [point.to_dict() for point in self.points]
        }

    def to_dataframe(self) -> pd.DataFrame:
        """DataFrame с колонками [temperature, density]."""
        return pd.DataFrame(
            [point.to_dict() for point in self.points],
            columns=['temperature', 'density']
        )


def generate_chart_series(
    gas_type: Union[GasType, str],
    mixture_percent: int = DEFAULT_MIXTURE_PERCENT,
    sample_count: Optional[int] = None,
    calculator: Optional[DensityCalculator] = None
) -> List[ChartPoint]:
    """
    Равномерная выборка (температура, плотность) по диапазону газа.

    Концы диапазона включены, шаг = (max_temp − min_temp) / (sample_count − 1).
    Каждая точка считается через DensityCalculator, поэтому ограничения
    температуры и плотности применяются так же, как при обычном расчёте.

    Args:
        gas_type: Тип газа
        mixture_percent: Доля пропана в смеси, %
        sample_count: Количество точек (>= 2), по умолчанию из конфигурации
        calculator: Калькулятор плотности

    Returns:
        Список ChartPoint по возрастанию температуры

    Raises:
        ValueError: Если sample_count < 2
    """
    sample_count = get_chart_samples(sample_count)
    if sample_count < 2:
        raise ValueError(f"sample_count must be >= 2, got {sample_count}")

    gas_type = GasType(gas_type)
    calculator = calculator or DensityCalculator()
    props = GAS_PROPERTIES[gas_type]

    temperatures = np.linspace(props.min_temp, props.max_temp, sample_count)

    return [
        ChartPoint(
            temperature=float(temp),
            density=calculator.calculate_density(float(temp), gas_type, mixture_percent).density
        )
        for temp in temperatures
    ]


def build_chart_series(
    gas_type: Union[GasType, str],
    mixture_percent: int = DEFAULT_MIXTURE_PERCENT,
    sample_count: Optional[int] = None,
    calculator: Optional[DensityCalculator] = None
) -> ChartSeries:
    """Серия графика вместе с метаданными для масштабирования осей."""
    gas_type = GasType(gas_type)
    return ChartSeries(
        gas_type=gas_type,
        mixture_percent=mixture_percent,
        points=generate_chart_series(gas_type, mixture_percent, sample_count, calculator),
    )
