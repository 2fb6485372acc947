"""
Контроллер состояния дашборда плотности.

Единственный владелец DashboardState: каждое действие пользователя
(изменение температуры, газа, доли пропана, единицы, операции с историей)
заменяет состояние целиком, явно пересчитывает текущую плотность и
сохраняет полное состояние через StateRepository.
"""

import logging
from typing import List, Optional, Union

from .calculations.chart_series import ChartSeries, build_chart_series
from .calculations.density_calculator import DensityCalculator
from .calculations.unit_converter import convert_density
from .config import MAX_MEASUREMENTS
from .history.measurement_history import MeasurementHistory
from .models.gas import (
    DashboardState,
    DensityUnit,
    GasType,
    MeasurementRecord,
    clamp_mixture_percent,
)
from .storage.state_repository import StateRepository

logger = logging.getLogger(__name__)


class DensityDashboard:
    """
    API дашборда для слоя представления.

    Example:
        >>> dashboard = DensityDashboard(StateRepository(InMemoryStorage()))
        >>> dashboard.set_gas_type("butane")
        >>> dashboard.set_temperature(-50)
        >>> dashboard.density
        0.6406
    """

    def __init__(
        self,
        repository: StateRepository,
        calculator: Optional[DensityCalculator] = None,
        max_measurements: int = MAX_MEASUREMENTS,
        chart_samples: Optional[int] = None
    ):
        """
        Инициализация контроллера: загрузка состояния и первичный расчёт.

        Args:
            repository: Репозиторий сохраняемого состояния
            calculator: Калькулятор плотности
            max_measurements: Ограничение истории измерений
            chart_samples: Количество точек графика по умолчанию
        """
        self.repository = repository
        self.calculator = calculator or DensityCalculator()
        self.chart_samples = chart_samples
        self._state = repository.load()
        self._history = MeasurementHistory(
            self._state.measurements,
            capacity=max_measurements,
            calculator=self.calculator,
        )
        self._density = self._compute_density(self._state)

    # ------------------------------------------------------------------
    # Чтение состояния

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def temperature(self) -> float:
        return self._state.current_temperature

    @property
    def gas_type(self) -> GasType:
        return self._state.gas_type

    @property
    def mixture_propane_percent(self) -> int:
        return self._state.mixture_propane_percent

    @property
    def density_unit(self) -> DensityUnit:
        return self._state.density_unit

    @property
    def density(self) -> float:
        """Текущая плотность, кг/л."""
        return self._density

    @property
    def measurements(self) -> List[MeasurementRecord]:
        return list(self._state.measurements)

    @property
    def display_density(self) -> float:
        """Текущая плотность в выбранной единице."""
        return convert_density(self._density, DensityUnit.KG_PER_L, self._state.density_unit)

    @property
    def density_delta(self) -> float:
        """Отклонение текущей плотности от плотности при 15°C, кг/л."""
        return self.calculator.calculate_density_delta(
            self._density, self._state.gas_type, self._state.mixture_propane_percent
        )

    def chart_series(self, sample_count: Optional[int] = None) -> ChartSeries:
        """Серия графика для текущего газа и доли пропана."""
        return build_chart_series(
            self._state.gas_type,
            self._state.mixture_propane_percent,
            sample_count or self.chart_samples,
            self.calculator,
        )

    # ------------------------------------------------------------------
    # Мутации

    def set_temperature(self, temperature: float) -> None:
        """Установить температуру (ограничивается диапазоном текущего газа)."""
        clamped = self.calculator.clamp_temperature(temperature, self._state.gas_type)
        self._apply(current_temperature=clamped)

    def set_gas_type(self, gas_type: Union[GasType, str]) -> None:
        self._apply(gas_type=GasType(gas_type))

    def set_mixture_propane_percent(self, percent: Union[int, float]) -> None:
        """Установить долю пропана (ограничивается 0-100%)."""
        self._apply(mixture_propane_percent=clamp_mixture_percent(percent))

    def set_density_unit(self, unit: Union[DensityUnit, str]) -> None:
        self._apply(density_unit=DensityUnit(unit))

    def add_measurement(self) -> MeasurementRecord:
        """Сохранить снимок текущего расчёта в историю."""
        record = self._history.add(
            self._state.current_temperature,
            self._state.gas_type,
            self._state.mixture_propane_percent,
        )
        self._apply(measurements=self._history.records)
        return record

    def remove_measurement(self, record_id: str) -> bool:
        """Удалить запись истории; отсутствующий id игнорируется."""
        removed = self._history.remove(record_id)
        self._apply(measurements=self._history.records)
        return removed

    def clear_measurements(self) -> None:
        self._history.clear()
        self._apply(measurements=self._history.records)

    # ------------------------------------------------------------------

    def _compute_density(self, state: DashboardState) -> float:
        return self.calculator.calculate_density(
            state.current_temperature,
            state.gas_type,
            state.mixture_propane_percent,
        ).density

    def _apply(self, **changes) -> None:
        """Заменить состояние, пересчитать плотность и сохранить."""
        self._state = self._state.model_copy(update=changes)
        self._density = self._compute_density(self._state)
        if not self.repository.save(self._state):
            logger.debug("Dashboard state change kept in memory only")
