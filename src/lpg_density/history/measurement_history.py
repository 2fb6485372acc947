"""
История измерений плотности.

Упорядоченная коллекция снимков (новые первыми) с ограничением по
количеству: при переполнении вытесняются самые старые по порядку
добавления записи, а не по timestamp.
"""

import logging
import random
import string
from typing import Iterable, Iterator, List, Optional, Union

from ..config import MAX_MEASUREMENTS
from ..calculations.density_calculator import DensityCalculator
from ..models.gas import GasType, MeasurementRecord

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_measurement_id(timestamp_ms: int) -> str:
    """Идентификатор вида '<timestamp>-<9 символов base36>'."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{timestamp_ms}-{suffix}"


class MeasurementHistory:
    """Ограниченная история измерений."""

    def __init__(
        self,
        records: Optional[Iterable[MeasurementRecord]] = None,
        capacity: int = MAX_MEASUREMENTS,
        calculator: Optional[DensityCalculator] = None
    ):
        """
        Инициализация истории.

        Args:
            records: Начальные записи (новые первыми)
            capacity: Максимальное количество записей
            calculator: Калькулятор плотности для новых снимков
        """
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self.calculator = calculator or DensityCalculator()
        self._records: List[MeasurementRecord] = list(records or [])[:capacity]

    def add(
        self,
        temperature: float,
        gas_type: Union[GasType, str],
        mixture_percent: int
    ) -> MeasurementRecord:
        """
        Добавить снимок текущего расчёта в начало истории.

        Плотность пересчитывается заново, идентификатор генерируется
        уникальным в пределах истории. Лишние старые записи вытесняются.

        Returns:
            Созданная запись
        """
        calculation = self.calculator.calculate_density(temperature, gas_type, mixture_percent)

        existing_ids = {record.id for record in self._records}
        record_id = generate_measurement_id(calculation.timestamp)
        while record_id in existing_ids:
            record_id = generate_measurement_id(calculation.timestamp)

        record = MeasurementRecord(
            id=record_id,
            temperature=calculation.temperature,
            density=calculation.density,
            gas_type=calculation.gas_type,
            timestamp=calculation.timestamp,
        )

        self._records = [record, *self._records][:self.capacity]
        logger.debug(f"Added measurement {record.id}: {record.density} kg/L at {record.temperature}°C")
        return record

    def remove(self, record_id: str) -> bool:
        """
        Удалить запись по идентификатору.

        Returns:
            True если запись была удалена, False если не найдена
        """
        remaining = [record for record in self._records if record.id != record_id]
        removed = len(remaining) != len(self._records)
        self._records = remaining
        return removed

    def clear(self) -> None:
        """Очистить историю."""
        self._records = []

    @property
    def records(self) -> List[MeasurementRecord]:
        """Копия списка записей (новые первыми)."""
        return list(self._records)

    def __iter__(self) -> Iterator[MeasurementRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"MeasurementHistory(size={len(self)}, capacity={self.capacity})"
