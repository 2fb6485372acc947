"""
Pydantic-модели предметной области дашборда плотности СУГ.

Содержит перечисления типов газа и единиц плотности, физические свойства
газов, результат расчёта плотности, запись истории измерений и
сохраняемое состояние дашборда.
"""

import math
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..config import MAX_MEASUREMENTS


class GasType(str, Enum):
    """Тип сжиженного газа."""
    PROPANE = "propane"
    BUTANE = "butane"
    MIXED = "mixed"


class DensityUnit(str, Enum):
    """Единицы измерения плотности."""
    KG_PER_L = "kg/L"
    G_PER_CM3 = "g/cm³"
    KG_PER_M3 = "kg/m³"
    LB_PER_GAL = "lb/gal"


def clamp_mixture_percent(value: Any) -> int:
    """
    Привести долю пропана к целому проценту в диапазоне [0, 100].

    Raises:
        ValueError: Если значение не является числом
    """
    if isinstance(value, bool):
        raise ValueError("mixture percent must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"mixture percent must be a number, got {value!r}") from e
    if math.isnan(number):
        raise ValueError("mixture percent must not be NaN")
    return int(max(0, min(100, round(number))))


class GasProperties(BaseModel):
    """Физические свойства газа для линейной модели плотности."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Отображаемое название")
    density_at_15c: float = Field(..., description="Плотность при 15°C, кг/л")
    thermal_expansion_coefficient: float = Field(
        ..., description="Линейный температурный коэффициент, кг/л/°C"
    )
    min_temp: float = Field(..., description="Минимальная температура, °C")
    max_temp: float = Field(..., description="Максимальная температура, °C")

    @field_validator("max_temp")
    @classmethod
    def validate_temperature_range(cls, v, info):
        """Validate that max_temp > min_temp."""
        if "min_temp" in info.data and v <= info.data["min_temp"]:
            raise ValueError("max_temp must be greater than min_temp")
        return v


class DensityCalculation(BaseModel):
    """Результат расчёта плотности (не сохраняется)."""

    model_config = ConfigDict(frozen=True)

    temperature: float = Field(..., description="Температура после ограничения диапазоном, °C")
    density: float = Field(..., description="Плотность, кг/л")
    gas_type: GasType
    timestamp: int = Field(..., description="Время расчёта, мс с эпохи")


class MeasurementRecord(BaseModel):
    """Сохранённый снимок измерения."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    temperature: float = Field(..., allow_inf_nan=False)
    density: float = Field(..., allow_inf_nan=False)
    gas_type: GasType = Field(..., alias="gasType")
    timestamp: int = Field(..., description="Время измерения, мс с эпохи")


class DashboardState(BaseModel):
    """
    Полное сохраняемое состояние дашборда.

    Сериализуется с camelCase-алиасами, измерения хранятся от новых к старым
    и ограничены MAX_MEASUREMENTS записями.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    current_temperature: float = Field(15.0, alias="currentTemperature", allow_inf_nan=False)
    gas_type: GasType = Field(GasType.PROPANE, alias="gasType")
    mixture_propane_percent: int = Field(60, alias="mixturePropanePercent")
    density_unit: DensityUnit = Field(DensityUnit.KG_PER_L, alias="densityUnit")
    measurements: List[MeasurementRecord] = Field(default_factory=list)

    @field_validator("mixture_propane_percent", mode="before")
    @classmethod
    def validate_mixture_percent(cls, v):
        """Ограничить долю пропана диапазоном 0-100."""
        return clamp_mixture_percent(v)

    @field_validator("measurements", mode="before")
    @classmethod
    def validate_measurements(cls, v):
        """Отбросить повреждённые записи и лишние записи сверх лимита."""
        if not isinstance(v, (list, tuple)):
            raise ValueError("measurements must be a list")
        records = []
        for item in v:
            try:
                records.append(MeasurementRecord.model_validate(item))
            except ValidationError:
                continue
        return records[:MAX_MEASUREMENTS]

    @classmethod
    def from_persisted(cls, data: Any) -> "DashboardState":
        """
        Восстановить состояние из сохранённых данных.

        Каждое поле проверяется отдельно: отсутствующие или некорректные
        поля заменяются значениями по умолчанию, лишние поля игнорируются.

        Args:
            data: Результат разбора JSON (ожидается словарь)

        Returns:
            DashboardState, никогда не выбрасывает исключений валидации
        """
        if not isinstance(data, dict):
            return cls()

        values: Dict[str, Any] = {}
        for name, field_info in cls.model_fields.items():
            key = field_info.alias or name
            if key in data:
                raw = data[key]
            elif name in data:
                raw = data[name]
            else:
                continue
            if raw is None:
                continue
            try:
                values[name] = getattr(cls.model_validate({key: raw}), name)
            except ValidationError:
                continue

        return cls(**values)

    def to_persisted(self) -> Dict[str, Any]:
        """Сериализация в JSON-совместимый словарь с camelCase-ключами."""
        return self.model_dump(mode="json", by_alias=True)
