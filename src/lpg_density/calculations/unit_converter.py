"""
Перевод плотности между единицами измерения.

Все преобразования выполняются в два этапа через базовую единицу кг/л:
сначала to_base(value, from_unit), затем from_base(value, to_unit).
"""

from typing import Dict, Union

from ..models.gas import DensityUnit

# 1 lb/gal (US) ≈ 0.1198264 кг/л
KG_PER_L_IN_LB_PER_GAL = 0.1198264

# Множитель "единица → кг/л"
_TO_BASE_FACTORS: Dict[DensityUnit, float] = {
    DensityUnit.KG_PER_L: 1.0,
    DensityUnit.G_PER_CM3: 1.0,  # 1 г/см³ = 1 кг/л
    DensityUnit.KG_PER_M3: 1.0 / 1000,  # 1000 кг/м³ = 1 кг/л
    DensityUnit.LB_PER_GAL: KG_PER_L_IN_LB_PER_GAL,
}

# Знаков после запятой при отображении
DISPLAY_PRECISION: Dict[DensityUnit, int] = {
    DensityUnit.KG_PER_L: 3,
    DensityUnit.G_PER_CM3: 3,
    DensityUnit.KG_PER_M3: 1,
    DensityUnit.LB_PER_GAL: 2,
}

UnitLike = Union[DensityUnit, str]


def to_base(value: float, unit: UnitLike) -> float:
    """Перевести значение из unit в кг/л."""
    unit = DensityUnit(unit)
    if unit == DensityUnit.KG_PER_M3:
        return value / 1000
    return value * _TO_BASE_FACTORS[unit]


def from_base(value: float, unit: UnitLike) -> float:
    """Перевести значение из кг/л в unit."""
    unit = DensityUnit(unit)
    if unit == DensityUnit.KG_PER_M3:
        return value * 1000
    return value / _TO_BASE_FACTORS[unit]


def convert_density(value: float, from_unit: UnitLike, to_unit: UnitLike) -> float:
    """
    Перевести плотность между единицами.

    Args:
        value: Значение плотности в from_unit
        from_unit: Исходная единица
        to_unit: Целевая единица

    Returns:
        Значение в to_unit

    Raises:
        ValueError: Если единица не входит в DensityUnit
    """
    return from_base(to_base(value, from_unit), to_unit)


def format_density(density: float, unit: UnitLike = DensityUnit.KG_PER_L) -> str:
    """
    Отформатировать плотность (в кг/л) для отображения в заданной единице.

    Точность: 3 знака для кг/л и г/см³, 1 для кг/м³, 2 для lb/gal.
    """
    unit = DensityUnit(unit)
    converted = convert_density(density, DensityUnit.KG_PER_L, unit)
    return f"{converted:.{DISPLAY_PRECISION[unit]}f}"
