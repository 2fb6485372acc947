"""
Калькулятор плотности жидкой фазы пропана, бутана и их смеси.

Использует линейную аппроксимацию по данным Engineering Toolbox:

    ρ(T) = ρ₀ + k·(T − T₀)

где ρ₀ - плотность при T₀ = 15°C, k - линейный температурный коэффициент
(отрицательный: плотность падает с ростом температуры). Точность модели
около ±0.001 кг/л в диапазоне от −50°C до +50°C.
"""

import time
from typing import Dict, Union

from ..config import MAX_DENSITY, MIN_DENSITY, REFERENCE_TEMPERATURE, DASHBOARD_CONFIG
from ..models.gas import (
    DensityCalculation,
    GasProperties,
    GasType,
    clamp_mixture_percent,
)

DEFAULT_MIXTURE_PERCENT: int = DASHBOARD_CONFIG["default_mixture_percent"]

# Физические свойства сжиженных углеводородных газов
GAS_PROPERTIES: Dict[GasType, GasProperties] = {
    GasType.PROPANE: GasProperties(
        name="Пропан (C₃H₈)",
        density_at_15c=0.508,
        thermal_expansion_coefficient=-0.00107,
        min_temp=-50.0,
        max_temp=50.0,
    ),
    GasType.BUTANE: GasProperties(
        name="Бутан (C₄H₁₀)",
        density_at_15c=0.573,
        thermal_expansion_coefficient=-0.00104,
        min_temp=-50.0,
        max_temp=50.0,
    ),
    # Для смеси значения справочные, расчёт всегда идёт через долю пропана
    GasType.MIXED: GasProperties(
        name="Смесь",
        density_at_15c=0.535,
        thermal_expansion_coefficient=-0.001055,
        min_temp=-50.0,
        max_temp=50.0,
    ),
}


def _now_ms() -> int:
    return int(time.time() * 1000)


class DensityCalculator:
    """
    Детерминированный калькулятор плотности СУГ.

    Входные значения вне допустимых диапазонов не отклоняются, а
    ограничиваются границами: температура - диапазоном газа, доля
    пропана - диапазоном 0-100%, плотность - коридором [0.45, 0.65] кг/л.
    """

    def __init__(
        self,
        reference_temperature: float = REFERENCE_TEMPERATURE,
        min_density: float = MIN_DENSITY,
        max_density: float = MAX_DENSITY,
        precision: int = DASHBOARD_CONFIG["density_precision"],
    ):
        """
        Инициализация калькулятора.

        Args:
            reference_temperature: Температура калибровки модели, °C
            min_density: Нижняя граница плотности, кг/л
            max_density: Верхняя граница плотности, кг/л
            precision: Количество знаков после запятой в результате
        """
        self.T_REF = reference_temperature
        self.min_density = min_density
        self.max_density = max_density
        self.precision = precision

    def calculate_mixture_properties(self, propane_percent: Union[int, float]) -> GasProperties:
        """
        Свойства смеси пропан/бутан по доле пропана.

        Плотность при 15°C и температурный коэффициент смешиваются
        независимо и линейно:
        value = propane·(r/100) + butane·(1 − r/100)

        Args:
            propane_percent: Доля пропана, % (ограничивается 0-100)

        Returns:
            GasProperties смеси
        """
        propane = GAS_PROPERTIES[GasType.PROPANE]
        butane = GAS_PROPERTIES[GasType.BUTANE]
        mixed = GAS_PROPERTIES[GasType.MIXED]

        propane_fraction = clamp_mixture_percent(propane_percent) / 100
        butane_fraction = 1 - propane_fraction

        return GasProperties(
            name=mixed.name,
            density_at_15c=(
                propane.density_at_15c * propane_fraction
                + butane.density_at_15c * butane_fraction
            ),
            thermal_expansion_coefficient=(
                propane.thermal_expansion_coefficient * propane_fraction
                + butane.thermal_expansion_coefficient * butane_fraction
            ),
            min_temp=mixed.min_temp,
            max_temp=mixed.max_temp,
        )

    def get_gas_properties(
        self,
        gas_type: Union[GasType, str],
        mixture_percent: Union[int, float] = DEFAULT_MIXTURE_PERCENT
    ) -> GasProperties:
        """Эффективные свойства газа (для смеси - рассчитанные по доле пропана)."""
        gas_type = GasType(gas_type)
        if gas_type == GasType.MIXED:
            return self.calculate_mixture_properties(mixture_percent)
        return GAS_PROPERTIES[gas_type]

    def clamp_temperature(self, temperature: float, gas_type: Union[GasType, str]) -> float:
        """Ограничить температуру допустимым диапазоном газа."""
        props = GAS_PROPERTIES[GasType(gas_type)]
        return max(props.min_temp, min(props.max_temp, float(temperature)))

    def calculate_density(
        self,
        temperature: float,
        gas_type: Union[GasType, str],
        mixture_percent: Union[int, float] = DEFAULT_MIXTURE_PERCENT
    ) -> DensityCalculation:
        """
        Расчёт плотности жидкой фазы при температуре T.

        Формула:
        ρ(T) = ρ₀ + k·(T_clamped − 15)

        Args:
            temperature: Температура, °C
            gas_type: Тип газа
            mixture_percent: Доля пропана в смеси, % (только для mixed)

        Returns:
            DensityCalculation с ограниченной температурой и плотностью
            в кг/л, округлённой до 4 знаков
        """
        gas_type = GasType(gas_type)
        props = self.get_gas_properties(gas_type, mixture_percent)

        clamped_temp = self.clamp_temperature(temperature, gas_type)

        # Коэффициент отрицательный: плотность уменьшается с ростом температуры
        density = props.density_at_15c + props.thermal_expansion_coefficient * (clamped_temp - self.T_REF)

        # Типичный коридор плотности жидкого СУГ
        bounded_density = max(self.min_density, min(self.max_density, density))

        return DensityCalculation(
            temperature=clamped_temp,
            density=round(bounded_density, self.precision),
            gas_type=gas_type,
            timestamp=_now_ms(),
        )

    def calculate_density_delta(
        self,
        current_density: float,
        gas_type: Union[GasType, str],
        mixture_percent: Union[int, float] = DEFAULT_MIXTURE_PERCENT
    ) -> float:
        """
        Отклонение плотности от значения при температуре калибровки (15°C).

        Args:
            current_density: Текущая плотность, кг/л
            gas_type: Тип газа
            mixture_percent: Доля пропана в смеси, %

        Returns:
            Разность current_density − ρ(15°C), кг/л
        """
        reference = self.calculate_density(self.T_REF, gas_type, mixture_percent)
        return current_density - reference.density


_default_calculator = DensityCalculator()


def calculate_density(
    temperature: float,
    gas_type: Union[GasType, str],
    mixture_percent: Union[int, float] = DEFAULT_MIXTURE_PERCENT
) -> DensityCalculation:
    """Расчёт плотности калькулятором с параметрами по умолчанию."""
    return _default_calculator.calculate_density(temperature, gas_type, mixture_percent)


def calculate_mixture_properties(propane_percent: Union[int, float]) -> GasProperties:
    """Свойства смеси калькулятором с параметрами по умолчанию."""
    return _default_calculator.calculate_mixture_properties(propane_percent)


def calculate_density_delta(
    current_density: float,
    gas_type: Union[GasType, str],
    mixture_percent: Union[int, float] = DEFAULT_MIXTURE_PERCENT
) -> float:
    """Отклонение от плотности при 15°C калькулятором с параметрами по умолчанию."""
    return _default_calculator.calculate_density_delta(current_density, gas_type, mixture_percent)
