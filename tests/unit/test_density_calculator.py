"""
Тесты для DensityCalculator.

Проверяем линейную модель плотности, смешивание пропана и бутана,
ограничение температуры, доли пропана и коридора плотности.
"""

import pytest

from lpg_density.calculations.density_calculator import (
    GAS_PROPERTIES,
    DensityCalculator,
    calculate_density,
    calculate_density_delta,
    calculate_mixture_properties,
)
from lpg_density.models.gas import DensityCalculation, GasType


class TestDensityCalculator:
    """Тесты для DensityCalculator."""

    @pytest.fixture
    def calculator(self):
        """Фикстура с калькулятором."""
        return DensityCalculator()

    def test_gas_property_table(self):
        """Справочные свойства пропана и бутана."""
        propane = GAS_PROPERTIES[GasType.PROPANE]
        butane = GAS_PROPERTIES[GasType.BUTANE]

        assert propane.density_at_15c == 0.508
        assert propane.thermal_expansion_coefficient == -0.00107
        assert butane.density_at_15c == 0.573
        assert butane.thermal_expansion_coefficient == -0.00104
        for props in GAS_PROPERTIES.values():
            assert (props.min_temp, props.max_temp) == (-50.0, 50.0)

    def test_reference_point_propane(self, calculator):
        """При 15°C плотность пропана равна справочной."""
        result = calculator.calculate_density(15, GasType.PROPANE)

        assert isinstance(result, DensityCalculation)
        assert result.density == 0.508
        assert result.temperature == 15
        assert result.gas_type == GasType.PROPANE
        assert result.timestamp > 0

    def test_reference_point_butane(self, calculator):
        assert calculator.calculate_density(15, "butane").density == 0.573

    def test_linear_formula(self, calculator):
        """ρ(T) = ρ₀ + k·(T − 15)."""
        result = calculator.calculate_density(0, GasType.PROPANE)
        expected = 0.508 + (-0.00107) * (0 - 15)

        assert result.density == pytest.approx(expected, abs=1e-4)
        assert result.density > 0.508

    def test_temperature_above_range_clamped(self, calculator):
        """T = 100 для пропана даёт тот же результат, что и T = 50."""
        hot = calculator.calculate_density(100, GasType.PROPANE)
        boundary = calculator.calculate_density(50, GasType.PROPANE)

        assert hot.density == boundary.density
        assert hot.temperature == 50

    def test_temperature_below_range_clamped(self, calculator):
        cold = calculator.calculate_density(-80, GasType.BUTANE)
        boundary = calculator.calculate_density(-50, GasType.BUTANE)

        assert cold.density == boundary.density
        assert cold.temperature == -50

    def test_butane_at_minus_50(self, calculator):
        """Бутан при −50°C: 0.573 + (−0.00104)·(−65) = 0.6406."""
        result = calculator.calculate_density(-50, GasType.BUTANE)

        assert result.density == pytest.approx(0.6406, abs=1e-9)
        assert result.density <= 0.65

    @pytest.mark.parametrize("ratio", [0, 10, 25, 50, 60, 75, 99, 100])
    def test_mixed_density_at_reference(self, calculator, ratio):
        """Плотность смеси при 15°C - линейная комбинация справочных."""
        result = calculator.calculate_density(15, GasType.MIXED, ratio)
        expected = 0.508 * ratio / 100 + 0.573 * (1 - ratio / 100)

        assert result.density == pytest.approx(expected, abs=1e-4)

    def test_mixed_extremes_match_pure_gases(self, calculator):
        for temp in (-50, -12.5, 15, 33, 50):
            assert calculator.calculate_density(temp, GasType.MIXED, 100).density == \
                calculator.calculate_density(temp, GasType.PROPANE).density
            assert calculator.calculate_density(temp, GasType.MIXED, 0).density == \
                calculator.calculate_density(temp, GasType.BUTANE).density

    def test_mixture_ratio_clamped(self, calculator):
        """Доля пропана вне 0-100% ограничивается."""
        assert calculator.calculate_density(-10, GasType.MIXED, 150).density == \
            calculator.calculate_density(-10, GasType.MIXED, 100).density
        assert calculator.calculate_density(-10, GasType.MIXED, -20).density == \
            calculator.calculate_density(-10, GasType.MIXED, 0).density

    def test_mixture_properties(self, calculator):
        """Плотность и коэффициент смешиваются независимо."""
        props = calculator.calculate_mixture_properties(60)

        assert props.density_at_15c == pytest.approx(0.508 * 0.6 + 0.573 * 0.4)
        assert props.thermal_expansion_coefficient == pytest.approx(-0.00107 * 0.6 + -0.00104 * 0.4)
        assert props.name == "Смесь"

    def test_get_gas_properties(self, calculator):
        assert calculator.get_gas_properties(GasType.PROPANE) is GAS_PROPERTIES[GasType.PROPANE]
        mixed = calculator.get_gas_properties(GasType.MIXED, 0)
        assert mixed.density_at_15c == pytest.approx(0.573)

    def test_density_band(self):
        """Плотность ограничивается коридором безопасности."""
        calculator = DensityCalculator(min_density=0.5, max_density=0.55)

        assert calculator.calculate_density(50, GasType.PROPANE).density == 0.5
        assert calculator.calculate_density(-50, GasType.BUTANE).density == 0.55

    def test_density_rounded_to_four_decimals(self, calculator):
        for temp in (-47.3, -1.1, 7.77, 42.42):
            density = calculator.calculate_density(temp, GasType.MIXED, 37).density
            assert density == round(density, 4)

    def test_density_decreases_with_temperature(self, calculator):
        densities = [calculator.calculate_density(t, GasType.PROPANE).density for t in range(-50, 51, 10)]
        assert densities == sorted(densities, reverse=True)

    def test_density_delta(self, calculator):
        """Отклонение от плотности при 15°C."""
        at_reference = calculator.calculate_density(15, GasType.BUTANE).density
        cold = calculator.calculate_density(-20, GasType.BUTANE).density

        assert calculator.calculate_density_delta(at_reference, GasType.BUTANE) == 0
        assert calculator.calculate_density_delta(cold, GasType.BUTANE) == pytest.approx(0.00104 * 35, abs=1e-4)

    def test_unknown_gas_type(self, calculator):
        with pytest.raises(ValueError):
            calculator.calculate_density(15, "methane")


class TestModuleFunctions:
    """Функции уровня модуля используют калькулятор по умолчанию."""

    def test_calculate_density(self):
        assert calculate_density(15, "propane").density == 0.508

    def test_default_mixture_percent(self):
        assert calculate_density(15, GasType.MIXED).density == \
            calculate_density(15, GasType.MIXED, 60).density

    def test_calculate_mixture_properties(self):
        assert calculate_mixture_properties(100).density_at_15c == pytest.approx(0.508)

    def test_calculate_density_delta(self):
        assert calculate_density_delta(0.508, GasType.PROPANE) == pytest.approx(0.0)
