"""
Форматирование значений и таблиц дашборда с использованием tabulate.

Строки для отображения плотности и температуры, относительное время
измерений, таблицы истории и точек графика, экспорт в CSV.
"""

import time
from datetime import datetime
from typing import List, Optional, Union

import pandas as pd
from tabulate import tabulate

from ..calculations.chart_series import ChartSeries
from ..calculations.density_calculator import GAS_PROPERTIES
from ..calculations.unit_converter import convert_density, format_density
from ..models.gas import DensityUnit, MeasurementRecord


def format_temperature(temperature: float) -> str:
    """Температура со знаком: '+15.0°C', '-5.0°C', '0.0°C'."""
    sign = "+" if temperature > 0 else ""
    return f"{sign}{temperature:.1f}°C"


def format_relative_time(timestamp_ms: int, now_ms: Optional[int] = None) -> str:
    """
    Относительное время измерения.

    Args:
        timestamp_ms: Время измерения, мс с эпохи
        now_ms: Текущее время, мс с эпохи (по умолчанию - системное)

    Returns:
        "только что" | "N мин назад" | "N ч назад" | "дд.мм.гг, чч:мм"
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    diff_mins = (now_ms - timestamp_ms) // 60000

    if diff_mins < 1:
        return "только что"
    if diff_mins < 60:
        return f"{diff_mins} мин назад"
    if diff_mins < 1440:
        return f"{diff_mins // 60} ч назад"
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%d.%m.%y, %H:%M")


def temperature_category(temperature: float) -> str:
    """
    Категория температуры для визуальной индикации.

    Returns:
        "cold" | "cool" | "moderate" | "warm" | "hot"
    """
    if temperature <= -20:
        return "cold"
    elif temperature <= 0:
        return "cool"
    elif temperature <= 20:
        return "moderate"
    elif temperature <= 35:
        return "warm"
    return "hot"


def short_gas_name(gas_type) -> str:
    """Название газа без химической формулы: 'Пропан (C₃H₈)' → 'Пропан'."""
    return GAS_PROPERTIES[gas_type].name.split("(")[0].strip()


class TableFormatter:
    """
    Форматирование таблиц истории измерений и точек графика.
    """

    @staticmethod
    def format_density_delta(delta: float, unit: Union[DensityUnit, str] = DensityUnit.KG_PER_L) -> str:
        """
        Отклонение от плотности при 15°C для отображения.

        Returns:
            "+0.016 от 15°C" / "-0.016 от 15°C" или пустая строка,
            если |delta| < 0.001 кг/л
        """
        if abs(delta) < 0.001:
            return ""
        sign = "+" if delta > 0 else "-"
        return f"{sign}{format_density(abs(delta), unit)} от 15°C"

    def format_history_table(
        self,
        records: List[MeasurementRecord],
        unit: Union[DensityUnit, str] = DensityUnit.KG_PER_L,
        now_ms: Optional[int] = None
    ) -> str:
        """
        Таблица истории измерений.

        Args:
            records: Записи истории (новые первыми)
            unit: Единица отображения плотности
            now_ms: Текущее время для относительных меток

        Returns:
            Отформатированная таблица или сообщение о пустой истории
        """
        if not records:
            return "Нет сохраненных измерений"

        unit = DensityUnit(unit)
        headers = ["ID", f"Плотность ({unit.value})", "Температура", "Газ", "Время"]
        table_data = [
            [
                record.id,
                format_density(record.density, unit),
                format_temperature(record.temperature),
                short_gas_name(record.gas_type),
                format_relative_time(record.timestamp, now_ms),
            ]
            for record in records
        ]

        formatted_table = tabulate(
            table_data,
            headers=headers,
            tablefmt="grid",
            stralign="center",
            disable_numparse=True
        )
        return formatted_table + f"\n\nИзмерений: {len(records)}"

    def format_series_table(
        self,
        series: ChartSeries,
        unit: Union[DensityUnit, str] = DensityUnit.KG_PER_L
    ) -> str:
        """
        Таблица точек графика.

        Точка с температурой калибровки помечается как референсная.
        """
        unit = DensityUnit(unit)
        headers = ["T (°C)", f"ρ ({unit.value})", ""]
        table_data = []

        for _, row in series.to_dataframe().iterrows():
            T = row['temperature']
            marker = "референс" if abs(T - series.reference_temperature) < 1e-9 else ""
            table_data.append([
                format_temperature(T),
                format_density(row['density'], unit),
                marker
            ])

        return tabulate(
            table_data,
            headers=headers,
            tablefmt="simple",
            stralign="right",
            disable_numparse=True
        )

    def format_csv_export(
        self,
        records: List[MeasurementRecord],
        unit: Union[DensityUnit, str] = DensityUnit.KG_PER_L
    ) -> str:
        """
        Экспорт истории измерений в CSV.

        Колонки: id, timestamp (ISO 8601, UTC), gas_type, temperature, density.
        """
        unit = DensityUnit(unit)
        density_column = f"density ({unit.value})"

        df_export = pd.DataFrame(
            [record.model_dump() for record in records],
            columns=["id", "timestamp", "gas_type", "temperature", "density"]
        )
        if df_export.empty:
            return df_export.rename(columns={"density": density_column}).to_csv(index=False)

        df_export["timestamp"] = pd.to_datetime(df_export["timestamp"], unit="ms").dt.strftime("%Y-%m-%dT%H:%M:%S")
        df_export["gas_type"] = df_export["gas_type"].map(lambda g: getattr(g, "value", g))
        df_export[density_column] = df_export["density"].map(
            lambda d: convert_density(d, DensityUnit.KG_PER_L, unit)
        )
        df_export = df_export.drop(columns=["density"])

        return df_export.to_csv(index=False, float_format='%.4f')
