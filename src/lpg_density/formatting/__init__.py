"""
Модуль форматирования вывода дашборда.

- TableFormatter - таблицы истории и точек графика, экспорт CSV
- format_temperature / format_relative_time - строки для отображения
"""

from .table_formatter import (
    TableFormatter,
    format_relative_time,
    format_temperature,
    short_gas_name,
    temperature_category,
)
from ..calculations.unit_converter import format_density

__all__ = [
    "TableFormatter",
    "format_density",
    "format_relative_time",
    "format_temperature",
    "short_gas_name",
    "temperature_category",
]
