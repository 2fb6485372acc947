"""
Текстовый интерфейс дашборда плотности.

Разбирает короткие команды пользователя и вызывает соответствующие
операции DensityDashboard.
"""

import logging
from typing import Optional

from .calculations.unit_converter import format_density
from .dashboard import DensityDashboard
from .formatting.table_formatter import TableFormatter, format_temperature
from .models.gas import DensityUnit, GasType

logger = logging.getLogger(__name__)

HELP_TEXT = """Команды:
  t <°C>          установить температуру (-50...+50)
  gas <тип>       propane | butane | mixed
  mix <%>         доля пропана в смеси (0-100)
  unit <ед.>      kg/L | g/cm³ | kg/m³ | lb/gal
  add             сохранить текущее измерение
  rm <id>         удалить измерение
  clear           очистить историю
  history         показать историю
  chart           таблица плотности по диапазону температур
  csv             экспорт истории в CSV
  help            эта справка
  quit            выход"""

# Ввод единиц без надстрочных символов
_UNIT_ALIASES = {
    "g/cm3": DensityUnit.G_PER_CM3,
    "kg/m3": DensityUnit.KG_PER_M3,
}


class QuitRequested(Exception):
    """Пользователь запросил завершение работы."""


def render_status(dashboard: DensityDashboard) -> str:
    """Сводка текущего состояния дашборда."""
    unit = dashboard.density_unit
    gas_line = dashboard.gas_type.value
    if dashboard.gas_type == GasType.MIXED:
        gas_line += f" (пропан {dashboard.mixture_propane_percent}%)"

    lines = [
        f"Газ: {gas_line}",
        f"Плотность: {format_density(dashboard.density, unit)} {unit.value} "
        f"при {format_temperature(dashboard.temperature)}",
    ]
    delta = TableFormatter.format_density_delta(dashboard.density_delta, unit)
    if delta:
        lines.append(delta)
    return "\n".join(lines)


def parse_unit(value: str) -> DensityUnit:
    if value in _UNIT_ALIASES:
        return _UNIT_ALIASES[value]
    return DensityUnit(value)


def handle_command(
    dashboard: DensityDashboard,
    line: str,
    formatter: Optional[TableFormatter] = None
) -> str:
    """
    Выполнить одну команду.

    Args:
        dashboard: Контроллер дашборда
        line: Строка ввода
        formatter: Форматтер таблиц

    Returns:
        Текст ответа

    Raises:
        QuitRequested: На команду quit/exit
    """
    formatter = formatter or TableFormatter()
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return ""

    command = parts[0].lower()
    argument = parts[1].strip() if len(parts) > 1 else ""

    try:
        if command in ("quit", "exit", "q"):
            raise QuitRequested()
        if command == "help":
            return HELP_TEXT
        if command == "t":
            dashboard.set_temperature(float(argument.replace(",", ".")))
        elif command == "gas":
            dashboard.set_gas_type(argument.lower())
        elif command == "mix":
            dashboard.set_mixture_propane_percent(float(argument.replace(",", ".")))
        elif command == "unit":
            dashboard.set_density_unit(parse_unit(argument))
        elif command == "add":
            record = dashboard.add_measurement()
            return f"Сохранено измерение {record.id}"
        elif command == "rm":
            if not dashboard.remove_measurement(argument):
                return f"Измерение {argument} не найдено"
            return f"Удалено измерение {argument}"
        elif command == "clear":
            dashboard.clear_measurements()
            return "История очищена"
        elif command == "history":
            return formatter.format_history_table(dashboard.measurements, dashboard.density_unit)
        elif command == "chart":
            return formatter.format_series_table(dashboard.chart_series(), dashboard.density_unit)
        elif command == "csv":
            return formatter.format_csv_export(dashboard.measurements, dashboard.density_unit)
        else:
            return f"Неизвестная команда: {command}. Введите help"
    except ValueError as e:
        logger.debug(f"Rejected command {line!r}: {e}")
        return f"Некорректное значение: {argument!r}"

    return render_status(dashboard)
