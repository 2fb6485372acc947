"""
Настройка логирования дашборда плотности.

Все модули пакета пишут в логгеры вида logging.getLogger(__name__) под
корневым логгером "lpg_density"; здесь к нему подключаются консольный и
(опционально) ротируемый файловый обработчики.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "lpg_density"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_level: Union[str, int] = "INFO",
    enable_console_logging: bool = True,
    enable_file_logging: bool = False,
    logs_dir: Union[str, Path] = "logs",
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    stream=None
) -> logging.Logger:
    """
    Настроить логгер пакета.

    Повторный вызов заменяет ранее установленные обработчики.

    Args:
        log_level: Уровень логирования
        enable_console_logging: Включить логирование в консоль
        enable_file_logging: Включить логирование в файл
        logs_dir: Директория для логов
        max_file_size: Максимальный размер файла лога
        backup_count: Количество backup файлов
        stream: Поток для консольного вывода (по умолчанию stderr)

    Returns:
        Настроенный логгер "lpg_density"
    """
    if isinstance(log_level, str):
        log_level = log_level.upper()

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(log_level)

    # Очищаем существующие handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if enable_console_logging:
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if enable_file_logging:
        logs_path = Path(logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            logs_path / "dashboard.log",
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
