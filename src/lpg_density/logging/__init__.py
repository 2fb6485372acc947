"""Логирование дашборда плотности."""

from .dashboard_logger import LOG_FORMAT, PACKAGE_LOGGER_NAME, setup_logging

__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER_NAME", "setup_logging"]
