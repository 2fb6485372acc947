"""История измерений плотности."""

from .measurement_history import MeasurementHistory, generate_measurement_id

__all__ = ["MeasurementHistory", "generate_measurement_id"]
