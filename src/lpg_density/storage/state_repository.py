"""
Репозиторий состояния дашборда.

Читает и записывает DashboardState целиком под одним ключом внедрённого
KeyValueStorage. Ошибки хранилища не пробрасываются вызывающему коду:
при чтении используется состояние по умолчанию, при записи - логирование
и возврат False.
"""

import json
import logging
from typing import Optional

from ..config import DEFAULT_STORAGE_KEY
from ..models.gas import DashboardState
from .key_value_storage import KeyValueStorage, StorageError

logger = logging.getLogger(__name__)


class StateRepository:
    """Загрузка и сохранение полного состояния дашборда."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY):
        """
        Args:
            storage: Хранилище строк по ключу
            key: Ключ, под которым хранится состояние
        """
        self.storage = storage
        self.key = key
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _read_raw(self) -> Optional[str]:
        try:
            return self.storage.read(self.key)
        except (StorageError, OSError) as e:
            self.logger.warning(f"Failed to read dashboard state '{self.key}': {e}")
            return None

    def load(self) -> DashboardState:
        """
        Загрузить состояние.

        Отсутствующее или повреждённое состояние заменяется значениями по
        умолчанию; частично корректное восстанавливается по полям.

        Returns:
            DashboardState
        """
        raw = self._read_raw()
        if raw is None:
            self.logger.debug(f"No stored state under '{self.key}', using defaults")
            return DashboardState()

        try:
            data = json.loads(raw)
        except ValueError as e:
            self.logger.warning(f"Stored state '{self.key}' is not valid JSON: {e}")
            return DashboardState()

        if not isinstance(data, dict):
            self.logger.warning(
                f"Stored state '{self.key}' has unexpected type {type(data).__name__}, using defaults"
            )
            return DashboardState()

        state = DashboardState.from_persisted(data)
        self.logger.info(
            f"Loaded dashboard state: {state.gas_type.value}, "
            f"{state.current_temperature}°C, {len(state.measurements)} measurements"
        )
        return state

    def save(self, state: DashboardState) -> bool:
        """
        Сохранить состояние целиком.

        Args:
            state: Состояние дашборда

        Returns:
            True если запись успешна, False при ошибке хранилища
        """
        payload = json.dumps(state.to_persisted(), ensure_ascii=False)
        try:
            self.storage.write(self.key, payload)
        except (StorageError, OSError) as e:
            self.logger.warning(f"Failed to save dashboard state '{self.key}': {e}")
            return False
        return True
