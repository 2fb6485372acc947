"""Модуль хранения состояния дашборда.

Предоставляет интерфейс Key-Value хранилища, его реализации в памяти и на
диске, а также репозиторий полного состояния.
"""

from .key_value_storage import InMemoryStorage, JsonFileStorage, KeyValueStorage, StorageError
from .state_repository import StateRepository

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "KeyValueStorage",
    "StorageError",
    "StateRepository",
]
